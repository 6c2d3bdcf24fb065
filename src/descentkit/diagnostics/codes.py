"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3009: Cursor errors (input exhausted)
        3010-3019: Grammar errors (required element or syntax missing)
        3020-3029: Lexical errors (tokenizer)
        3030-3039: Safety margin violations (resource exhaustion guards)
    """

    # Cursor errors (3000-3009)
    UNEXPECTED_EOF = 3001

    # Grammar errors (3010-3019)
    MISSING_ELEMENT = 3010
    UNEXPECTED_CHARACTER = 3011
    TRAILING_INPUT = 3012

    # Lexical errors (3020-3029)
    ILLEGAL_ESCAPE = 3020

    # Safety margins (3030-3039)
    TOKEN_TOO_LONG = 3030
    LIST_TOO_LONG = 3031


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Positions count characters (Unicode code points) pulled from the
        cursor, not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything a caller needs
    to report a fatal parse condition without re-inspecting the cursor.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Cursor location when the error was raised (None if unknown)
        hint: Suggestion for fixing the error
        expected: What the grammar required at this point
        found: What the cursor held instead (END_OF_INPUT_MARKER at EOF)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNEXPECTED_CHARACTER]: Expected ')' but found ';'
              --> line 1, column 9
              = expected: ')'
              = found: ';'
              = help: Close the group before continuing

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
