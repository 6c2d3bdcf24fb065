"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unexpected_eof(3)))
        UNEXPECTED_EOF: Unexpected EOF at position 3
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def __post_init__(self) -> None:
        """Validate formatter configuration.

        Raises:
            ValueError: If max_content_length is less than 1
        """
        if self.max_content_length < 1:
            msg = f"max_content_length must be >= 1, got {self.max_content_length}"
            raise ValueError(msg)

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_with_source(
        self, diagnostic: Diagnostic, source: str, context_lines: int = 2
    ) -> str:
        """Format diagnostic followed by the offending source lines.

        Shows the lines around the error and a caret under the error column.
        Falls back to format() when the diagnostic carries no span.

        Args:
            diagnostic: Diagnostic to format
            source: The text the cursor was reading
            context_lines: Number of lines to show before/after the error line

        Returns:
            Multi-line formatted error with context

        Example:
            >>> print(formatter.format_with_source(diagnostic, "f(1,\\n  2;"))
            error[UNEXPECTED_CHARACTER]: Expected ')' but found ';'
              --> line 2, column 4
              = expected: )
              = found: ;
            <BLANKLINE>
               1 | f(1,
               2 |   2;
                 |    ^
        """
        header = self.format(diagnostic)
        span = diagnostic.span
        if span is None:
            return header

        lines = source.split("\n")
        result_lines = [header, ""]

        start_line = max(1, span.line - context_lines)
        end_line = min(len(lines), span.line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == span.line:
                gutter = " " * (len(line_num_str) - 2) + "| "
                result_lines.append(gutter + " " * (span.column - 1) + "^")

        return "\n".join(result_lines)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[MISSING_ELEMENT]: Expected Number but found 'x'
              --> line 1, column 3
              = expected: Number
              = found: x
              = help: A Number is mandatory at this position
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.expected:
            parts.append(f"  = expected: {diagnostic.expected}")

        if diagnostic.found:
            parts.append(f"  = found: {diagnostic.found}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNEXPECTED_CHARACTER: Expected ')' but found ';'
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "TOKEN_TOO_LONG", "message": "...", "severity": "error"}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.expected:
            data["expected"] = diagnostic.expected

        if diagnostic.found:
            data["found"] = diagnostic.found

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
