"""Fatal parse error hierarchy with structured diagnostics.

Absence of an optional element is never an exception: parse functions return
None for it. Everything here is the fatal tier, raised for malformed input
or a safety margin violation. None of these are recoverable mid-parse; a
caller converts them at a boundary it controls (see try_parse).

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class GrammarError(Exception):
    """Base exception for all fatal parse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GrammarError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MissingElementError(GrammarError):
    """A mandatory grammar element is absent.

    Raised by require() and by list parsing when a separator is not
    followed by an element.

    Attributes:
        expected: Name of the element kind that was required
    """

    def __init__(self, message: str | Diagnostic, *, expected: str = "") -> None:
        super().__init__(message)
        self.expected = expected


class UnexpectedCharacterError(GrammarError):
    """A mandatory syntax character is absent.

    Attributes:
        expected: The character the grammar required
        found: The character on the cursor, or the EOF marker
    """

    def __init__(self, message: str | Diagnostic, *, expected: str = "", found: str = "") -> None:
        super().__init__(message)
        self.expected = expected
        self.found = found


class TrailingInputError(UnexpectedCharacterError):
    """Input remains after parsing a complete value."""


class IllegalEscapeError(GrammarError):
    """Escape trigger followed by a character the token class does not allow."""


class SafetyMarginExceededError(GrammarError):
    """Token length or list element count reached its configured limit.

    This is a resource-exhaustion guard, not a grammar rule: it indicates
    either adversarial input or a limit set too low for the grammar.

    Attributes:
        limit: The configured limit that was reached
    """

    def __init__(self, message: str | Diagnostic, *, limit: int = 0) -> None:
        super().__init__(message)
        self.limit = limit
