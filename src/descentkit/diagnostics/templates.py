"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from descentkit.constants import END_OF_INPUT_MARKER

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _show(char: str | None) -> str:
    """Render a cursor character for a message, EOF marker when absent."""
    if char is None:
        return END_OF_INPUT_MARKER
    if char.isprintable():
        return char
    return repr(char)[1:-1]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every fatal
    condition the toolkit can raise in one place.
    """

    # =========================================================================
    # CURSOR ERRORS (3000-3009)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check peek() before advancing the cursor",
        )

    # =========================================================================
    # GRAMMAR ERRORS (3010-3019)
    # =========================================================================

    @staticmethod
    def missing_element(expected: str, found: str | None, span: SourceSpan | None) -> Diagnostic:
        """A required grammar element is absent.

        Args:
            expected: Name of the element kind that was required
            found: Next character on the cursor (None at EOF)
            span: Cursor location

        Returns:
            Diagnostic for MISSING_ELEMENT
        """
        msg = f"Expected {expected} but found '{_show(found)}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_ELEMENT,
            message=msg,
            span=span,
            hint=f"A {expected} is mandatory at this position",
            expected=expected,
            found=_show(found),
        )

    @staticmethod
    def unexpected_character(expected: str, found: str | None, span: SourceSpan | None) -> Diagnostic:
        """A required syntax character is absent.

        Args:
            expected: The syntax character the grammar required
            found: Next character on the cursor (None at EOF)
            span: Cursor location

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Expected '{_show(expected)}' but found '{_show(found)}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            expected=_show(expected),
            found=_show(found),
        )

    @staticmethod
    def trailing_input(found: str, span: SourceSpan | None) -> Diagnostic:
        """Input remains after a complete parse.

        Args:
            found: First unconsumed character
            span: Cursor location

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = f"Expected end of input but found '{_show(found)}'"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            span=span,
            hint="Remove the trailing text or parse with complete=False",
            expected=END_OF_INPUT_MARKER,
            found=_show(found),
        )

    # =========================================================================
    # LEXICAL ERRORS (3020-3029)
    # =========================================================================

    @staticmethod
    def illegal_escape(
        token: str, escape: str, found: str | None, span: SourceSpan | None
    ) -> Diagnostic:
        """Escape trigger followed by a character the token does not allow.

        Args:
            token: Token class name
            escape: The escape trigger character
            found: Character after the trigger (None at EOF)
            span: Cursor location (just after the trigger)

        Returns:
            Diagnostic for ILLEGAL_ESCAPE
        """
        msg = f"Illegal escape sequence '{_show(escape)}{_show(found)}' in {token}"
        return Diagnostic(
            code=DiagnosticCode.ILLEGAL_ESCAPE,
            message=msg,
            span=span,
            hint=f"Only characters allowed by the {token} escape rule may follow '{_show(escape)}'",
            found=_show(found),
        )

    # =========================================================================
    # SAFETY MARGINS (3030-3039)
    # =========================================================================

    @staticmethod
    def token_too_long(token: str, max_len: int, span: SourceSpan | None) -> Diagnostic:
        """Token reached its length safety margin.

        Args:
            token: Token class name
            max_len: Configured maximum length
            span: Cursor location

        Returns:
            Diagnostic for TOKEN_TOO_LONG
        """
        msg = f"{token} exceeded safety margin of {max_len} characters"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_TOO_LONG,
            message=msg,
            span=span,
            hint="Raise TokenRules.max_len if such tokens are legitimate",
        )

    @staticmethod
    def list_too_long(element: str, limit: int, span: SourceSpan | None) -> Diagnostic:
        """List reached its element-count safety margin.

        Args:
            element: Element kind name
            limit: Configured maximum element count
            span: Cursor location

        Returns:
            Diagnostic for LIST_TOO_LONG
        """
        msg = f"List of {element} exceeded safety margin of {limit} items"
        return Diagnostic(
            code=DiagnosticCode.LIST_TOO_LONG,
            message=msg,
            span=span,
            hint="Raise ListRules.limit if such lists are legitimate",
        )
