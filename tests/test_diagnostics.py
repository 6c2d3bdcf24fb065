"""Tests for diagnostics: codes, spans, templates, errors and formatting."""

from __future__ import annotations

import json

import pytest

from descentkit.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    GrammarError,
    IllegalEscapeError,
    MissingElementError,
    OutputFormat,
    SafetyMarginExceededError,
    SourceSpan,
    TrailingInputError,
    UnexpectedCharacterError,
)
from descentkit.syntax.parser.core import try_parse
from tests.helpers.grammar import Call

# ============================================================================
# SOURCE SPANS
# ============================================================================


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid_span(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=0, end=1, line=1, column=1)

        assert span.end == 1

    @pytest.mark.parametrize(
        ("start", "end", "line", "column", "field"),
        [
            (-1, 0, 1, 1, "start"),
            (3, 2, 1, 1, "end"),
            (0, 0, 0, 1, "line"),
            (0, 0, 1, 0, "column"),
        ],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int, field: str) -> None:
        """Invariant violations raise ValueError naming the field."""
        with pytest.raises(ValueError, match=field):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test message templates."""

    def test_unexpected_eof(self) -> None:
        """EOF diagnostics name the position."""
        diagnostic = ErrorTemplate.unexpected_eof(7)

        assert diagnostic.code == DiagnosticCode.UNEXPECTED_EOF
        assert str(diagnostic) == "Unexpected EOF at position 7"

    def test_missing_element(self) -> None:
        """Missing element diagnostics carry expected and found."""
        diagnostic = ErrorTemplate.missing_element("Digits", None, None)

        assert diagnostic.expected == "Digits"
        assert diagnostic.found == "EOF"
        assert diagnostic.hint == "A Digits is mandatory at this position"

    def test_unexpected_character_escapes_tab(self) -> None:
        """Control characters are rendered escaped."""
        diagnostic = ErrorTemplate.unexpected_character("\t", "x", None)

        assert diagnostic.message == "Expected '\\t' but found 'x'"

    def test_token_too_long(self) -> None:
        """Token margin diagnostics name the token and limit."""
        diagnostic = ErrorTemplate.token_too_long("Word", 255, None)

        assert diagnostic.code == DiagnosticCode.TOKEN_TOO_LONG
        assert diagnostic.message == "Word exceeded safety margin of 255 characters"

    def test_list_too_long(self) -> None:
        """List margin diagnostics name the element and limit."""
        diagnostic = ErrorTemplate.list_too_long("Digits", 127, None)

        assert diagnostic.code == DiagnosticCode.LIST_TOO_LONG
        assert diagnostic.message == "List of Digits exceeded safety margin of 127 items"

    def test_codes_are_unique(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestGrammarErrors:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [
            MissingElementError,
            UnexpectedCharacterError,
            TrailingInputError,
            IllegalEscapeError,
            SafetyMarginExceededError,
        ],
    )
    def test_all_derive_from_grammar_error(self, error_type: type[GrammarError]) -> None:
        """Callers can catch the whole fatal tier at once."""
        assert issubclass(error_type, GrammarError)

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = GrammarError("boom")

        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is stored and formatted into str()."""
        diagnostic = ErrorTemplate.unexpected_eof(0)
        error = GrammarError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[UNEXPECTED_EOF]: Unexpected EOF at position 0")

    def test_keyword_attributes(self) -> None:
        """Subclasses carry structured attributes."""
        error = UnexpectedCharacterError("x", expected=")", found="EOF")

        assert (error.expected, error.found) == (")", "EOF")
        assert SafetyMarginExceededError("x", limit=3).limit == 3
        assert MissingElementError("x", expected="Word").expected == "Word"


# ============================================================================
# FORMATTING
# ============================================================================


def _diagnostic() -> Diagnostic:
    return ErrorTemplate.unexpected_character(
        ")", ";", SourceSpan(start=9, end=10, line=2, column=4)
    )


class TestDiagnosticFormatter:
    """Test DiagnosticFormatter output styles."""

    def test_rust_format(self) -> None:
        """Default style is multi-line with location and details."""
        text = DiagnosticFormatter().format(_diagnostic())

        assert text.splitlines() == [
            "error[UNEXPECTED_CHARACTER]: Expected ')' but found ';'",
            "  --> line 2, column 4",
            "  = expected: )",
            "  = found: ;",
        ]

    def test_format_error_delegates(self) -> None:
        """Diagnostic.format_error() uses the default formatter."""
        assert _diagnostic().format_error() == DiagnosticFormatter().format(_diagnostic())

    def test_simple_format(self) -> None:
        """Simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(_diagnostic()) == (
            "UNEXPECTED_CHARACTER: Expected ')' but found ';'"
        )

    def test_json_format(self) -> None:
        """JSON style is machine readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(_diagnostic()))

        assert data["code"] == "UNEXPECTED_CHARACTER"
        assert data["code_value"] == 3011
        assert data["line"] == 2
        assert data["column"] == 4
        assert data["expected"] == ")"
        assert data["found"] == ";"
        assert "hint" not in data

    def test_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        text = DiagnosticFormatter(color=True).format(_diagnostic())

        assert text.startswith("\033[1;31merror\033[0m")

    def test_sanitize_truncates(self) -> None:
        """Sanitizing truncates long messages."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(_diagnostic()) == "UNEXPECTED_CHARACTER: Expected '..."

    def test_rejects_bad_length(self) -> None:
        """max_content_length must be positive."""
        with pytest.raises(ValueError, match="max_content_length"):
            DiagnosticFormatter(max_content_length=0)

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by a blank line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        text = formatter.format_all([_diagnostic(), ErrorTemplate.unexpected_eof(1)])

        assert text == (
            "UNEXPECTED_CHARACTER: Expected ')' but found ';'\n\n"
            "UNEXPECTED_EOF: Unexpected EOF at position 1"
        )

    def test_format_with_source(self) -> None:
        """Source context shows the line and a caret under the column."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        text = formatter.format_with_source(_diagnostic(), "f(1,\n  2;\nnext")

        assert text.splitlines() == [
            "UNEXPECTED_CHARACTER: Expected ')' but found ';'",
            "",
            "   1 | f(1,",
            "   2 |   2;",
            "     |    ^",
            "   3 | next",
        ]

    def test_format_with_source_without_span(self) -> None:
        """Without a span only the header is printed."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.unexpected_eof(0)

        assert formatter.format_with_source(diagnostic, "abc") == formatter.format(diagnostic)

    def test_end_to_end_location(self) -> None:
        """A real parse failure points at the offending character."""
        source = "f(1,\n  2;"
        _, errors = try_parse(Call, source)
        diagnostic = errors[0].diagnostic
        assert diagnostic is not None

        text = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_with_source(
            diagnostic, source
        )

        assert text.splitlines()[-1] == "     |    ^"
