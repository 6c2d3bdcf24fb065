"""Integration tests: a small call grammar built from the combinators.

See tests/helpers/grammar.py for the grammar.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from descentkit import (
    MissingElementError,
    SafetyMarginExceededError,
    UnexpectedCharacterError,
    parse,
    try_parse,
)
from descentkit.syntax.parser.core import describe
from tests.helpers.grammar import ARG, Call


class TestCallGrammar:
    """Well-formed input."""

    def test_bare_name(self) -> None:
        """A word without parentheses is a call with no arguments."""
        assert parse(Call, "f") == Call("f", [])

    def test_empty_arguments(self) -> None:
        """'()' is an optional empty argument list."""
        assert parse(Call, "f ( )") == Call("f", [])

    def test_nested_calls(self) -> None:
        """Arguments dispatch between digits and calls on one character."""
        assert parse(Call, "f(1, g(2, h), 30)") == Call(
            "f", [1, Call("g", [2, Call("h", [])]), 30]
        )

    def test_multiline_input(self) -> None:
        """Newlines are ambient whitespace."""
        source = "outer(\n    1,\n    inner(2)\n)\n"

        assert parse(Call, source) == Call("outer", [1, Call("inner", [2])])


class TestCallGrammarErrors:
    """Malformed input."""

    def test_unclosed_call(self) -> None:
        """Missing ')' names EOF."""
        with pytest.raises(UnexpectedCharacterError, match="Expected '\\)' but found 'EOF'"):
            parse(Call, "f(1, 2")

    def test_trailing_separator(self) -> None:
        """A trailing ',' requires another argument."""
        with pytest.raises(MissingElementError) as exc_info:
            parse(Call, "f(1,)")

        assert exc_info.value.expected == describe(ARG) == "Either(Digits, Call)"

    def test_wrong_separator(self) -> None:
        """Only ',' separates arguments."""
        _, errors = try_parse(Call, "f(1; 2)")

        assert isinstance(errors[0], UnexpectedCharacterError)
        assert errors[0].found == ";"

    def test_oversized_name(self) -> None:
        """Names are bounded by the token safety margin."""
        _, errors = try_parse(Call, "f" * 300)

        assert isinstance(errors[0], SafetyMarginExceededError)

    def test_too_many_arguments(self) -> None:
        """Argument lists are bounded by the list safety margin."""
        source = "f(" + ", ".join(["1"] * 128) + ")"

        _, errors = try_parse(Call, source)

        assert isinstance(errors[0], SafetyMarginExceededError)
        assert errors[0].limit == 127

    def test_limit_arguments_accepted(self) -> None:
        """Exactly 127 arguments is fine."""
        source = "f(" + ", ".join(["1"] * 127) + ")"

        value, errors = try_parse(Call, source)

        assert errors == ()
        assert value is not None
        assert len(value.args) == 127


@pytest.mark.fuzz
class TestCallGrammarFuzz:
    """Arbitrary input never escapes the protected boundary."""

    @given(source=st.text(alphabet="fgh(),0123456789 \n;", max_size=100))
    @settings(max_examples=2000, deadline=None)
    def test_try_parse_total(self, source: str) -> None:
        """PROPERTY: try_parse returns exactly one of a value or an error."""
        value, errors = try_parse(Call, source)

        assert (value is None) == (len(errors) == 1)
