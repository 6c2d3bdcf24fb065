"""Parse contract, optional/required combinators and entry points.

Every parseable kind exposes one operation, parse(cursor), which either
consumes a prefix of the input and returns a value, or returns None having
consumed nothing. Grammar authors decide at each call site whether absence
is a normal alternative (maybe) or malformed input (require).

Error Handling:
    None is absence and is never an error. Malformed input raises a
    GrammarError subclass and is not recoverable within a parse. try_parse()
    is the protected-call boundary that turns the fatal tier into a value.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from descentkit.diagnostics import (
    ErrorTemplate,
    GrammarError,
    MissingElementError,
    TrailingInputError,
)
from descentkit.syntax.parser.primitives import end_of_parse, skip_whitespace
from descentkit.syntax.stream import CharStream, Cursor, span_of

__all__ = ["Parseable", "describe", "maybe", "parse", "require", "try_parse"]

logger = logging.getLogger(__name__)


class Parseable[T](Protocol):
    """Anything that can attempt to parse a T from a cursor.

    Satisfied by classes with a ``parse`` classmethod (Token subclasses,
    caller-defined grammar types) and by combinator instances (Either,
    ListOf).
    """

    def parse(self, cursor: Cursor, /) -> T | None: ...


def describe(kind: object) -> str:
    """Human-readable name of a parseable kind for diagnostics."""
    if isinstance(kind, type):
        return kind.__qualname__
    return repr(kind)


def maybe[T](kind: Parseable[T], cursor: Cursor) -> T | None:
    """Parse an optional element.

    Returns:
        The parsed value, or None if the element is not present
    """
    return kind.parse(cursor)


def require[T](kind: Parseable[T], cursor: Cursor) -> T:
    """Parse a mandatory element.

    Raises:
        MissingElementError: If the element is not present
    """
    result = maybe(kind, cursor)
    if result is None:
        expected = describe(kind)
        raise MissingElementError(
            ErrorTemplate.missing_element(expected, cursor.peek(), span_of(cursor)),
            expected=expected,
        )
    return result


def _as_cursor(source: str | Iterable[str] | Cursor) -> Cursor:
    if isinstance(source, Cursor):
        return source
    return CharStream(source)


def parse[T](
    kind: Parseable[T], source: str | Iterable[str] | Cursor, *, complete: bool = True
) -> T:
    """Parse one mandatory value of `kind` from `source`.

    Leading whitespace is skipped. With complete=True the value must
    account for the whole input.

    Args:
        kind: The kind to parse
        source: A string, any iterable of characters, or an existing cursor
        complete: Require that no input remains afterwards

    Returns:
        The parsed value

    Raises:
        GrammarError: On malformed input or a safety margin violation
        TrailingInputError: If complete=True and input remains
    """
    cursor = _as_cursor(source)
    skip_whitespace(cursor)
    value = require(kind, cursor)
    if complete and not end_of_parse(cursor):
        found = cursor.peek() or ""
        diagnostic = ErrorTemplate.trailing_input(found, span_of(cursor))
        raise TrailingInputError(
            diagnostic, expected=diagnostic.expected or "", found=diagnostic.found or ""
        )
    return value


def try_parse[T](
    kind: Parseable[T], source: str | Iterable[str] | Cursor, *, complete: bool = True
) -> tuple[T | None, tuple[GrammarError, ...]]:
    """Parse like parse(), converting fatal errors into a result.

    Only GrammarError is converted. Anything else (a bug in a predicate, a
    failing value constructor) propagates.

    Returns:
        Tuple of (value, errors). On success errors is empty; on failure
        value is None and errors holds the single error that ended the parse.

    Example:
        >>> value, errors = try_parse(ListOf(Number), "1, 2,")
        >>> value is None
        True
        >>> errors[0].diagnostic.code
        <DiagnosticCode.MISSING_ELEMENT: 3010>
    """
    try:
        return parse(kind, source, complete=complete), ()
    except GrammarError as e:
        logger.debug("Parse of %s failed: %s", describe(kind), e.diagnostic or e)
        return None, (e,)
