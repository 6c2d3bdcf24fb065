"""Grammar combinators: two-way alternation and separator-delimited lists.

Both are generic over the Parseable contract and hold only immutable
configuration, so one instance can be shared by any number of parses.

Alternation is deliberately two-armed and one character wide. Grammars
with three or more mutually exclusive alternatives, or that need deeper
lookahead, should write an explicit dispatch function instead of nesting
Either instances.
"""

import logging
from dataclasses import dataclass

from descentkit.constants import DEFAULT_LIST_LIMIT, DEFAULT_LIST_SEPARATOR
from descentkit.diagnostics import ErrorTemplate, SafetyMarginExceededError
from descentkit.syntax.parser.core import Parseable, describe, maybe, require
from descentkit.syntax.parser.primitives import maybe_syntax
from descentkit.syntax.parser.tokens import Token
from descentkit.syntax.stream import Cursor, span_of

__all__ = ["Either", "Fallback", "ListOf", "ListRules", "Primary", "parse_list"]

logger = logging.getLogger(__name__)


# ============================================================================
# TWO-WAY ALTERNATION
# ============================================================================


@dataclass(frozen=True, slots=True)
class Primary[T]:
    """Outcome of Either when the first (token) arm matched."""

    value: T


@dataclass(frozen=True, slots=True)
class Fallback[T]:
    """Outcome of Either when the second arm matched."""

    value: T


class Either[T, U]:
    """Two-way alternation dispatching on one character.

    If the next character can start a `primary` token, the input is parsed
    as that token; otherwise it is parsed as `fallback`.

    Example:
        >>> digit_or_word = Either(Digits, Word)
        >>> digit_or_word.parse(CharStream("9x"))
        Primary(value=Digits(text='9'))
        >>> digit_or_word.parse(CharStream("x9"))
        Fallback(value=Word(text='x'))
    """

    __slots__ = ("fallback", "primary")

    def __init__(self, primary: type[Token], fallback: Parseable[U]) -> None:
        if not hasattr(primary, "tokenizer"):
            msg = f"{primary.__qualname__} declares no TokenRules"
            raise TypeError(msg)
        self.primary = primary
        self.fallback = fallback

    def __repr__(self) -> str:
        return f"Either({describe(self.primary)}, {describe(self.fallback)})"

    def parse(self, cursor: Cursor) -> Primary[T] | Fallback[U] | None:
        char = cursor.peek()
        if char is None:
            return None
        if self.primary.rules.first(char):
            value = self.primary.parse(cursor)
            return None if value is None else Primary(value)
        other = maybe(self.fallback, cursor)
        return None if other is None else Fallback(other)


# ============================================================================
# LISTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ListRules:
    """Configuration of a separator-delimited list.

    Attributes:
        sep: Separator character
        limit: Maximum element count (inclusive)
    """

    sep: str = DEFAULT_LIST_SEPARATOR
    limit: int = DEFAULT_LIST_LIMIT

    def __post_init__(self) -> None:
        """Validate ListRules invariants.

        Raises:
            ValueError: If sep is not a single character or limit is less than 1
        """
        if len(self.sep) != 1:
            msg = f"ListRules.sep must be a single character, got {self.sep!r}"
            raise ValueError(msg)
        if self.limit < 1:
            msg = f"ListRules.limit must be >= 1, got {self.limit}"
            raise ValueError(msg)


def parse_list[T](
    kind: Parseable[T], cursor: Cursor, rules: ListRules = ListRules()
) -> list[T] | None:
    """Parse a non-empty, separator-delimited list of `kind`.

    The first element is optional as a whole: if it is absent, nothing is
    consumed and None is returned. Every separator commits to one more
    element.

    Returns:
        The elements in input order, or None if no first element is present

    Raises:
        MissingElementError: If a separator is not followed by an element
        SafetyMarginExceededError: If a separator follows the limit-th element
    """
    first = maybe(kind, cursor)
    if first is None:
        return None
    elems = [first]
    while maybe_syntax(rules.sep, cursor):
        if len(elems) >= rules.limit:
            element = describe(kind)
            logger.debug("List of %s reached safety margin of %d", element, rules.limit)
            raise SafetyMarginExceededError(
                ErrorTemplate.list_too_long(element, rules.limit, span_of(cursor)),
                limit=rules.limit,
            )
        elems.append(require(kind, cursor))
    return elems


class ListOf[T]:
    """Parseable list of `element`.

    Separator and limit come from the keyword arguments, else from a
    ``list_rules`` attribute on the element kind, else from the defaults.

    Example:
        >>> class Number(Token, rules=TokenRules(accept=str.isdigit)):
        ...     list_rules = ListRules(sep=";", limit=8)
        >>> ListOf(Number).parse(CharStream("1; 2; 3"))
        [Number(text='1'), Number(text='2'), Number(text='3')]
    """

    __slots__ = ("element", "rules")

    def __init__(
        self, element: Parseable[T], *, sep: str | None = None, limit: int | None = None
    ) -> None:
        base: ListRules = getattr(element, "list_rules", None) or ListRules()
        self.element = element
        self.rules = ListRules(
            sep=base.sep if sep is None else sep,
            limit=base.limit if limit is None else limit,
        )

    def __repr__(self) -> str:
        return f"ListOf({describe(self.element)}, sep={self.rules.sep!r})"

    def parse(self, cursor: Cursor) -> list[T] | None:
        return parse_list(self.element, cursor, self.rules)
