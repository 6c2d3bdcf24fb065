"""Primitive parsing utilities.

Every operation in the toolkit is built on accept_if(), the only function
that advances a cursor. The rest of this module covers whitespace and fixed
syntax characters.

Consumption contract:
    A function that returns None (or False) has not consumed anything.
    A function that returns a value has consumed exactly the characters
    that make up that value, plus any ambient whitespace after it.
"""

from collections.abc import Callable
from dataclasses import dataclass

from descentkit.diagnostics import ErrorTemplate, UnexpectedCharacterError
from descentkit.syntax.stream import Cursor, span_of


def accept_if(predicate: Callable[[str], bool], cursor: Cursor) -> str | None:
    """Consume one character if the predicate accepts it.

    Args:
        predicate: Test applied to the next character
        cursor: Input cursor

    Returns:
        The consumed character, or None if the input is exhausted or the
        predicate rejected the character (nothing consumed in either case)
    """
    char = cursor.peek()
    if char is None or not predicate(char):
        return None
    cursor.advance()
    return char


def skip_whitespace(cursor: Cursor) -> int:
    """Skip ambient whitespace after a token or syntax character.

    Never fails. Calling it twice in a row consumes nothing the second time.

    Returns:
        Number of whitespace characters consumed
    """
    count = 0
    while accept_if(str.isspace, cursor) is not None:
        count += 1
    return count


@dataclass(frozen=True, slots=True)
class Whitespace:
    """Mandatory whitespace: one or more whitespace characters.

    Use where the grammar requires a separation between two units that
    would otherwise run together. Between tokens, whitespace is already
    skipped ambiently.

    Attributes:
        text: The whitespace consumed
    """

    text: str

    @classmethod
    def parse(cls, cursor: Cursor) -> "Whitespace | None":
        first = accept_if(str.isspace, cursor)
        if first is None:
            return None
        chars = [first]
        while (char := accept_if(str.isspace, cursor)) is not None:
            chars.append(char)
        return cls("".join(chars))


def maybe_syntax(syntax: str, cursor: Cursor) -> bool:
    """Accept one fixed syntax character and the whitespace after it.

    Args:
        syntax: The character to accept (e.g. a delimiter)
        cursor: Input cursor

    Returns:
        True if the character was consumed, False otherwise (nothing consumed)

    Raises:
        ValueError: If syntax is not a single character
    """
    if len(syntax) != 1:
        msg = f"syntax must be a single character, got {syntax!r}"
        raise ValueError(msg)
    if accept_if(lambda c: c == syntax, cursor) is None:
        return False
    skip_whitespace(cursor)
    return True


def require_syntax(syntax: str, cursor: Cursor) -> None:
    """Accept one fixed syntax character that the grammar requires here.

    Raises:
        UnexpectedCharacterError: If the next character is not `syntax`
            (the diagnostic names the character found, or EOF)
        ValueError: If syntax is not a single character
    """
    if maybe_syntax(syntax, cursor):
        return
    diagnostic = ErrorTemplate.unexpected_character(syntax, cursor.peek(), span_of(cursor))
    raise UnexpectedCharacterError(
        diagnostic, expected=syntax, found=diagnostic.found or ""
    )


def end_of_parse(cursor: Cursor) -> bool:
    """True if the cursor is exhausted. Consumes nothing."""
    return cursor.peek() is None
