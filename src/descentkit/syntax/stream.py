"""Single-pass peekable cursor over a character sequence.

The toolkit never owns the input: every operation takes a cursor supplied by
the caller and either consumes characters it commits to, or consumes none.
A cursor is anything with peek() and advance(); CharStream is the bundled
implementation over any iterable of single characters.

Design Philosophy:
    - Cursor is mutable and single-pass (no copying, no rewinding)
    - One character of lookahead, nothing more
    - EOF is signalled by peek() returning None
    - Line:column tracked incrementally so diagnostics are O(1)

Line Ending Support:
    \\n is the line delimiter. CRLF input works because the \\n is still
    present; CR-only input reports every character on line 1.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from descentkit.diagnostics import ErrorTemplate, SourceSpan

__all__ = ["CharStream", "Cursor", "span_of"]

_EOF = object()


@runtime_checkable
class Cursor(Protocol):
    """Minimal cursor contract: one character of lookahead."""

    def peek(self) -> str | None:
        """Return the next character without consuming it, None at EOF."""
        ...

    def advance(self) -> str:
        """Consume and return the next character."""
        ...


class CharStream:
    """Peekable, single-pass character cursor.

    Wraps any iterable of single characters. Only one character is ever
    buffered, so a CharStream over a generator or a file iterator reads
    input lazily.

    Example:
        >>> stream = CharStream("ab")
        >>> stream.peek()
        'a'
        >>> stream.advance()
        'a'
        >>> stream.advance()
        'b'
        >>> stream.peek() is None
        True
        >>> stream.advance()
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2

    Thread Safety:
        Not thread-safe. A stream belongs to exactly one parse at a time.
    """

    __slots__ = ("_chars", "_column", "_line", "_lookahead", "_pos")

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars: Iterator[str] = iter(chars)
        self._lookahead: str | None = None
        self._pos = 0
        self._line = 1
        self._column = 1

    def __repr__(self) -> str:
        return f"CharStream(pos={self._pos}, line={self._line}, column={self._column})"

    def __iter__(self) -> "CharStream":
        return self

    def __next__(self) -> str:
        if self.peek() is None:
            raise StopIteration
        return self.advance()

    def peek(self) -> str | None:
        """Return the next character without consuming it.

        Returns:
            The next character, or None when the input is exhausted

        Raises:
            ValueError: If the underlying iterable yields something other
                than a single-character string
        """
        if self._lookahead is None:
            char = next(self._chars, _EOF)
            if char is _EOF:
                return None
            if not isinstance(char, str) or len(char) != 1:
                msg = f"CharStream expects single characters, got {char!r}"
                raise ValueError(msg)
            self._lookahead = char
        return self._lookahead

    def advance(self) -> str:
        """Consume and return the next character.

        Raises:
            EOFError: If the input is exhausted
        """
        char = self.peek()
        if char is None:
            diagnostic = ErrorTemplate.unexpected_eof(self._pos)
            raise EOFError(diagnostic.message)
        self._lookahead = None
        self._pos += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    @property
    def is_eof(self) -> bool:
        """True when no characters remain."""
        return self.peek() is None

    @property
    def pos(self) -> int:
        """Number of characters consumed so far (0-indexed offset of peek())."""
        return self._pos

    @property
    def line(self) -> int:
        """Line of the next character (1-indexed)."""
        return self._line

    @property
    def column(self) -> int:
        """Column of the next character (1-indexed)."""
        return self._column

    def span(self) -> SourceSpan:
        """Span covering the next character (empty at EOF)."""
        end = self._pos if self.is_eof else self._pos + 1
        return SourceSpan(start=self._pos, end=end, line=self._line, column=self._column)


def span_of(cursor: Cursor) -> SourceSpan | None:
    """Location of a cursor for diagnostics, None if it cannot report one."""
    if isinstance(cursor, CharStream):
        return cursor.span()
    return None
