"""Quickstart - a settings-file grammar in a few dozen lines.

Demonstrates:

1. Declaring token classes with TokenRules (including escaping)
2. Writing a grammar type with maybe / require_syntax
3. Two-way alternation with Either
4. Separator lists with ListOf
5. Converting fatal errors at the boundary with try_parse

Grammar:

    settings ::= setting (";" setting)*
    setting  ::= Key "=" value
    value    ::= Number | Text
    Text     ::= letters, spaces not allowed unless escaped with "\\"

Python 3.13+.
"""

from __future__ import annotations

from descentkit import (
    Cursor,
    Either,
    ListOf,
    Token,
    TokenRules,
    maybe,
    require,
    require_syntax,
    try_parse,
)
from descentkit.diagnostics import DiagnosticFormatter


class Key(
    Token,
    rules=TokenRules(accept=lambda c: c.isalnum() or c == "_", accept_first=str.isalpha),
):
    pass


class Number(Token, rules=TokenRules(accept=str.isdigit, max_len=19)):
    @classmethod
    def from_text(cls, text: str) -> int:
        return int(text)


class Text(Token, rules=TokenRules(accept=str.isalpha, escape="\\", escaped=str.isprintable)):
    pass


VALUE = Either(Number, Text)


class Setting:
    __slots__ = ("key", "value")

    def __init__(self, key: str, value: int | str) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"{self.key}={self.value!r}"

    @classmethod
    def parse(cls, cursor: Cursor) -> Setting | None:
        key = maybe(Key, cursor)
        if key is None:
            return None
        require_syntax("=", cursor)
        value = require(VALUE, cursor).value
        if isinstance(value, Text):
            value = value.text
        return cls(key.text, value)


SETTINGS = ListOf(Setting, sep=";", limit=64)


def main() -> None:
    formatter = DiagnosticFormatter()

    for source in (
        "name = Hello\\ World; retries = 3; mode=fast",
        "name = ok; retries =",
        "name = ok; ; retries = 1",
    ):
        print(f">>> {source}")
        settings, errors = try_parse(SETTINGS, source)
        if errors:
            diagnostic = errors[0].diagnostic
            if diagnostic is not None:
                print(formatter.format_with_source(diagnostic, source))
        else:
            print(settings)
        print()


if __name__ == "__main__":
    main()
