"""Cursor and parser packages.

Python 3.13+.
"""

from .parser import (
    Either,
    Fallback,
    ListOf,
    ListRules,
    Parseable,
    Primary,
    Token,
    Tokenizer,
    TokenRules,
    Whitespace,
    accept_if,
    describe,
    end_of_parse,
    maybe,
    maybe_syntax,
    parse,
    parse_list,
    require,
    require_syntax,
    skip_whitespace,
    try_parse,
)
from .stream import CharStream, Cursor, span_of

__all__ = [
    "CharStream",
    "Cursor",
    "Either",
    "Fallback",
    "ListOf",
    "ListRules",
    "Parseable",
    "Primary",
    "Token",
    "TokenRules",
    "Tokenizer",
    "Whitespace",
    "accept_if",
    "describe",
    "end_of_parse",
    "maybe",
    "maybe_syntax",
    "parse",
    "parse_list",
    "require",
    "require_syntax",
    "skip_whitespace",
    "span_of",
    "try_parse",
]
