"""Recursive-descent parsing toolkit.

Module Organization:
- primitives.py: accept_if (the only cursor mutation), whitespace, syntax characters
- core.py: Parseable contract, maybe/require, parse/try_parse entry points
- tokens.py: TokenRules, Tokenizer and the Token base class
- rules.py: two-way alternation (Either) and separator lists (ListOf)
"""

from descentkit.syntax.parser.core import (
    Parseable,
    describe,
    maybe,
    parse,
    require,
    try_parse,
)
from descentkit.syntax.parser.primitives import (
    Whitespace,
    accept_if,
    end_of_parse,
    maybe_syntax,
    require_syntax,
    skip_whitespace,
)
from descentkit.syntax.parser.rules import (
    Either,
    Fallback,
    ListOf,
    ListRules,
    Primary,
    parse_list,
)
from descentkit.syntax.parser.tokens import Token, Tokenizer, TokenRules

__all__ = [
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
    "try_parse",
]
