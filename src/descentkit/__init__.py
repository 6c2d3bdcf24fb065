"""descentkit - a minimal recursive-descent parsing toolkit.

A handful of primitives over a single-pass, one-character-lookahead cursor
that compose into a full recursive-descent discipline: lookahead, optional
and required elements, maximal-munch tokens with escaping, two-way
alternation, and separator-delimited lists.

Public API:
    CharStream - Peekable single-pass cursor over any iterable of characters
    Token, TokenRules - Declare a token class and its lexical rules
    Either, Primary, Fallback - Two-way alternation
    ListOf, ListRules - Non-empty separator-delimited lists
    maybe, require - Optional and mandatory elements
    maybe_syntax, require_syntax - Fixed syntax characters
    parse, try_parse - Whole-input entry points

Exceptions:
    GrammarError - Base of every fatal parse error
    MissingElementError, UnexpectedCharacterError, TrailingInputError,
    IllegalEscapeError, SafetyMarginExceededError

Submodules:
    descentkit.syntax.parser.primitives - accept_if and whitespace handling
    descentkit.diagnostics - Diagnostic codes, templates and formatting
    descentkit.constants - Default safety margins
"""

from .diagnostics import (
    GrammarError,
    IllegalEscapeError,
    MissingElementError,
    SafetyMarginExceededError,
    TrailingInputError,
    UnexpectedCharacterError,
)
from .syntax import (
    CharStream,
    Cursor,
    Either,
    Fallback,
    ListOf,
    ListRules,
    Parseable,
    Primary,
    Token,
    TokenRules,
    Whitespace,
    end_of_parse,
    maybe,
    maybe_syntax,
    parse,
    require,
    require_syntax,
    try_parse,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("descentkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CharStream",
    "Cursor",
    "Either",
    "Fallback",
    "GrammarError",
    "IllegalEscapeError",
    "ListOf",
    "ListRules",
    "MissingElementError",
    "Parseable",
    "Primary",
    "SafetyMarginExceededError",
    "Token",
    "TokenRules",
    "TrailingInputError",
    "UnexpectedCharacterError",
    "Whitespace",
    "__version__",
    "end_of_parse",
    "maybe",
    "maybe_syntax",
    "parse",
    "require",
    "require_syntax",
    "try_parse",
]
