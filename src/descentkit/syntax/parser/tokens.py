"""Token contract: maximal-munch tokenizer with escaping and a length bound.

A token class is declared once, with its lexical rules, and parses itself:

    class Number(Token, rules=TokenRules(accept=str.isdigit)):
        @classmethod
        def from_text(cls, text: str) -> int:
            return int(text)

    class Quoted(Token, rules=TokenRules(
        accept=lambda c: c not in '"\\\\',
        escape="\\\\",
        escaped=lambda c: True,
    )):
        pass

The scanner consumes the longest prefix allowed by the rules, drops escape
triggers (keeping the escaped character), skips the whitespace that follows,
and hands the text to from_text().
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from descentkit.constants import DEFAULT_MAX_TOKEN_LEN
from descentkit.diagnostics import (
    ErrorTemplate,
    IllegalEscapeError,
    SafetyMarginExceededError,
)
from descentkit.syntax.parser.primitives import accept_if, skip_whitespace
from descentkit.syntax.stream import Cursor, span_of

__all__ = ["Token", "TokenRules", "Tokenizer"]

logger = logging.getLogger(__name__)


def _never(_: str) -> bool:
    return False


@dataclass(frozen=True, slots=True)
class TokenRules:
    """Lexical rules of one token class.

    Attributes:
        accept: Predicate for continuation characters
        accept_first: Predicate for the first character (None: same as accept)
        escape: Escape trigger character (None: no escaping)
        escaped: Predicate for characters legal right after the trigger
        max_len: Length at which a token is rejected as a safety margin
    """

    accept: Callable[[str], bool]
    accept_first: Callable[[str], bool] | None = None
    escape: str | None = None
    escaped: Callable[[str], bool] = _never
    max_len: int = DEFAULT_MAX_TOKEN_LEN

    def __post_init__(self) -> None:
        """Validate TokenRules invariants.

        Raises:
            ValueError: If max_len is less than 1 or escape is not a single
                character
        """
        if self.max_len < 1:
            msg = f"TokenRules.max_len must be >= 1, got {self.max_len}"
            raise ValueError(msg)
        if self.escape is not None and len(self.escape) != 1:
            msg = f"TokenRules.escape must be a single character, got {self.escape!r}"
            raise ValueError(msg)

    def first(self, char: str) -> bool:
        """Whether `char` may start a token."""
        if self.accept_first is None:
            return self.accept(char)
        return self.accept_first(char)


class Tokenizer:
    """Maximal-munch scanner for one set of TokenRules.

    Built once per token class. Holds no per-parse state, so a single
    instance may serve any number of cursors.
    """

    __slots__ = ("name", "rules")

    def __init__(self, rules: TokenRules, name: str = "token") -> None:
        self.rules = rules
        self.name = name

    def __repr__(self) -> str:
        return f"Tokenizer({self.name})"

    def scan(self, cursor: Cursor) -> str | None:
        """Scan one token and the whitespace after it.

        Returns:
            The token text with escape triggers removed, or None if the next
            character cannot start this token (nothing consumed)

        Raises:
            IllegalEscapeError: If the escape trigger is followed by a
                character the rules do not allow
            SafetyMarginExceededError: If the token length reaches max_len
        """
        rules = self.rules
        first = accept_if(rules.first, cursor)
        if first is None:
            return None

        chars = [first]
        while True:
            char = accept_if(rules.accept, cursor)
            if char is None and rules.escape is not None:
                if accept_if(lambda c: c == rules.escape, cursor) is not None:
                    char = accept_if(rules.escaped, cursor)
                    if char is None:
                        logger.debug("Illegal escape in %s", self.name)
                        raise IllegalEscapeError(
                            ErrorTemplate.illegal_escape(
                                self.name, rules.escape, cursor.peek(), span_of(cursor)
                            )
                        )
            if char is None:
                break
            chars.append(char)
            if len(chars) >= rules.max_len:
                logger.debug("%s reached safety margin of %d", self.name, rules.max_len)
                raise SafetyMarginExceededError(
                    ErrorTemplate.token_too_long(self.name, rules.max_len, span_of(cursor)),
                    limit=rules.max_len,
                )

        skip_whitespace(cursor)
        return "".join(chars)


@dataclass(frozen=True)
class Token:
    """Base class for token types.

    Subclasses declare their lexical rules in the class statement and
    inherit parse(). Intermediate base classes may omit rules; they cannot
    parse until a subclass supplies them.

    Override from_text() to produce a value other than the token itself.

    Attributes:
        text: The token text, escape triggers removed
    """

    text: str

    rules: ClassVar[TokenRules]
    tokenizer: ClassVar[Tokenizer]

    def __init_subclass__(cls, *, rules: TokenRules | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if rules is not None:
            cls.rules = rules
        if hasattr(cls, "rules"):
            cls.tokenizer = Tokenizer(cls.rules, cls.__qualname__)

    def __str__(self) -> str:
        return self.text

    @classmethod
    def from_text(cls, text: str) -> Any:
        """Build the parsed value from the scanned text."""
        return cls(text)

    @classmethod
    def parse(cls, cursor: Cursor) -> Any:
        """Scan one token of this class.

        Returns:
            from_text() of the scanned text, or None if no token starts here

        Raises:
            TypeError: If the class has no TokenRules, or from_text()
                returns None for text that was already consumed
        """
        if not hasattr(cls, "tokenizer"):
            msg = f"{cls.__qualname__} declares no TokenRules"
            raise TypeError(msg)
        text = cls.tokenizer.scan(cursor)
        if text is None:
            return None
        value = cls.from_text(text)
        if value is None:
            msg = f"{cls.__qualname__}.from_text() returned None for {text!r}"
            raise TypeError(msg)
        return value
