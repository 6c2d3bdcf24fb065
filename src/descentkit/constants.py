"""Shared constants for descentkit.

Defaults for the two safety margins, the list separator, and the marker
used in diagnostics when the cursor is exhausted. Grammar authors override
the margins per token class or list through TokenRules and ListRules.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Safety margins
    "DEFAULT_MAX_TOKEN_LEN",
    "DEFAULT_LIST_LIMIT",
    # Syntax defaults
    "DEFAULT_LIST_SEPARATOR",
    # Diagnostics
    "END_OF_INPUT_MARKER",
]

# ============================================================================
# SAFETY MARGINS
# ============================================================================
#
# Both limits are resource-exhaustion guards against adversarial input, not
# grammar limits. Exceeding either one is a fatal condition.
#
# Token length: checked after each character is appended to a token. A token
# whose length reaches the limit is rejected, so accepted tokens hold at most
# DEFAULT_MAX_TOKEN_LEN - 1 characters.
#
# List length: checked when a separator is seen. A list of exactly
# DEFAULT_LIST_LIMIT elements is accepted; a separator after the last one
# is rejected.
#
# ============================================================================

DEFAULT_MAX_TOKEN_LEN: int = 255

DEFAULT_LIST_LIMIT: int = 127

# ============================================================================
# SYNTAX DEFAULTS
# ============================================================================

DEFAULT_LIST_SEPARATOR: str = ","

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Reported as the "found" character when a required syntax character is
# missing because the input ended.
END_OF_INPUT_MARKER: str = "EOF"
