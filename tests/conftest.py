"""Shared pytest setup for descentkit.

Hypothesis budgets live here and nowhere else. Three profiles:
- dev: 500 examples per property, the default on a workstation
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE=<name> picks a profile explicitly, e.g.
    HYPOTHESIS_PROFILE=verbose pytest tests/test_tokens.py

Grammar fuzzing (@pytest.mark.fuzz) feeds the combinators long random
input and is skipped unless selected with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_ALL_PHASES,
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_ALL_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_ALL_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run.

    An explicit HYPOTHESIS_PROFILE wins, then CI=true, then "dev".
    Unknown profile names fall through to the next rule.
    """
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# GRAMMAR FUZZING
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Declare the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: long random-input runs against whole grammars (pytest -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip grammar fuzzing unless the run selects it with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="grammar fuzzing, select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
