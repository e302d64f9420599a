# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- realm: a fresh reference Realm per test
- harden: a Hardener for that realm, seeded with its intrinsics
- hook_calls: list receiving every node passed to a recording prepare hook

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os
from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from hardener.core.hardener import Hardener
from hardener.realm import Realm


@pytest.fixture
def realm() -> Realm:
    return Realm()


@pytest.fixture
def harden(realm: Realm) -> Hardener:
    return realm.create_hardener()


@pytest.fixture
def hook_calls() -> list[Any]:
    return []


@pytest.fixture
def recording_hook(hook_calls: list[Any]) -> Callable[[Any], None]:
    """Prepare hook that records each node it is called with."""

    def hook(node: Any) -> None:
        hook_calls.append(node)

    return hook


def called_with(calls: list[Any], node: Any) -> bool:
    """Identity membership test for recorded hook calls."""
    return any(call is node for call in calls)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
