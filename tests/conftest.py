"""
Root conftest.py for the casefold test suite.

Pytest plugin that checks every test declares what it protects (TRA marker)
and how fast it must be (tier marker).
- Reports tests missing either marker
- Applies tier timeouts when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.FilesystemCanonicalizer")
    def test_something():
        ...

Configuration:
    TRA_ENFORCE=1 fails collection on missing/invalid markers (default: warn)
    TRA_ENFORCE=0 disables the checks
    TIER_TIMEOUT_MULTIPLIER scales tier timeouts (default: 1.0)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# ============================================================================
# Marker Configuration
# ============================================================================

# Valid TRA namespace prefixes
VALID_TRA_PREFIXES = (
    "Domain.Invariant",
    "Domain.Policy",
    "UseCase",
    "Port",
    "Adapter",
    "Contract",
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and tier declarations."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    marker = item.get_closest_marker("tier")
    if marker is None or not marker.args:
        return None
    tier = marker.args[0]
    if isinstance(tier, int) and tier in TIER_TIMEOUTS:
        return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    """Validate TRA and tier markers on all tests.

    Returns:
        List of error messages. Empty if all valid.
    """
    errors: list[str] = []

    for item in items:
        tra = item.get_closest_marker("tra")
        if tra is None or not tra.args:
            errors.append(f"{item.nodeid}: Missing @pytest.mark.tra('...')")
        else:
            anchor = tra.args[0]
            if not isinstance(anchor, str) or not anchor.startswith(VALID_TRA_PREFIXES):
                errors.append(f"{item.nodeid}: Invalid TRA anchor {anchor!r}")

        if _get_tier(item) is None:
            errors.append(f"{item.nodeid}: Missing or invalid @pytest.mark.tier()")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Add a timeout marker per tier if pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or item.get_closest_marker("timeout") is not None:
            continue
        timeout = TIER_TIMEOUTS[tier]
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and tier markers at collection time."""
    enforce_mode = os.environ.get("TRA_ENFORCE", "warn")

    if enforce_mode != "0":
        errors = _marker_errors(items)
        if errors and enforce_mode == "1":
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        elif errors:
            print("\nTRA/Tier Enforcement Warnings:")
            for error in errors:
                print(f"  {error}")

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA/Tier enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
