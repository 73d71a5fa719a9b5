"""Shared test fixtures for all tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from target_position.config import get_settings, reset_mirror
from target_position.core.models import Position

# ============================================================================
# Configuration Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from the default Sesame URL and fresh settings."""
    monkeypatch.delenv("TARGET_POSITION_SESAME_URL", raising=False)
    monkeypatch.delenv("TARGET_POSITION_TIMEOUT", raising=False)
    reset_mirror()
    get_settings.cache_clear()
    yield
    reset_mirror()
    get_settings.cache_clear()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_position() -> Position:
    """Position of M31 as reported by Simbad."""
    return Position(right_ascension=10.68470833, declination=41.26875)
