"""Shared fixtures for badge tests."""

from __future__ import annotations

import pytest

from badges.components.status_badge import StatusBadge
from badges.services.style_registry import StyleRegistry


@pytest.fixture
def registry():
    """Provide an empty StyleRegistry."""
    return StyleRegistry()


@pytest.fixture
def badge(registry):
    """Provide a StatusBadge with the built-in map, bound to the test registry."""
    return StatusBadge(registry=registry)
