"""Shared fixtures."""

import pytest

from fairy_data.fairy import Fairy


@pytest.fixture
def fairy():
    """A seeded Fairy with default configuration."""
    return Fairy.create(seed=42)
