"""Pytest fixtures for house edge calculator tests."""

import pytest
from random import Random

from casino_math.games import ROULETTE_VARIANTS, SLOT_PROFILES


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def european():
    """European single-zero wheel."""
    return ROULETTE_VARIANTS["european"]


@pytest.fixture
def american():
    """American double-zero wheel."""
    return ROULETTE_VARIANTS["american"]


@pytest.fixture
def average_slot():
    """Typical 95% RTP slot machine."""
    return SLOT_PROFILES["average"]


@pytest.fixture
def session_params():
    """Default bankroll simulator session: bankroll, bet, edge, rounds."""
    return (1000, 25, 2.7, 200)
