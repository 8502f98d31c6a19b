"""Pytest configuration and fixtures for whimsy tests."""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from whimsy.world import SimulationField
from whimsy_shared.randomness import RandomProvider


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def provider(seeded_rng):
    return RandomProvider(seeded_rng)


@pytest.fixture
def field(provider):
    """An empty field; tests place discs or call initialize()."""
    return SimulationField(provider)


@pytest.fixture
def surface():
    """Off-screen 400x300 surface with fonts available."""
    pygame.font.init()
    return pygame.Surface((400, 300))
