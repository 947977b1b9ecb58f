"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from orbitsim.core import Body, BodyConfig, SimulationConfig, Vector2D


@pytest.fixture
def sun():
    """Heavy attractor at rest at the origin."""
    return Body(mass=1e8, position=Vector2D(0.0, 0.0), velocity=Vector2D(0.0, 0.0))


@pytest.fixture
def planet():
    """The reference planet: mass 1e3 at (-2000, -2000) moving at (80, -50)."""
    return Body(mass=1e3, position=Vector2D(-2000.0, -2000.0), velocity=Vector2D(80.0, -50.0))


@pytest.fixture
def single_planet_config():
    """One planet around a 1e8 sun, G=1, dt=0.5."""
    return SimulationConfig(
        sun=BodyConfig(mass=1e8),
        planets=[BodyConfig(mass=1e3, position=(-2000.0, -2000.0), velocity=(80.0, -50.0))],
        gravity=1.0,
        dt=0.5,
        frame_count=20,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
