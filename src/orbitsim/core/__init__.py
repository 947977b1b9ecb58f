"""
Core simulation primitives.

This layer knows nothing about rendering. It only knows:
- 2D vectors
- Bodies with mass, position, velocity and a trail
- A solar system of one fixed attractor and orbiting bodies
- Running N ticks and producing one Frame per tick
"""

from orbitsim.core.vector import Vector2D, ZERO
from orbitsim.core.body import Body
from orbitsim.core.frame import Frame
from orbitsim.core.config import BodyConfig, SimulationConfig
from orbitsim.core.system import SolarSystem
from orbitsim.core.simulation import (
    Simulation,
    SimulationResult,
    SimulationState,
    run_simulation,
)
from orbitsim.core.errors import (
    OrbitSimError,
    ConfigurationError,
    DegenerateGeometryError,
    FrameSinkError,
)

__all__ = [
    "Vector2D",
    "ZERO",
    "Body",
    "Frame",
    "BodyConfig",
    "SimulationConfig",
    "SolarSystem",
    "Simulation",
    "SimulationResult",
    "SimulationState",
    "run_simulation",
    "OrbitSimError",
    "ConfigurationError",
    "DegenerateGeometryError",
    "FrameSinkError",
]
