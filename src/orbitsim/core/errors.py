"""
Exception types for the simulator.

Configuration problems are caught at construction time. Numerical and
rendering problems are signaled explicitly instead of corrupting state.
"""


class OrbitSimError(Exception):
    """Base class for all simulator errors."""


class ConfigurationError(OrbitSimError, ValueError):
    """Invalid simulation parameters (mass, time step, frame count, ...)."""


class DegenerateGeometryError(OrbitSimError, ArithmeticError):
    """A body sits on (or too close to) the attractor for gravity to be defined."""

    def __init__(self, separation: float, min_distance: float = 0.0):
        self.separation = separation
        self.min_distance = min_distance
        super().__init__(
            f"separation {separation!r} from attractor is within "
            f"min_distance {min_distance!r}"
        )


class FrameSinkError(OrbitSimError):
    """The rendering collaborator could not accept a frame."""
