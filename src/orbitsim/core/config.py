"""
Simulation configuration.

All physics constants live here and are threaded explicitly into the
system; nothing is held in module-level mutable state. Configs validate
themselves on construction and raise ConfigurationError on nonsense input.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping

import numpy as np

from orbitsim.core.errors import ConfigurationError


def _pair(value: Any, name: str) -> tuple[float, float]:
    try:
        x, y = value
        pair = (float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an (x, y) pair, got {value!r}") from exc
    if not np.all(np.isfinite(pair)):
        raise ConfigurationError(f"{name} must be finite, got {pair!r}")
    return pair


def _number(value: Any, name: str) -> float:
    """Coerce to a finite float."""
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if not np.isfinite(number):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return number


def _integer(value: Any, name: str) -> int:
    """Coerce to an int; integral floats such as 250.0 are accepted."""
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    number = _number(value, name)
    integer = int(number)
    if integer != number:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return integer


@dataclass
class BodyConfig:
    """Initial conditions for one body."""

    mass: float
    position: tuple[float, float] = (0.0, 0.0)
    velocity: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        self.validate()

    def validate(self):
        try:
            mass = float(self.mass)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"mass must be a number, got {self.mass!r}") from exc
        if not np.isfinite(mass) or mass <= 0:
            raise ConfigurationError(f"mass must be positive and finite, got {self.mass!r}")
        self.mass = mass
        self.position = _pair(self.position, "position")
        self.velocity = _pair(self.velocity, "velocity")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BodyConfig:
        try:
            mass = data["mass"]
        except KeyError as exc:
            raise ConfigurationError("body is missing 'mass'") from exc
        return cls(
            mass=mass,
            position=data.get("position", (0.0, 0.0)),
            velocity=data.get("velocity", (0.0, 0.0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "mass": self.mass,
            "position": list(self.position),
            "velocity": list(self.velocity),
        }


@dataclass
class SimulationConfig:
    """Configuration for a full simulation run."""

    sun: BodyConfig
    planets: list[BodyConfig] = field(default_factory=list)
    gravity: float = 1.0  # Gravitational constant G (simulation units)
    dt: float = 0.5  # Time step per tick
    frame_count: int = 250  # Ticks to run; 0 is a valid empty run
    size: float = 10000.0  # Viewport width/height, rendering only
    max_trail: int | None = None  # None = unbounded trails
    min_distance: float = 0.0  # Separations at or below are degenerate
    progress_every: int = 10  # Log progress every N frames (0 disables)

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ConfigurationError for invalid parameters."""
        if not isinstance(self.sun, BodyConfig):
            raise ConfigurationError("sun must be a BodyConfig")
        for i, planet in enumerate(self.planets):
            if not isinstance(planet, BodyConfig):
                raise ConfigurationError(f"planet {i} must be a BodyConfig")

        self.gravity = _number(self.gravity, "gravity")
        self.dt = _number(self.dt, "dt")
        if self.dt <= 0:
            raise ConfigurationError(f"dt must be positive, got {self.dt!r}")
        self.frame_count = _integer(self.frame_count, "frame_count")
        if self.frame_count < 0:
            raise ConfigurationError(
                f"frame_count must be non-negative, got {self.frame_count!r}"
            )
        self.size = _number(self.size, "size")
        if self.size <= 0:
            raise ConfigurationError(f"size must be positive, got {self.size!r}")
        if self.max_trail is not None:
            self.max_trail = _integer(self.max_trail, "max_trail")
            if self.max_trail <= 0:
                raise ConfigurationError(
                    f"max_trail must be positive or None, got {self.max_trail!r}"
                )
        self.min_distance = _number(self.min_distance, "min_distance")
        if self.min_distance < 0:
            raise ConfigurationError(
                f"min_distance must be non-negative, got {self.min_distance!r}"
            )
        self.progress_every = _integer(self.progress_every, "progress_every")
        if self.progress_every < 0:
            raise ConfigurationError(
                f"progress_every must be non-negative, got {self.progress_every!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SimulationConfig:
        """Build from plain data, e.g. a parsed JSON document."""
        if "sun" not in data:
            raise ConfigurationError("config is missing 'sun'")
        options = {
            key: data[key]
            for key in (
                "gravity", "dt", "frame_count", "size",
                "max_trail", "min_distance", "progress_every",
            )
            if key in data
        }
        return cls(
            sun=BodyConfig.from_dict(data["sun"]),
            planets=[BodyConfig.from_dict(p) for p in data.get("planets", [])],
            **options,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sun": self.sun.to_dict(),
            "planets": [p.to_dict() for p in self.planets],
            "gravity": self.gravity,
            "dt": self.dt,
            "frame_count": self.frame_count,
            "size": self.size,
            "max_trail": self.max_trail,
            "min_distance": self.min_distance,
            "progress_every": self.progress_every,
        }
