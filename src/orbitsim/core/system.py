"""
SolarSystem: one fixed attractor and an ordered collection of orbiting bodies.

A tick is two full passes, never interleaved per body:
1. apply_gravity():  every body's velocity from the pre-tick attractor
2. update_bodies():  every body's position and trail

Bodies only interact with the attractor, so each pass is independent of
body order. The attractor itself is never accelerated.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Iterable

from orbitsim.core.body import Body
from orbitsim.core.errors import DegenerateGeometryError
from orbitsim.core.frame import Frame

if TYPE_CHECKING:
    from orbitsim.core.config import SimulationConfig

logger = logging.getLogger(__name__)


class SolarSystem:
    """Owns the attractor and the orbiting bodies, plus the physics constants."""

    def __init__(
        self,
        sun: Body,
        gravity: float = 1.0,
        dt: float = 0.5,
        size: float = 10000.0,
        min_distance: float = 0.0,
        bodies: Iterable[Body] = (),
    ):
        self.sun = sun
        self.gravity = gravity
        self.dt = dt
        self.size = size
        self.min_distance = min_distance
        self.bodies: list[Body] = list(bodies)

    @classmethod
    def from_config(cls, config: "SimulationConfig") -> SolarSystem:
        system = cls(
            sun=Body.from_config(config.sun),
            gravity=config.gravity,
            dt=config.dt,
            size=config.size,
            min_distance=config.min_distance,
        )
        for planet in config.planets:
            system.add_body(Body.from_config(planet, max_trail=config.max_trail))
        return system

    def add_body(self, body: Body) -> None:
        """Append an orbiting body. No duplicate check, no capacity limit."""
        self.bodies.append(body)

    def apply_gravity(self) -> list[int]:
        """
        Accelerate every body toward the attractor.

        A body at degenerate separation keeps its velocity for this tick.

        Returns:
            Indices of bodies whose gravity update was skipped
        """
        skipped = []
        for i, body in enumerate(self.bodies):
            try:
                body.apply_gravity_from(self.sun, self.gravity, self.dt, self.min_distance)
            except DegenerateGeometryError as exc:
                logger.warning("Skipping gravity for body %d: %s", i, exc)
                skipped.append(i)
        return skipped

    def update_bodies(self) -> None:
        """Move every body by one time step."""
        for body in self.bodies:
            body.move(self.dt)

    def tick(self) -> list[int]:
        """One full step: gravity pass, then movement pass."""
        skipped = self.apply_gravity()
        self.update_bodies()
        return skipped

    def snapshot(self, index: int) -> Frame:
        """Capture the current state as an immutable Frame."""
        return Frame(
            index=index,
            attractor=self.sun.position,
            positions=tuple(body.position for body in self.bodies),
            trails=tuple(tuple(body.trail) for body in self.bodies),
        )

    def __len__(self) -> int:
        return len(self.bodies)
