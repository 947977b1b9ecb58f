"""
Body: a point mass with position, velocity and a trail of past positions.

The same class models the attractor (sun) and the orbiting bodies
(planets). Only orbiting bodies are ever integrated; the attractor is read.

Integration is explicit (forward) Euler, split in two calls per tick:
1. apply_gravity_from(): velocity += acceleration * dt
2. move():               trail.append(position); position += velocity * dt

A tick must call apply_gravity_from() before move(), and move() exactly once.
"""

from __future__ import annotations
from collections import deque
from typing import TYPE_CHECKING, Deque

from orbitsim.core.errors import DegenerateGeometryError
from orbitsim.core.vector import Vector2D, ZERO

if TYPE_CHECKING:
    from orbitsim.core.config import BodyConfig


class Body:
    """
    A gravitating point mass.

    Mass is fixed at construction. Position and velocity are replaced (never
    mutated in place, Vector2D is immutable) on each integration step.

    The trail is append-only and chronological. With max_trail=None (default)
    it is never truncated; with a positive max_trail only the most recent
    positions are kept.
    """

    def __init__(
        self,
        mass: float,
        position: Vector2D = ZERO,
        velocity: Vector2D = ZERO,
        max_trail: int | None = None,
    ):
        self.mass = float(mass)
        self.position = position
        self.velocity = velocity
        self.trail: Deque[Vector2D] = deque(maxlen=max_trail)

    @classmethod
    def from_config(cls, config: "BodyConfig", max_trail: int | None = None) -> Body:
        return cls(
            mass=config.mass,
            position=Vector2D.from_iterable(config.position),
            velocity=Vector2D.from_iterable(config.velocity),
            max_trail=max_trail,
        )

    @property
    def max_trail(self) -> int | None:
        return self.trail.maxlen

    def move(self, dt: float) -> None:
        """Record the current position in the trail, then advance by velocity * dt."""
        self.trail.append(self.position)
        self.position = self.position + self.velocity * dt

    def apply_gravity_from(
        self,
        attractor: Body,
        gravity: float,
        dt: float,
        min_distance: float = 0.0,
    ) -> Vector2D:
        """
        Accelerate toward the attractor by Newton's inverse-square law.

            F = G * m * M / r^2,   a = F * r_hat / m

        The body's own mass enters the force and is divided out again for
        the acceleration, so the update is independent of it.

        Args:
            attractor: Body exerting the pull (read only)
            gravity: Gravitational constant G
            dt: Time step
            min_distance: Separations at or below this are degenerate

        Returns:
            The acceleration applied

        Raises:
            DegenerateGeometryError: if r <= min_distance, or r is so small the
                acceleration is not finite; velocity is left as is
        """
        displacement = attractor.position - self.position
        distance = displacement.magnitude()
        if distance <= min_distance:
            raise DegenerateGeometryError(distance, min_distance)

        distance_sq = distance * distance
        if distance_sq == 0.0:
            raise DegenerateGeometryError(distance, min_distance)

        direction = displacement / distance
        force_magnitude = gravity * self.mass * attractor.mass / distance_sq
        force = direction * force_magnitude
        acceleration = force / self.mass
        # Near-zero separation overflows the inverse square
        if not acceleration.is_finite():
            raise DegenerateGeometryError(distance, min_distance)

        self.velocity = self.velocity + acceleration * dt
        return acceleration

    def state(self) -> tuple[Vector2D, Vector2D, tuple[Vector2D, ...]]:
        """(position, velocity, trail) as plain immutable values."""
        return self.position, self.velocity, tuple(self.trail)

    def __repr__(self) -> str:
        return (
            f"Body(mass={self.mass!r}, position={self.position!r}, "
            f"velocity={self.velocity!r}, trail_len={len(self.trail)})"
        )
