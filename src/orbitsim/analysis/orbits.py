"""
Orbit diagnostics computed from bodies and trails.

Read-only helpers; nothing here feeds back into the integration.

Forward Euler does not conserve energy, so specific_energy() drifts over a
run. Watching that drift is the quickest way to judge whether dt is small
enough for a given orbit.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy.signal import find_peaks

from orbitsim.core.vector import Vector2D

if TYPE_CHECKING:
    from orbitsim.core.body import Body


def _as_array(points: Sequence[Vector2D]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)


def distance_series(trail: Sequence[Vector2D], center: Vector2D) -> np.ndarray:
    """Distance of each trail point from center."""
    pts = _as_array(trail) - center.to_array()
    return np.sqrt(np.sum(pts**2, axis=1))


def specific_energy(body: "Body", attractor: "Body", gravity: float) -> float:
    """Orbital energy per unit mass: v^2/2 - G*M/r."""
    r = (body.position - attractor.position).magnitude()
    v = body.velocity.magnitude()
    return 0.5 * v * v - gravity * attractor.mass / r


def angular_momentum(body: "Body", attractor: "Body") -> float:
    """z-component of r x v per unit mass, relative to the attractor."""
    rx, ry = body.position - attractor.position
    vx, vy = body.velocity
    return rx * vy - ry * vx


def periapsis_indices(trail: Sequence[Vector2D], center: Vector2D) -> np.ndarray:
    """Trail indices of closest approach (local minima of the distance)."""
    distances = distance_series(trail, center)
    if len(distances) < 3:
        return np.array([], dtype=np.intp)
    minima, _ = find_peaks(-distances)
    return minima


def estimate_period(
    trail: Sequence[Vector2D],
    center: Vector2D,
    dt: float,
) -> float | None:
    """
    Estimate the orbital period from successive periapsis passages.

    Returns:
        Mean time between closest approaches, or None if fewer than two
        were recorded
    """
    minima = periapsis_indices(trail, center)
    if len(minima) < 2:
        return None
    return float(np.mean(np.diff(minima)) * dt)
