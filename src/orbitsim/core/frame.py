"""
Frame: the per-tick snapshot handed to a rendering collaborator.

A frame holds three logical groups, in this order:
1. attractor position
2. current position of each orbiting body (system order)
3. each orbiting body's trail so far (system order, oldest first)
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from orbitsim.core.vector import Vector2D


@dataclass(frozen=True)
class Frame:
    """Immutable snapshot of one simulated tick."""

    index: int  # 0-based tick number
    attractor: Vector2D
    positions: tuple[Vector2D, ...]
    trails: tuple[tuple[Vector2D, ...], ...]

    @property
    def n_bodies(self) -> int:
        return len(self.positions)

    def position_array(self) -> np.ndarray:
        """Body positions as an [n_bodies, 2] array."""
        return np.array(
            [(p.x, p.y) for p in self.positions], dtype=np.float64
        ).reshape(-1, 2)

    def trail_arrays(self) -> list[np.ndarray]:
        """One [len(trail), 2] array per body."""
        return [
            np.array([(p.x, p.y) for p in trail], dtype=np.float64).reshape(-1, 2)
            for trail in self.trails
        ]
