"""
Vector2D: immutable 2D vector value.

Every operator returns a new Vector2D; operands are never mutated.
Division by a zero scalar follows IEEE float semantics (inf / nan) instead
of raising, matching numpy rather than Python's ZeroDivisionError.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np


@dataclass(frozen=True)
class Vector2D:
    """A point or direction in the simulation plane."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector2D:
        """Build from any (x, y) pair: tuple, list, numpy array."""
        x, y = values
        return cls(float(x), float(y))

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        with np.errstate(divide="ignore", invalid="ignore"):
            x, y = np.divide((self.x, self.y), np.float64(scalar))
        return Vector2D(float(x), float(y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def magnitude(self) -> float:
        """Euclidean length."""
        return float(np.sqrt(self.x * self.x + self.y * self.y))

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.x) and np.isfinite(self.y))

    def to_array(self) -> np.ndarray:
        """Return as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


ZERO = Vector2D(0.0, 0.0)
