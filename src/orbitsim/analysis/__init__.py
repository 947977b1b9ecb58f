"""
Analysis layer: diagnostics derived from simulation output.

- Distance-to-attractor series
- Specific orbital energy and angular momentum
- Orbital period estimated from trails
"""

from orbitsim.analysis.orbits import (
    distance_series,
    specific_energy,
    angular_momentum,
    periapsis_indices,
    estimate_period,
)

__all__ = [
    "distance_series",
    "specific_energy",
    "angular_momentum",
    "periapsis_indices",
    "estimate_period",
]
