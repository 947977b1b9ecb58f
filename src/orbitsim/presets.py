"""Ready-made initial conditions."""

from orbitsim.core.config import BodyConfig, SimulationConfig


def default_config(frame_count: int = 250) -> SimulationConfig:
    """
    Four planets launched from the same point with different velocities
    around a sun of mass 1e8 at rest at the origin.
    """
    start = (-2000.0, -2000.0)
    return SimulationConfig(
        sun=BodyConfig(mass=1e8, position=(0.0, 0.0), velocity=(0.0, 0.0)),
        planets=[
            BodyConfig(mass=1e3, position=start, velocity=(80.0, -50.0)),
            BodyConfig(mass=1e3, position=start, velocity=(150.0, 0.0)),
            BodyConfig(mass=1e5, position=start, velocity=(50.0, -100.0)),
            BodyConfig(mass=1e3, position=start, velocity=(100.0, 50.0)),
        ],
        gravity=1.0,
        dt=0.5,
        frame_count=frame_count,
        size=10000.0,
    )
