"""
Simulation driver: runs a fixed number of ticks and emits one frame per tick.

Lifecycle:
    SETUP   -> attractor, system and bodies built from the config
    RUNNING -> each iteration: system.tick(), then emit a frame
    DONE    -> loop exhausted (or cancelled), sink closed

Cancellation is checked between ticks only, so a cancelled run never emits
a frame from a half-updated system. A failing sink drops that frame and the
run continues.
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator

from orbitsim.core.errors import FrameSinkError
from orbitsim.core.frame import Frame
from orbitsim.core.system import SolarSystem

if TYPE_CHECKING:
    from orbitsim.core.config import SimulationConfig
    from orbitsim.sinks import FrameSink

logger = logging.getLogger(__name__)


class SimulationState(enum.Enum):
    SETUP = "setup"
    RUNNING = "running"
    DONE = "done"


@dataclass
class SimulationResult:
    """Summary of a finished run."""

    frames_run: int = 0
    frames_dropped: int = 0
    cancelled: bool = False
    skipped_gravity: list[tuple[int, int]] = field(default_factory=list)  # (tick, body index)


class Simulation:
    """
    Drives a SolarSystem for config.frame_count ticks.

    A Simulation runs once. Build a new one from the same config to rerun;
    identical configs give identical frame sequences.
    """

    def __init__(self, config: "SimulationConfig"):
        self.config = config
        self.system = SolarSystem.from_config(config)
        self.state = SimulationState.SETUP
        self.result = SimulationResult()

    @classmethod
    def from_config(cls, config: "SimulationConfig") -> Simulation:
        return cls(config)

    def frames(self, should_stop: Callable[[], bool] | None = None) -> Iterator[Frame]:
        """
        Run the simulation, yielding a Frame after each tick.

        Args:
            should_stop: Optional callable polled before each tick; a true
                result ends the run early (e.g. threading.Event().is_set)
        """
        if self.state is not SimulationState.SETUP:
            raise RuntimeError(f"simulation already {self.state.value}")
        self.state = SimulationState.RUNNING

        frame_count = self.config.frame_count
        progress_every = self.config.progress_every
        try:
            for tick in range(frame_count):
                if should_stop is not None and should_stop():
                    logger.info("Cancelled after %d/%d frames", tick, frame_count)
                    self.result.cancelled = True
                    break

                if progress_every and tick % progress_every == 0:
                    logger.info("Frame %d/%d", tick, frame_count)

                for index in self.system.tick():
                    self.result.skipped_gravity.append((tick, index))
                self.result.frames_run += 1
                yield self.system.snapshot(tick)
        finally:
            self.state = SimulationState.DONE

    def run(
        self,
        sink: "FrameSink | None" = None,
        should_stop: Callable[[], bool] | None = None,
    ) -> SimulationResult:
        """
        Run to completion, emitting each frame into sink.

        Sink failures (FrameSinkError) are logged and counted; they never
        stop the simulation. The sink is closed however the run ends, so
        frames emitted before an interruption are kept.
        """
        try:
            for frame in self.frames(should_stop):
                if sink is None:
                    continue
                try:
                    sink.emit(frame)
                except FrameSinkError as exc:
                    logger.warning("Dropped frame %d: %s", frame.index, exc)
                    self.result.frames_dropped += 1
        finally:
            if sink is not None:
                try:
                    sink.close()
                except FrameSinkError as exc:
                    logger.warning("Frame sink failed to close: %s", exc)

        logger.info("Done: %d frames", self.result.frames_run)
        return self.result


def run_simulation(
    config: "SimulationConfig",
    sink: "FrameSink | None" = None,
    should_stop: Callable[[], bool] | None = None,
) -> SimulationResult:
    """Convenience wrapper: build a Simulation and run it."""
    return Simulation(config).run(sink=sink, should_stop=should_stop)
