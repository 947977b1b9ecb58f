"""
Frame sinks: the consumers that turn frames into something visible.

A sink receives one Frame per tick via emit() and is closed once the run
ends. Sinks signal failure with FrameSinkError; the driver drops the frame
and keeps simulating.
"""

from __future__ import annotations
from typing import Protocol, TextIO

from orbitsim.core.errors import FrameSinkError
from orbitsim.core.frame import Frame


class FrameSink(Protocol):
    """Protocol for rendering collaborators."""

    def emit(self, frame: Frame) -> None:
        """Accept the frame for the tick just simulated."""
        ...

    def close(self) -> None:
        """Release resources; called once after the last frame."""
        ...


class FrameRecorder:
    """Keeps every frame in memory."""

    def __init__(self):
        self.frames: list[Frame] = []
        self.closed = False

    def emit(self, frame: Frame) -> None:
        self.frames.append(frame)

    def close(self) -> None:
        self.closed = True

    def __len__(self) -> int:
        return len(self.frames)


# Inline-data plot command: sun, planets, trails (three '-' blocks)
PLOT_COMMAND = (
    "plot '-' with points pt 7 ps 2 lc rgb 'yellow' title 'Sun', "
    "'-' with points pt 7 ps 1.5 lc rgb 'blue' title 'Planets', "
    "'-' with lines lc rgb 'light-blue' title 'Planet Trails'"
)
END_OF_BLOCK = "e"


def format_frame(frame: Frame, header: str | None = PLOT_COMMAND) -> str:
    """
    Render a frame as gnuplot inline data.

    Layout: optional header line, the attractor point, 'e', one line per body
    position, 'e', then each trail followed by a blank line, and a final 'e'.
    """
    lines = []
    if header:
        lines.append(header)

    lines.append(f"{frame.attractor.x:f} {frame.attractor.y:f}")
    lines.append(END_OF_BLOCK)

    for p in frame.positions:
        lines.append(f"{p.x:f} {p.y:f}")
    lines.append(END_OF_BLOCK)

    for trail in frame.trails:
        for p in trail:
            lines.append(f"{p.x:f} {p.y:f}")
        lines.append("")
    lines.append(END_OF_BLOCK)

    return "\n".join(lines) + "\n"


class TextFrameSink:
    """
    Writes frames as plain-text plot data to a caller-supplied stream.

    The stream can be a file, or the stdin of a plotting process the caller
    started. The sink does not close the stream it was given.
    """

    def __init__(self, stream: TextIO, header: str | None = PLOT_COMMAND):
        self.stream = stream
        self.header = header

    def emit(self, frame: Frame) -> None:
        try:
            self.stream.write(format_frame(frame, self.header))
        except (OSError, ValueError) as exc:
            raise FrameSinkError(f"cannot write frame {frame.index}: {exc}") from exc

    def close(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise FrameSinkError(f"cannot flush stream: {exc}") from exc
