"""
Animated rendering of simulation frames.

Draws the attractor, the orbiting bodies and their trails, one image per
frame, and writes the sequence as an animated GIF with matplotlib's Pillow
writer.
"""

from __future__ import annotations
from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from orbitsim.core.errors import FrameSinkError
from orbitsim.core.frame import Frame

SUN_COLOR = "yellow"
PLANET_COLOR = "blue"
TRAIL_COLOR = "lightblue"
DEFAULT_TITLE = "Multi-Planet Simulation"


def _setup_axes(ax: Axes, size: float, title: str) -> None:
    half = size / 2
    ax.set_xlim(-half, half)
    ax.set_ylim(-half, half)
    ax.set_aspect("equal")
    ax.set_title(title)


def plot_frame(
    frame: Frame,
    size: float,
    ax: Axes | None = None,
    title: str = DEFAULT_TITLE,
    figsize: tuple[float, float] = (8, 8),
) -> tuple[Figure, Axes]:
    """
    Draw a single frame.

    Args:
        frame: Snapshot to draw
        size: Viewport width/height; axes span [-size/2, size/2]
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    _setup_axes(ax, size, title)

    for trail in frame.trail_arrays():
        if len(trail) > 0:
            ax.plot(trail[:, 0], trail[:, 1], color=TRAIL_COLOR, linewidth=1, zorder=1)

    positions = frame.position_array()
    if len(positions) > 0:
        ax.scatter(positions[:, 0], positions[:, 1], color=PLANET_COLOR, s=40, zorder=2)

    ax.scatter([frame.attractor.x], [frame.attractor.y], color=SUN_COLOR, s=120, zorder=3)
    return fig, ax


def animate_frames(
    frames: Sequence[Frame],
    size: float,
    interval: int = 100,
    title: str = DEFAULT_TITLE,
    figsize: tuple[float, float] = (8, 8),
) -> tuple[Figure, animation.FuncAnimation]:
    """
    Build a FuncAnimation over the frames.

    Artists are created once and updated in place per frame.

    Returns:
        (fig, anim) tuple; close fig when done with the animation
    """
    if not frames:
        raise ValueError("no frames to animate")

    fig, ax = plt.subplots(figsize=figsize)
    _setup_axes(ax, size, title)

    n_bodies = frames[0].n_bodies
    trail_lines = [
        ax.plot([], [], color=TRAIL_COLOR, linewidth=1, zorder=1)[0]
        for _ in range(n_bodies)
    ]
    planets = ax.scatter([], [], color=PLANET_COLOR, s=40, zorder=2)
    sun = ax.scatter([], [], color=SUN_COLOR, s=120, zorder=3)

    def update(i):
        frame = frames[i]
        sun.set_offsets(np.array([[frame.attractor.x, frame.attractor.y]]))
        planets.set_offsets(frame.position_array())
        for line, trail in zip(trail_lines, frame.trail_arrays()):
            line.set_data(trail[:, 0], trail[:, 1])
        return [sun, planets, *trail_lines]

    anim = animation.FuncAnimation(
        fig, update, frames=len(frames), interval=interval, blit=False
    )
    return fig, anim


def save_animation(
    frames: Sequence[Frame],
    size: float,
    path: str | Path,
    fps: int = 10,
    dpi: int = 100,
    title: str = DEFAULT_TITLE,
) -> Path:
    """
    Render frames to an animated GIF.

    Raises:
        FrameSinkError: no frames, Pillow writer unavailable, or write failure
    """
    if not frames:
        raise FrameSinkError("no frames to render")
    if not animation.writers.is_available("pillow"):
        raise FrameSinkError("matplotlib Pillow writer is not available")

    path = Path(path)
    fig, anim = animate_frames(
        frames, size, interval=int(1000 / fps), title=title, figsize=(8, 8)
    )
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        anim.save(path, writer=animation.PillowWriter(fps=fps), dpi=dpi)
    except OSError as exc:
        raise FrameSinkError(f"cannot write animation to {path}: {exc}") from exc
    finally:
        plt.close(fig)
    return path


class AnimationSink:
    """Collects frames and writes the GIF when closed."""

    def __init__(self, path: str | Path, size: float, fps: int = 10, dpi: int = 100):
        self.path = Path(path)
        self.size = size
        self.fps = fps
        self.dpi = dpi
        self.frames: list[Frame] = []

    def emit(self, frame: Frame) -> None:
        self.frames.append(frame)

    def close(self) -> None:
        """Write the GIF; an empty run writes nothing."""
        if not self.frames:
            return
        save_animation(self.frames, self.size, self.path, fps=self.fps, dpi=self.dpi)
