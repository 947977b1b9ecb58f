"""
Visualization utilities.

- Single-frame plots
- Animated GIF output of a frame sequence
"""

from orbitsim.viz.animation import (
    plot_frame,
    animate_frames,
    save_animation,
    AnimationSink,
)

__all__ = [
    "plot_frame",
    "animate_frames",
    "save_animation",
    "AnimationSink",
]
