#!/usr/bin/env python3
"""
Demo: Multi-Planet Simulation

Four planets start from the same point with different velocities around a
heavy sun:
1. Build the default preset
2. Run 250 ticks of gravity + movement
3. Save the frames as an animated GIF
4. Print orbit diagnostics for each planet

Shows how launch velocity alone decides whether a planet stays bound.
"""

import logging
from pathlib import Path

from orbitsim.analysis import estimate_period, specific_energy
from orbitsim.core import Simulation
from orbitsim.presets import default_config
from orbitsim.sinks import FrameRecorder
from orbitsim.viz import save_animation


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("=" * 60)
    print("  MULTI-PLANET SIMULATION")
    print("=" * 60)

    config = default_config()

    print(f"\n1. Setup:")
    print(f"   Sun: mass={config.sun.mass:g} at {config.sun.position}")
    for i, planet in enumerate(config.planets):
        print(f"   Planet {i}: mass={planet.mass:g}, v0={planet.velocity}")
    print(f"   G={config.gravity}, dt={config.dt}, frames={config.frame_count}")

    print(f"\n2. Running simulation...")
    simulation = Simulation(config)
    recorder = FrameRecorder()
    result = simulation.run(recorder)
    print(f"   Frames: {result.frames_run} (dropped {result.frames_dropped})")

    print(f"\n3. Rendering animation...")
    output_dir = Path("output/demo_multi_planet")
    output_path = save_animation(
        recorder.frames, config.size, output_dir / "multi_planet_sim.gif"
    )
    print(f"   Saved: {output_path}")

    # Print summary
    system = simulation.system
    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    for i, body in enumerate(system.bodies):
        energy = specific_energy(body, system.sun, system.gravity)
        period = estimate_period(body.trail, system.sun.position, system.dt)
        state = "bound" if energy < 0 else "escaping"
        period_text = f"{period:.1f}" if period is not None else "n/a"
        print(f"  • Planet {i}: energy/mass={energy:.1f} ({state}), period≈{period_text}")
    print("=" * 60)


if __name__ == "__main__":
    main()
