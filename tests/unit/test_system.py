"""Unit tests for SolarSystem."""

import logging

import numpy as np
import pytest

from orbitsim.core.body import Body
from orbitsim.core.system import SolarSystem
from orbitsim.core.vector import Vector2D


def make_body(position, velocity, mass=1e3):
    return Body(mass, Vector2D(*position), Vector2D(*velocity))


class TestComposition:

    def test_add_body_keeps_order(self, sun):
        system = SolarSystem(sun)
        a = make_body((1.0, 0.0), (0.0, 1.0))
        b = make_body((2.0, 0.0), (0.0, 1.0))
        system.add_body(a)
        system.add_body(b)
        system.add_body(a)  # no duplicate detection
        assert system.bodies == [a, b, a]
        assert len(system) == 3

    def test_empty_system_ticks(self, sun):
        system = SolarSystem(sun)
        assert system.tick() == []
        frame = system.snapshot(0)
        assert frame.positions == ()
        assert frame.trails == ()


class TestTick:

    def test_reference_scenario_one_tick(self, sun, planet):
        system = SolarSystem(sun, gravity=1.0, dt=0.5, bodies=[planet])
        system.tick()

        # Position uses the pre-tick velocity
        assert planet.position == Vector2D(-1960.0, -2025.0)
        assert planet.velocity.x == pytest.approx(84.42, abs=0.01)
        assert planet.velocity.y == pytest.approx(-45.58, abs=0.01)
        assert list(planet.trail) == [Vector2D(-2000.0, -2000.0)]

    def test_gravity_pass_precedes_move_pass(self, sun, planet):
        system = SolarSystem(sun, gravity=1.0, dt=0.5, bodies=[planet])
        system.apply_gravity()
        assert planet.position == Vector2D(-2000.0, -2000.0)
        system.update_bodies()
        assert len(planet.trail) == 1

    def test_sun_never_moves(self, sun, planet):
        system = SolarSystem(sun, bodies=[planet])
        for _ in range(50):
            system.tick()
        assert sun.position == Vector2D(0.0, 0.0)
        assert sun.velocity == Vector2D(0.0, 0.0)
        assert len(sun.trail) == 0

    def test_trails_stay_time_aligned(self, sun):
        bodies = [make_body((-2000.0, -2000.0), (80.0, -50.0)), make_body((1500.0, 0.0), (0.0, 200.0))]
        system = SolarSystem(sun, bodies=bodies)
        for t in range(1, 8):
            system.tick()
            assert all(len(b.trail) == t for b in system.bodies)


class TestOrderIndependence:

    def _run(self, sun, layouts, ticks=25):
        bodies = [make_body(*layout) for layout in layouts]
        system = SolarSystem(sun, gravity=1.0, dt=0.5, bodies=bodies)
        for _ in range(ticks):
            system.tick()
        return [b.state() for b in bodies]

    def test_swapped_order_gives_identical_states(self, sun):
        a = ((-2000.0, -2000.0), (80.0, -50.0))
        b = ((1500.0, 700.0), (-30.0, 190.0))

        forward = self._run(sun, [a, b])
        backward = self._run(sun, [b, a])

        assert forward[0] == backward[1]
        assert forward[1] == backward[0]


class TestDegenerate:

    def test_overlapping_body_is_skipped_and_logged(self, sun, planet, caplog):
        stuck = make_body((0.0, 0.0), (1.0, 0.0))
        system = SolarSystem(sun, bodies=[planet, stuck])

        with caplog.at_level(logging.WARNING, logger="orbitsim.core.system"):
            skipped = system.tick()

        assert skipped == [1]
        assert "body 1" in caplog.text
        assert stuck.velocity == Vector2D(1.0, 0.0)
        assert stuck.position == Vector2D(0.5, 0.0)
        # Other bodies are still integrated
        assert planet.position == Vector2D(-1960.0, -2025.0)
        assert np.all(np.isfinite(planet.velocity.to_array()))

    def test_near_zero_separation_is_skipped(self, sun):
        close = make_body((1e-160, 0.0), (1.0, 0.0))
        system = SolarSystem(sun, bodies=[close])

        assert system.tick() == [0]
        assert close.velocity == Vector2D(1.0, 0.0)
        assert close.position.is_finite()


class TestSnapshot:

    def test_snapshot_groups(self, sun):
        a = make_body((-2000.0, -2000.0), (80.0, -50.0))
        b = make_body((1500.0, 0.0), (0.0, 200.0))
        system = SolarSystem(sun, bodies=[a, b])
        system.tick()
        system.tick()

        frame = system.snapshot(1)
        assert frame.index == 1
        assert frame.attractor == sun.position
        assert frame.positions == (a.position, b.position)
        assert frame.trails == (tuple(a.trail), tuple(b.trail))

    def test_snapshot_is_not_affected_by_later_ticks(self, sun, planet):
        system = SolarSystem(sun, bodies=[planet])
        system.tick()
        frame = system.snapshot(0)
        system.tick()
        assert len(frame.trails[0]) == 1
        assert frame.positions[0] != planet.position
