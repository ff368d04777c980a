"""Tests for physical diagnostics."""

import numpy as np
import pytest

from nbody_track import Body, PositionTracker, Vector2
from nbody_track.metrics import (
    angular_momentum,
    center_of_mass,
    kinetic_energy,
    potential_energy,
    system_summary,
    total_energy,
    total_momentum,
    track_deviation,
    track_to_array,
)


@pytest.fixture
def pair():
    """Two unit-ish masses moving in opposite directions."""
    return [
        Body(1.0, Vector2(0.0, 0.0), Vector2(1.0, 0.0)),
        Body(3.0, Vector2(4.0, 0.0), Vector2(0.0, -2.0)),
    ]


class TestEnergy:
    """Tests for kinetic and potential energy."""

    def test_kinetic(self, pair):
        """Sum of m v^2 / 2."""
        assert kinetic_energy(pair) == pytest.approx(0.5 * 1.0 * 1.0 + 0.5 * 3.0 * 4.0)

    def test_potential(self, pair):
        """-G m1 m2 / r for a single pair."""
        assert potential_energy(pair, gravitational_constant=1.0) == pytest.approx(-3.0 / 4.0)

    def test_potential_three_bodies(self):
        """Every pair counts once."""
        bodies = [
            Body(1.0, Vector2(0.0, 0.0)),
            Body(2.0, Vector2(3.0, 0.0)),
            Body(4.0, Vector2(0.0, 4.0)),
        ]
        expected = -(1.0 * 2.0 / 3.0 + 1.0 * 4.0 / 4.0 + 2.0 * 4.0 / 5.0)
        assert potential_energy(bodies, gravitational_constant=1.0) == pytest.approx(expected)

    def test_coincident_pair_skipped(self):
        """Zero-distance pairs contribute nothing."""
        bodies = [
            Body(1.0, Vector2(1.0, 1.0)),
            Body(1.0, Vector2(1.0, 1.0)),
            Body(2.0, Vector2(3.0, 1.0)),
        ]
        expected = -(2.0 / 2.0 + 2.0 / 2.0)
        assert potential_energy(bodies, gravitational_constant=1.0) == pytest.approx(expected)

    def test_total(self, pair):
        """Total energy is kinetic plus potential."""
        assert total_energy(pair, 1.0) == pytest.approx(
            kinetic_energy(pair) + potential_energy(pair, 1.0)
        )

    def test_empty_and_single(self):
        """Degenerate sets have zero energy."""
        assert kinetic_energy([]) == 0.0
        assert potential_energy([]) == 0.0
        assert potential_energy([Body(1.0, Vector2(0.0, 0.0))]) == 0.0


class TestMomentum:
    """Tests for momentum diagnostics."""

    def test_linear(self, pair):
        """Sum of m v."""
        assert total_momentum(pair) == Vector2(1.0, -6.0)

    def test_angular(self, pair):
        """z component of r x m v about the origin."""
        # Second body: (4, 0) x 3 * (0, -2) = -24
        assert angular_momentum(pair) == pytest.approx(-24.0)

    def test_empty(self):
        """Empty sets carry no momentum."""
        assert total_momentum([]) == Vector2(0.0, 0.0)
        assert angular_momentum([]) == 0.0

    def test_momentum_conserved_by_exact_forces(self):
        """Pairwise forces are symmetric, so total momentum stays put."""
        bodies = [
            Body(5.0, Vector2(-10.0, 0.0), Vector2(0.0, 0.1), name="a"),
            Body(3.0, Vector2(10.0, 2.0), Vector2(0.0, -0.1), name="b"),
            Body(1.0, Vector2(0.0, 8.0), name="c"),
        ]
        tracker = PositionTracker(bodies, 100.0, method="exact", gravitational_constant=1.0)
        before = total_momentum(tracker.initial_bodies)
        tracker.track("b", 20, 1)
        after = total_momentum(tracker.bodies)

        assert after.x == pytest.approx(before.x, abs=1e-9)
        assert after.y == pytest.approx(before.y, abs=1e-9)


class TestCenterOfMass:
    """Tests for center_of_mass()."""

    def test_weighted(self, pair):
        """Mass-weighted average position."""
        assert center_of_mass(pair) == Vector2(3.0, 0.0)

    def test_empty_raises(self):
        """An empty set has no center of mass."""
        with pytest.raises(ValueError, match="empty"):
            center_of_mass([])


class TestTrackDeviation:
    """Tests for track comparison."""

    def test_identical_tracks(self):
        """Identical tracks deviate by zero everywhere."""
        track = [Vector2(0.0, 0.0), Vector2(1.0, 1.0)]
        np.testing.assert_array_equal(track_deviation(track, list(track)), [0.0, 0.0])

    def test_distances(self):
        """Deviation is the per-step distance."""
        first = [Vector2(0.0, 0.0), Vector2(1.0, 1.0)]
        second = [Vector2(3.0, 4.0), Vector2(1.0, -1.0)]
        np.testing.assert_allclose(track_deviation(first, second), [5.0, 2.0])

    def test_length_mismatch_raises(self):
        """Tracks of different length cannot be compared."""
        with pytest.raises(ValueError, match="differ in length"):
            track_deviation([Vector2()], [Vector2(), Vector2()])

    def test_track_to_array(self):
        """Tracks convert to (n, 2) arrays."""
        array = track_to_array([Vector2(1.0, 2.0), Vector2(3.0, 4.0)])
        assert array.shape == (2, 2)
        np.testing.assert_array_equal(array, [[1.0, 2.0], [3.0, 4.0]])
        assert track_to_array([]).shape == (0, 2)


class TestSystemSummary:
    """Tests for system_summary()."""

    def test_returns_all_metrics(self, pair):
        """Summary contains every diagnostic."""
        summary = system_summary(pair, gravitational_constant=1.0)

        assert summary["body_count"] == 2
        assert summary["total_mass"] == 4.0
        assert summary["total_energy"] == pytest.approx(
            summary["kinetic_energy"] + summary["potential_energy"]
        )
        assert summary["momentum"] == Vector2(1.0, -6.0)
        assert summary["center_of_mass"] == Vector2(3.0, 0.0)

    def test_empty(self):
        """Empty sets summarize without errors."""
        summary = system_summary([])
        assert summary["body_count"] == 0
        assert summary["total_mass"] == 0.0
        assert summary["center_of_mass"] is None
