"""Tests for centerline construction and evaluation."""

from __future__ import annotations

import numpy as np
import pytest

from tubesight.geometry.centerline import (
    DEFAULT_CONTROL_POINTS,
    CenterlineCurve,
    make_centerline,
    resolve_control_points,
)
from tests.conftest import CIRCLE_POINTS, S_CURVE_POINTS, STRAIGHT_POINTS


def test_endpoints_match_control_points(s_curve):
    np.testing.assert_allclose(s_curve.position(0.0), S_CURVE_POINTS[0], atol=1e-9)
    np.testing.assert_allclose(s_curve.position(1.0), S_CURVE_POINTS[-1], atol=1e-9)


@pytest.mark.parametrize("curve_type", ["centripetal", "chordal", "catmullrom"])
def test_passes_through_every_control_point(curve_type):
    curve = make_centerline(CIRCLE_POINTS, curve_type=curve_type)
    n = len(CIRCLE_POINTS)
    params = np.arange(n) / (n - 1)
    np.testing.assert_allclose(curve.position(params), CIRCLE_POINTS, atol=1e-8)


def test_endpoints_hold_for_two_points():
    curve = make_centerline([(0, 0, 0), (100, 0, 0)])
    np.testing.assert_allclose(curve.position(0.0), [0, 0, 0], atol=1e-9)
    np.testing.assert_allclose(curve.position(0.5), [50, 0, 0], atol=1e-9)
    np.testing.assert_allclose(curve.position(1.0), [100, 0, 0], atol=1e-9)


def test_default_substitution_for_missing_input():
    for empty in (None, [], np.empty((0, 3))):
        curve = make_centerline(empty)
        np.testing.assert_array_equal(curve.control_points, DEFAULT_CONTROL_POINTS)
        np.testing.assert_allclose(curve.position(0.0), DEFAULT_CONTROL_POINTS[0], atol=1e-9)
        np.testing.assert_allclose(curve.position(1.0), DEFAULT_CONTROL_POINTS[-1], atol=1e-9)


def test_default_builds_are_identical():
    a = make_centerline()
    b = make_centerline()
    np.testing.assert_array_equal(a.points(150), b.points(150))


def test_default_spans_300_units_along_x():
    curve = make_centerline()
    pts = curve.points(200)
    assert pts[:, 0].max() - pts[:, 0].min() == pytest.approx(300.0, abs=1.0)


@pytest.mark.parametrize(
    "bad",
    [
        [(1.0, 2.0, 3.0)],  # single point
        [(0, 0, 0), (1, float("nan"), 0)],
        [(0, 0), (1, 1)],  # 2D
        [(0, 0, 0), (1, 1)],  # ragged
        "not points",
    ],
)
def test_unusable_points_fall_back_to_default(bad):
    points, substituted = resolve_control_points(bad)
    assert substituted
    np.testing.assert_array_equal(points, DEFAULT_CONTROL_POINTS)


def test_usable_points_are_kept():
    points, substituted = resolve_control_points(STRAIGHT_POINTS)
    assert not substituted
    np.testing.assert_array_equal(points, np.array(STRAIGHT_POINTS))


def test_tangent_is_unit_and_follows_travel(s_curve):
    params = np.linspace(0.0, 1.0, 41)
    tangents = s_curve.tangent(params)
    np.testing.assert_allclose(np.linalg.norm(tangents, axis=1), 1.0, atol=1e-12)
    # The S-curve advances along +x throughout
    assert np.all(tangents[:, 0] > 0)


def test_tangent_is_continuous_across_knots(s_curve):
    n = len(S_CURVE_POINTS)
    for i in range(1, n - 1):
        knot = i / (n - 1)
        before = s_curve.tangent(knot - 1e-7)
        after = s_curve.tangent(knot + 1e-7)
        np.testing.assert_allclose(before, after, atol=1e-4)


def test_tangent_is_zero_at_repeated_end_points():
    curve = make_centerline([(0, 0, 0), (0, 0, 0), (10, 0, 0), (10, 0, 0)])
    np.testing.assert_array_equal(curve.tangent(0.0), np.zeros(3))
    np.testing.assert_array_equal(curve.tangent(1.0), np.zeros(3))
    # Interior of the run still has a direction
    np.testing.assert_allclose(curve.tangent(0.5), [1.0, 0.0, 0.0], atol=1e-12)


def test_zero_tension_follows_control_polygon():
    points = [(0, 0, 0), (60, 0, 0), (120, 40, 0), (180, 40, 60)]
    tight = make_centerline(points, tension=0.0)
    loose = make_centerline(points)
    # Segment 1 spans t in [1/3, 2/3]; its midpoint lies on the chord when tension is 0
    chord_mid = (np.array(points[1]) + np.array(points[2])) / 2
    np.testing.assert_allclose(tight.position(0.5), chord_mid, atol=1e-9)
    assert np.linalg.norm(loose.position(0.5) - chord_mid) > 1e-3


def test_out_of_range_parameter_rejected(s_curve):
    with pytest.raises(ValueError):
        s_curve.position(1.5)
    with pytest.raises(ValueError):
        s_curve.tangent(-0.1)


def test_curve_is_immutable(s_curve):
    with pytest.raises(ValueError):
        s_curve.control_points[0, 0] = 42.0
    with pytest.raises(AttributeError):
        s_curve.tension = 0.9


def test_caller_array_is_not_shared():
    source = np.array(STRAIGHT_POINTS)
    curve = CenterlineCurve(source)
    source[0, 0] = 999.0
    assert curve.control_points[0, 0] == 0.0


def test_invalid_curve_type_rejected():
    with pytest.raises(ValueError):
        make_centerline(S_CURVE_POINTS, curve_type="bezier")


def test_bulk_sampling_shapes(s_curve):
    assert s_curve.points(10).shape == (11, 3)
    assert s_curve.spaced_points(20).shape == (21, 3)


def test_length_of_straight_run(straight_curve):
    assert straight_curve.length() == pytest.approx(175.0, rel=1e-6)


def test_spaced_points_are_evenly_spaced(s_curve):
    pts = s_curve.spaced_points(50)
    steps = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    assert steps.max() / steps.min() < 1.05
    np.testing.assert_allclose(pts[0], S_CURVE_POINTS[0], atol=1e-9)
    np.testing.assert_allclose(pts[-1], S_CURVE_POINTS[-1], atol=1e-6)
