"""Tests for the finite-difference curvature evaluator."""

from __future__ import annotations

import math

import numpy as np
import pytest

from tubesight.geometry.centerline import make_centerline
from tubesight.geometry.curvature import (
    analyze_point,
    curvature,
    curvature_profile,
    curvature_radius,
    deflection_angle,
)
from tests.conftest import DIAGONAL_POINTS


def test_curvature_is_non_negative(s_curve, helix_curve):
    for curve in (s_curve, helix_curve):
        profile = curvature_profile(curve, 300)
        assert np.all(profile.curvature >= 0.0)


def test_straight_line_has_zero_curvature(straight_curve):
    for t in np.linspace(0.0, 1.0, 51):
        assert curvature(straight_curve, t) == 0.0
        assert math.isinf(curvature_radius(straight_curve, t))


def test_diagonal_line_has_zero_curvature():
    curve = make_centerline(DIAGONAL_POINTS)
    profile = curvature_profile(curve, 100)
    assert np.all(profile.curvature == 0.0)
    assert np.all(np.isinf(profile.radius))


def test_circle_curvature_close_to_inverse_radius(circle_curve):
    # Radius 100 → κ = 0.01; the spline only approximates the circle
    for t in (0.3, 0.45, 0.52, 0.7):
        assert 0.008 < curvature(circle_curve, t) < 0.011
        assert 90.0 < curvature_radius(circle_curve, t) < 125.0


def test_curvature_is_reciprocal_of_radius(helix_curve):
    for t in (0.2, 0.5, 0.8):
        kappa = curvature(helix_curve, t)
        assert kappa > 0.0
        assert kappa == pytest.approx(1.0 / curvature_radius(helix_curve, t))


def test_endpoint_stencil_is_degenerate(s_curve):
    # At t = 0 the backward step clamps onto t itself, so v1 vanishes
    assert curvature(s_curve, 0.0) == 0.0


def test_profile_matches_scalar_evaluation(helix_curve):
    profile = curvature_profile(helix_curve, 40)
    assert profile.samples == 40
    assert len(profile.params) == 41
    for i in (1, 13, 27, 39):
        assert profile.params[i] == i / 40
        assert profile.curvature[i] == pytest.approx(curvature(helix_curve, i / 40), rel=1e-12)


def test_profile_rejects_zero_samples(s_curve):
    with pytest.raises(ValueError):
        curvature_profile(s_curve, 0)


def test_out_of_range_query_rejected(s_curve):
    with pytest.raises(ValueError):
        curvature(s_curve, 1.01)


@pytest.mark.parametrize(
    "kappa, expected",
    [
        (0.0, 0.0),
        (0.05, 30.0),
        (0.1, 90.0),
        (0.5, 90.0),
    ],
)
def test_deflection_angle(kappa, expected):
    assert deflection_angle(kappa) == pytest.approx(expected)


def test_analyze_point_frame_is_orthonormal(helix_curve):
    sample = analyze_point(helix_curve, 0.4)
    t = np.array(sample.tangent)
    n = np.array(sample.normal)
    b = np.array(sample.binormal)
    for v in (t, n, b):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert abs(np.dot(t, n)) < 1e-9
    assert abs(np.dot(t, b)) < 1e-9
    assert abs(np.dot(n, b)) < 1e-9
    assert sample.curvature == pytest.approx(curvature(helix_curve, 0.4))


def test_analyze_point_on_straight_run(straight_curve):
    sample = analyze_point(straight_curve, 0.5)
    assert sample.curvature == 0.0
    assert math.isinf(sample.curvature_radius)
    assert sample.angle == 0.0
    np.testing.assert_allclose(sample.tangent, (1.0, 0.0, 0.0), atol=1e-12)
    assert abs(np.dot(sample.tangent, sample.normal)) < 1e-12
