"""Shared test fixtures."""

from __future__ import annotations

import math

import numpy as np
import pytest

from tubesight.geometry.centerline import CenterlineCurve, make_centerline


# Same S-curve the builder substitutes when no points are given
S_CURVE_POINTS = [
    (0.0, 0.0, 0.0),
    (60.0, 0.0, 0.0),
    (120.0, 40.0, 0.0),
    (180.0, 40.0, 60.0),
    (240.0, 0.0, 90.0),
    (300.0, -20.0, 120.0),
]

STRAIGHT_POINTS = [
    (0.0, 0.0, 0.0),
    (50.0, 0.0, 0.0),
    (100.0, 0.0, 0.0),
    (175.0, 0.0, 0.0),
]

# Unevenly spaced but collinear along the space diagonal
DIAGONAL_POINTS = [
    (0.0, 0.0, 0.0),
    (10.0, 10.0, 10.0),
    (35.0, 35.0, 35.0),
    (40.0, 40.0, 40.0),
]

# Full turn of a radius-100 circle in the XY plane, 30° apart
CIRCLE_POINTS = [
    (100.0 * math.cos(i * math.pi / 6), 100.0 * math.sin(i * math.pi / 6), 0.0)
    for i in range(13)
]

# Two turns of a helix, radius 60, pitch 160
HELIX_POINTS = [
    (60.0 * math.cos(i * math.pi / 4), 60.0 * math.sin(i * math.pi / 4), 20.0 * i)
    for i in range(17)
]

SERVED_POINTS_JSON = [
    {"x": 0, "y": 0, "z": 0},
    {"x": 50, "y": 10},
    {"x": 100, "y": 30, "z": 15.5},
    {"x": 150, "y": 10, "z": 40},
]


@pytest.fixture
def s_curve() -> CenterlineCurve:
    return make_centerline(S_CURVE_POINTS)


@pytest.fixture
def straight_curve() -> CenterlineCurve:
    return make_centerline(STRAIGHT_POINTS)


@pytest.fixture
def circle_curve() -> CenterlineCurve:
    return make_centerline(CIRCLE_POINTS)


@pytest.fixture
def helix_curve() -> CenterlineCurve:
    return make_centerline(HELIX_POINTS)


@pytest.fixture
def s_curve_array() -> np.ndarray:
    return np.array(S_CURVE_POINTS)
