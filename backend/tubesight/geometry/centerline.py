"""Centerline builder — open Catmull-Rom spline through 3D control points.

The curve is parametrized on t ∈ [0, 1] uniformly per segment: with n control
points, segment i spans [i / (n - 1), (i + 1) / (n - 1)] whatever its length.
Each segment is a cubic Hermite polynomial whose end tangents come from the
neighbouring control points (phantom points are reflected at the open ends).
The pieces are stored as a scipy PPoly so derivatives are exact.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.interpolate import PPoly

from tubesight.utils.vectors import normalize, polyline_lengths

logger = logging.getLogger(__name__)

# S-shaped pipe run spanning 300 units along x
DEFAULT_CONTROL_POINTS: NDArray[np.float64] = np.array(
    [
        [0.0, 0.0, 0.0],
        [60.0, 0.0, 0.0],
        [120.0, 40.0, 0.0],
        [180.0, 40.0, 60.0],
        [240.0, 0.0, 90.0],
        [300.0, -20.0, 120.0],
    ]
)
DEFAULT_CONTROL_POINTS.setflags(write=False)

DEFAULT_TENSION = 0.5
CURVE_TYPES = ("centripetal", "chordal", "catmullrom")

# Knot exponents applied to the squared chord length
_KNOT_EXPONENTS = {"centripetal": 0.25, "chordal": 0.5}

# Knot intervals shorter than this come from repeated control points
_MIN_KNOT_INTERVAL = 1e-4

# Slack on the [0, 1] range check for parameters produced by arithmetic
_PARAM_TOLERANCE = 1e-12

# Polyline resolution for arc-length lookups
ARC_LENGTH_DIVISIONS = 200


def resolve_control_points(points: Any) -> tuple[NDArray[np.float64], bool]:
    """Return (usable Nx3 control points, whether the default was substituted).

    Missing, empty or malformed input never fails: it is replaced by
    DEFAULT_CONTROL_POINTS.
    """
    if points is None:
        return DEFAULT_CONTROL_POINTS.copy(), True

    try:
        arr = np.array(points, dtype=np.float64)
    except (TypeError, ValueError):
        logger.warning("Control points are not numeric; using default centerline")
        return DEFAULT_CONTROL_POINTS.copy(), True

    if arr.size == 0:
        logger.debug("No control points supplied; using default centerline")
        return DEFAULT_CONTROL_POINTS.copy(), True
    if arr.ndim != 2 or arr.shape[1] != 3:
        logger.warning("Control points have shape %s, expected Nx3; using default", arr.shape)
        return DEFAULT_CONTROL_POINTS.copy(), True
    if len(arr) < 2:
        logger.warning("A centerline needs at least 2 control points, got %d; using default", len(arr))
        return DEFAULT_CONTROL_POINTS.copy(), True
    if not np.all(np.isfinite(arr)):
        logger.warning("Control points contain non-finite coordinates; using default")
        return DEFAULT_CONTROL_POINTS.copy(), True

    return arr, False


def _segment_tangents(
    p0: NDArray[np.float64],
    p1: NDArray[np.float64],
    p2: NDArray[np.float64],
    p3: NDArray[np.float64],
    curve_type: str,
    tension: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """End tangents of the p1→p2 segment in local (0..1) parameter units."""
    if curve_type == "catmullrom":
        return tension * (p2 - p0), tension * (p3 - p1)

    exponent = _KNOT_EXPONENTS[curve_type]
    dt0 = float(np.sum((p1 - p0) ** 2) ** exponent)
    dt1 = float(np.sum((p2 - p1) ** 2) ** exponent)
    dt2 = float(np.sum((p3 - p2) ** 2) ** exponent)

    if dt1 < _MIN_KNOT_INTERVAL:
        dt1 = 1.0
    if dt0 < _MIN_KNOT_INTERVAL:
        dt0 = dt1
    if dt2 < _MIN_KNOT_INTERVAL:
        dt2 = dt1

    m1 = (p1 - p0) / dt0 - (p2 - p0) / (dt0 + dt1) + (p2 - p1) / dt1
    m2 = (p2 - p1) / dt1 - (p3 - p1) / (dt1 + dt2) + (p3 - p2) / dt2

    # tension 0.5 is the plain non-uniform Catmull-Rom tangent
    scale = 2.0 * tension * dt1
    return m1 * scale, m2 * scale


def _hermite_coefficients(
    points: NDArray[np.float64], curve_type: str, tension: float
) -> NDArray[np.float64]:
    """PPoly coefficient array, shape (4, n - 1, 3), highest power first."""
    n = len(points)
    first_phantom = 2.0 * points[0] - points[1]
    last_phantom = 2.0 * points[-1] - points[-2]
    scale = float(n - 1)

    coeffs = np.empty((4, n - 1, 3))
    for i in range(n - 1):
        p0 = points[i - 1] if i > 0 else first_phantom
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i + 2 < n else last_phantom

        m1, m2 = _segment_tangents(p0, p1, p2, p3, curve_type, tension)

        # Local weight w = (t - t_i) * (n - 1), so power k rescales by (n - 1)**k
        coeffs[0, i] = (2.0 * p1 - 2.0 * p2 + m1 + m2) * scale**3
        coeffs[1, i] = (-3.0 * p1 + 3.0 * p2 - 2.0 * m1 - m2) * scale**2
        coeffs[2, i] = m1 * scale
        coeffs[3, i] = p1

    return coeffs


class CenterlineCurve:
    """Immutable open spline through the control points, parametrized on t ∈ [0, 1].

    Direct queries validate t eagerly and raise ValueError outside [0, 1].
    Scalar t returns a (3,) array; array t returns (..., 3).
    """

    __slots__ = ("_control_points", "_tension", "_curve_type", "_poly", "_velocity", "_acceleration")

    def __init__(
        self,
        control_points: ArrayLike,
        tension: float = DEFAULT_TENSION,
        curve_type: str = "centripetal",
    ) -> None:
        points = np.array(control_points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError(f"control points must be Nx3, got shape {points.shape}")
        if len(points) < 2:
            raise ValueError("a centerline needs at least 2 control points")
        if curve_type not in CURVE_TYPES:
            raise ValueError(f"unknown curve type {curve_type!r}, expected one of {CURVE_TYPES}")
        if not np.isfinite(tension):
            raise ValueError("tension must be finite")
        points.setflags(write=False)

        self._control_points = points
        self._tension = float(tension)
        self._curve_type = curve_type
        self._poly = PPoly(
            _hermite_coefficients(points, curve_type, self._tension),
            np.linspace(0.0, 1.0, len(points)),
            extrapolate=False,
        )
        self._velocity = self._poly.derivative()
        self._acceleration = self._poly.derivative(2)

    def __repr__(self) -> str:
        return (
            f"CenterlineCurve(points={len(self._control_points)}, "
            f"curve_type={self._curve_type!r}, tension={self._tension})"
        )

    @property
    def control_points(self) -> NDArray[np.float64]:
        return self._control_points

    @property
    def tension(self) -> float:
        return self._tension

    @property
    def curve_type(self) -> str:
        return self._curve_type

    def _params(self, t: ArrayLike) -> NDArray[np.float64]:
        params = np.asarray(t, dtype=np.float64)
        if np.any(params < -_PARAM_TOLERANCE) or np.any(params > 1.0 + _PARAM_TOLERANCE):
            raise ValueError("curve parameter t must lie in [0, 1]")
        return np.clip(params, 0.0, 1.0)

    def position(self, t: ArrayLike) -> NDArray[np.float64]:
        return self._poly(self._params(t))

    def derivative(self, t: ArrayLike) -> NDArray[np.float64]:
        """dp/dt. One-sided at the ends and at segment joins."""
        return self._velocity(self._params(t))

    def second_derivative(self, t: ArrayLike) -> NDArray[np.float64]:
        return self._acceleration(self._params(t))

    def tangent(self, t: ArrayLike) -> NDArray[np.float64]:
        """Unit direction of travel.

        Zero where dp/dt vanishes, as at an end whose control points coincide
        with their neighbour (e.g. a repeated first or last point).
        """
        return normalize(self.derivative(t))

    def points(self, divisions: int = ARC_LENGTH_DIVISIONS) -> NDArray[np.float64]:
        """divisions + 1 positions at evenly spaced parameters."""
        if divisions < 1:
            raise ValueError("divisions must be at least 1")
        return self.position(np.arange(divisions + 1) / divisions)

    def arc_lengths(self, divisions: int = ARC_LENGTH_DIVISIONS) -> NDArray[np.float64]:
        """Cumulative polyline length at each of the divisions + 1 even parameters."""
        return polyline_lengths(self.points(divisions))

    def length(self, divisions: int = ARC_LENGTH_DIVISIONS) -> float:
        return float(self.arc_lengths(divisions)[-1])

    def param_at(self, u: ArrayLike) -> NDArray[np.float64]:
        """Map arc-length fraction u ∈ [0, 1] to curve parameter t."""
        fractions = self._params(u)
        lengths = self.arc_lengths()
        total = lengths[-1]
        if total <= 0.0:
            return fractions
        params = np.arange(len(lengths)) / (len(lengths) - 1)
        return np.interp(fractions * total, lengths, params)

    def point_at(self, u: ArrayLike) -> NDArray[np.float64]:
        return self.position(self.param_at(u))

    def spaced_points(self, divisions: int = ARC_LENGTH_DIVISIONS) -> NDArray[np.float64]:
        """divisions + 1 positions spaced evenly by arc length."""
        if divisions < 1:
            raise ValueError("divisions must be at least 1")
        return self.point_at(np.arange(divisions + 1) / divisions)


def make_centerline(
    points: Any = None,
    tension: float = DEFAULT_TENSION,
    curve_type: str = "centripetal",
) -> CenterlineCurve:
    """Build the centerline through ``points``, or through the default S-curve."""
    control_points, substituted = resolve_control_points(points)
    curve = CenterlineCurve(control_points, tension=tension, curve_type=curve_type)
    logger.debug(
        "Built %r%s", curve, " from default control points" if substituted else ""
    )
    return curve
