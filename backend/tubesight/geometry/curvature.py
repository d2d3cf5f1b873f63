"""Finite-difference curvature along a centerline.

κ ≈ |v1 × (v2 - v1)| / |v1|³ with v1 = p(t) - p(t - ε), v2 = p(t + ε) - p(t).
The critical-point thresholds in critical_points.py are calibrated against
this approximation, not against the analytic spline derivatives.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tubesight.geometry.centerline import CenterlineCurve
from tubesight.utils.vectors import any_perpendicular, as_tuple, norms, normalize

FD_STEP = 1e-4
# Below this cross-product magnitude the curve is treated as locally straight
DEGENERATE_CROSS = 1e-6
# Curvature → deflection angle calibration: 0.1 maps to 90°
ANGLE_SCALE = 10.0


@dataclass(frozen=True)
class CurvatureProfile:
    """Curvature sampled at t_i = i / samples, i = 0..samples."""

    params: NDArray[np.float64]
    curvature: NDArray[np.float64]
    radius: NDArray[np.float64]

    @property
    def samples(self) -> int:
        return len(self.params) - 1


@dataclass(frozen=True)
class CurvatureSample:
    t: float
    curvature: float
    curvature_radius: float
    angle: float
    position: tuple[float, float, float]
    tangent: tuple[float, float, float]
    normal: tuple[float, float, float]
    binormal: tuple[float, float, float]


def _radii(curve: CenterlineCurve, t: ArrayLike) -> NDArray[np.float64]:
    params = np.asarray(t, dtype=np.float64)
    here = curve.position(params)
    before = curve.position(np.clip(params - FD_STEP, 0.0, 1.0))
    after = curve.position(np.clip(params + FD_STEP, 0.0, 1.0))

    v1 = here - before
    v2 = after - here
    cross = np.cross(v1, v2 - v1)
    num = norms(v1) ** 3
    den = norms(cross)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(den < DEGENERATE_CROSS, np.inf, num / den)


def _curvatures(radii: NDArray[np.float64]) -> NDArray[np.float64]:
    with np.errstate(divide="ignore"):
        return np.where(np.isinf(radii), 0.0, 1.0 / radii)


def curvature_radius(curve: CenterlineCurve, t: float) -> float:
    """Local curvature radius at t; +inf where the curve is straight."""
    return float(_radii(curve, t))


def curvature(curve: CenterlineCurve, t: float) -> float:
    """Local curvature at t; exactly 0 where the curve is straight."""
    return float(_curvatures(_radii(curve, t)))


def curvature_profile(curve: CenterlineCurve, samples: int) -> CurvatureProfile:
    """Curvature at samples + 1 evenly spaced parameters."""
    if samples < 1:
        raise ValueError("samples must be at least 1")
    params = np.arange(samples + 1) / samples
    radii = _radii(curve, params)
    return CurvatureProfile(params=params, curvature=_curvatures(radii), radius=radii)


def deflection_angle(kappa: float) -> float:
    """Bounded deflection proxy in degrees, 0..90."""
    return math.degrees(math.asin(min(1.0, kappa * ANGLE_SCALE)))


def analyze_point(curve: CenterlineCurve, t: float) -> CurvatureSample:
    """Curvature plus Frenet frame at a single parameter."""
    radius = curvature_radius(curve, t)
    kappa = 0.0 if math.isinf(radius) else 1.0 / radius

    tangent = curve.tangent(t)
    binormal = normalize(np.cross(curve.derivative(t), curve.second_derivative(t)))
    if kappa == 0.0 or not np.any(binormal):
        normal = any_perpendicular(tangent)
        binormal = normalize(np.cross(tangent, normal))
    else:
        normal = normalize(np.cross(binormal, tangent))

    return CurvatureSample(
        t=float(t),
        curvature=kappa,
        curvature_radius=radius,
        angle=deflection_angle(kappa),
        position=as_tuple(curve.position(t)),
        tangent=as_tuple(tangent),
        normal=as_tuple(normal),
        binormal=as_tuple(binormal),
    )
