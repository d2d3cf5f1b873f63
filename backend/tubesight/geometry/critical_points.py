"""Critical points of the curvature profile — stress risk zones along a pipe run.

Each interior sample is compared with its two neighbours. First match wins:
  maximum    κi above both neighbours and above the noise floor
  minimum    κi below both neighbours (no floor: dips toward straight runs count)
  inflection (κi-1 - κi)(κi - κi+1) < 0
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tubesight.geometry.centerline import CenterlineCurve
from tubesight.geometry.curvature import CurvatureProfile, curvature_profile, deflection_angle
from tubesight.utils.vectors import as_tuple

DEFAULT_SAMPLES = 200
DEFAULT_DEGREE_SAMPLES = 100

# Flat or near-zero peaks are noise
MAXIMUM_NOISE_FLOOR = 0.001
HIGH_SEVERITY_CURVATURE = 0.01
MEDIUM_SEVERITY_CURVATURE = 0.005

DEGREE_SCALE = 1000.0
MAX_DEGREE = 10.0


class CriticalType(str, enum.Enum):
    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    INFLECTION = "inflection"


class Severity(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class CriticalPoint:
    t: float
    position: tuple[float, float, float]
    tangent: tuple[float, float, float]
    curvature: float
    curvature_radius: float
    angle: float
    type: CriticalType
    severity: Severity


def severity_for(kappa: float) -> Severity:
    if kappa > HIGH_SEVERITY_CURVATURE:
        return Severity.HIGH
    if kappa > MEDIUM_SEVERITY_CURVATURE:
        return Severity.MEDIUM
    return Severity.LOW


def classify_profile(kappa: NDArray[np.float64]) -> list[CriticalType | None]:
    """One label per sample; the two end samples are never critical."""
    labels: list[CriticalType | None] = [None] * len(kappa)
    if len(kappa) < 3:
        return labels

    prev = kappa[:-2]
    curr = kappa[1:-1]
    nxt = kappa[2:]

    is_max = (curr > prev) & (curr > nxt) & (curr > MAXIMUM_NOISE_FLOOR)
    is_min = ~is_max & (curr < prev) & (curr < nxt)
    is_inflection = ~is_max & ~is_min & ((prev - curr) * (curr - nxt) < 0)

    for offset in np.flatnonzero(is_max):
        labels[offset + 1] = CriticalType.MAXIMUM
    for offset in np.flatnonzero(is_min):
        labels[offset + 1] = CriticalType.MINIMUM
    for offset in np.flatnonzero(is_inflection):
        labels[offset + 1] = CriticalType.INFLECTION
    return labels


def critical_points_from_profile(
    curve: CenterlineCurve, profile: CurvatureProfile
) -> list[CriticalPoint]:
    labels = classify_profile(profile.curvature)
    indices = [i for i, label in enumerate(labels) if label is not None]
    if not indices:
        return []

    params = profile.params[indices]
    positions = curve.position(params)
    tangents = curve.tangent(params)

    points: list[CriticalPoint] = []
    for row, i in enumerate(indices):
        kappa = float(profile.curvature[i])
        points.append(
            CriticalPoint(
                t=float(profile.params[i]),
                position=as_tuple(positions[row]),
                tangent=as_tuple(tangents[row]),
                curvature=kappa,
                curvature_radius=float(profile.radius[i]),
                angle=deflection_angle(kappa),
                type=labels[i],
                severity=severity_for(kappa),
            )
        )
    return points


def find_critical_points(
    curve: CenterlineCurve, samples: int = DEFAULT_SAMPLES
) -> list[CriticalPoint]:
    """Critical points in ascending t.

    A uniformly flat profile, or one with no interior sample (samples < 2),
    yields [].
    """
    if samples < 2:
        return []
    return critical_points_from_profile(curve, curvature_profile(curve, samples))


def curve_degree(curve: CenterlineCurve, samples: int = DEFAULT_DEGREE_SAMPLES) -> float:
    """Overall curve complexity on a 0..10 scale (mean curvature × 1000, clamped)."""
    profile = curvature_profile(curve, samples)
    return min(MAX_DEGREE, float(np.mean(profile.curvature)) * DEGREE_SCALE)
