"""Rotation-minimizing tangent/normal/binormal frames for sweeping a tube.

Frames are sampled evenly by arc length. The first normal is seeded
perpendicular to the starting tangent; each following frame rotates the
previous normal by the angle between consecutive tangents, so normals stay
continuous through straight and inflecting sections.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation

from tubesight.geometry.centerline import CenterlineCurve
from tubesight.utils.vectors import any_perpendicular, normalize, norms

_MIN_ROTATION_AXIS = 1e-9


@dataclass(frozen=True)
class FrameSet:
    params: NDArray[np.float64]
    positions: NDArray[np.float64]
    tangents: NDArray[np.float64]
    normals: NDArray[np.float64]
    binormals: NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.params)


def frenet_frames(curve: CenterlineCurve, segments: int) -> FrameSet:
    """segments + 1 frames at arc-length fractions i / segments."""
    if segments < 1:
        raise ValueError("segments must be at least 1")

    params = curve.param_at(np.arange(segments + 1) / segments)
    positions = curve.position(params)
    tangents = curve.tangent(params)

    normals = np.zeros_like(tangents)
    binormals = np.zeros_like(tangents)

    normals[0] = normalize(np.cross(tangents[0], any_perpendicular(tangents[0])))
    binormals[0] = np.cross(tangents[0], normals[0])

    axes = np.cross(tangents[:-1], tangents[1:])
    lengths = norms(axes)
    angles = np.arccos(np.clip(np.sum(tangents[:-1] * tangents[1:], axis=1), -1.0, 1.0))

    for i in range(1, segments + 1):
        normal = normals[i - 1]
        if lengths[i - 1] > _MIN_ROTATION_AXIS:
            axis = axes[i - 1] / lengths[i - 1]
            normal = Rotation.from_rotvec(axis * angles[i - 1]).apply(normal)
        normals[i] = normal
        binormals[i] = np.cross(tangents[i], normal)

    return FrameSet(
        params=params,
        positions=positions,
        tangents=tangents,
        normals=normals,
        binormals=binormals,
    )
