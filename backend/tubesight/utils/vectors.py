"""Leaf-node 3D vector helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

_ZERO_LENGTH = 1e-12


def norms(vectors: NDArray[np.float64]) -> NDArray[np.float64]:
    """Euclidean length along the last axis."""
    return np.linalg.norm(vectors, axis=-1)


def normalize(vectors: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unit vectors along the last axis. Zero-length vectors stay zero."""
    lengths = np.linalg.norm(vectors, axis=-1, keepdims=True)
    safe = np.where(lengths < _ZERO_LENGTH, 1.0, lengths)
    return np.where(lengths < _ZERO_LENGTH, 0.0, vectors / safe)


def any_perpendicular(vector: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unit vector perpendicular to ``vector``.

    Crosses with the world axis the vector is least aligned with, so the
    result is well conditioned for any non-zero input.
    """
    axis = np.zeros(3)
    axis[int(np.argmin(np.abs(vector)))] = 1.0
    return normalize(np.cross(vector, axis))


def polyline_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along an Nx3 point sequence, starting at 0."""
    segment_lengths = norms(np.diff(points, axis=0))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def as_tuple(vector: NDArray[np.float64]) -> tuple[float, float, float]:
    return (float(vector[0]), float(vector[1]), float(vector[2]))
