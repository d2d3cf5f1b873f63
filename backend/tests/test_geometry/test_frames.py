"""Tests for arc-length sampled tube frames."""

from __future__ import annotations

import numpy as np
import pytest

from tubesight.geometry.frames import frenet_frames


def _assert_orthonormal(frames):
    for vectors in (frames.tangents, frames.normals, frames.binormals):
        np.testing.assert_allclose(np.linalg.norm(vectors, axis=1), 1.0, atol=1e-9)
    np.testing.assert_allclose(np.sum(frames.tangents * frames.normals, axis=1), 0.0, atol=1e-9)
    np.testing.assert_allclose(np.sum(frames.tangents * frames.binormals, axis=1), 0.0, atol=1e-9)
    np.testing.assert_allclose(np.sum(frames.normals * frames.binormals, axis=1), 0.0, atol=1e-9)


def test_frame_count_and_endpoints(s_curve):
    frames = frenet_frames(s_curve, 64)
    assert len(frames) == 65
    assert frames.params[0] == 0.0
    assert frames.params[-1] == pytest.approx(1.0)
    np.testing.assert_allclose(frames.positions[0], s_curve.control_points[0], atol=1e-9)
    np.testing.assert_allclose(frames.positions[-1], s_curve.control_points[-1], atol=1e-6)


def test_frames_are_orthonormal(s_curve, helix_curve):
    _assert_orthonormal(frenet_frames(s_curve, 100))
    _assert_orthonormal(frenet_frames(helix_curve, 100))


def test_params_increase(helix_curve):
    frames = frenet_frames(helix_curve, 50)
    assert np.all(np.diff(frames.params) > 0)


def test_straight_run_keeps_a_fixed_normal(straight_curve):
    frames = frenet_frames(straight_curve, 20)
    _assert_orthonormal(frames)
    np.testing.assert_allclose(frames.normals, np.repeat(frames.normals[:1], 21, axis=0), atol=1e-12)


def test_normals_do_not_flip_between_neighbours(s_curve):
    frames = frenet_frames(s_curve, 200)
    dots = np.sum(frames.normals[:-1] * frames.normals[1:], axis=1)
    assert np.all(dots > 0.9)


def test_rejects_zero_segments(s_curve):
    with pytest.raises(ValueError):
        frenet_frames(s_curve, 0)
