"""Curvature profile chart as a standalone SVG document.

Plots κ(t) as a polyline with one marker per critical point, colored by
severity, built by plain string formatting.
"""

from __future__ import annotations

import numpy as np

from tubesight.geometry.critical_points import (
    HIGH_SEVERITY_CURVATURE,
    MEDIUM_SEVERITY_CURVATURE,
    CriticalPoint,
)
from tubesight.geometry.curvature import CurvatureProfile

_SEVERITY_COLORS = {
    "low": "#3cb44b",
    "medium": "#f58231",
    "high": "#e6194b",
}

_MARKER_SHAPES = {
    "maximum": "triangle",
    "minimum": "triangle-down",
    "inflection": "circle",
}

_MARGIN = 32.0


def _svg_wrap(content: str, width: float, height: float) -> str:
    """Wrap SVG content in a standalone SVG document."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width:.0f} {height:.0f}"'
        f' width="{width:.0f}" height="{height:.0f}"'
        ' style="background:#1a1a2e">'
        f'\n{content}\n</svg>'
    )


def _marker(x: float, y: float, shape: str, color: str) -> str:
    if shape == "triangle":
        return f'<path d="M {x:.1f},{y - 5:.1f} L {x + 4:.1f},{y + 3:.1f} L {x - 4:.1f},{y + 3:.1f} Z" fill="{color}"/>'
    if shape == "triangle-down":
        return f'<path d="M {x:.1f},{y + 5:.1f} L {x + 4:.1f},{y - 3:.1f} L {x - 4:.1f},{y - 3:.1f} Z" fill="{color}"/>'
    return f'<circle cx="{x:.1f}" cy="{y:.1f}" r="3" fill="{color}"/>'


def render_curvature_profile_svg(
    profile: CurvatureProfile,
    critical_points: list[CriticalPoint],
    width: float = 640.0,
    height: float = 240.0,
) -> str:
    """Profile chart with severity threshold guides and critical-point markers."""
    plot_w = width - 2 * _MARGIN
    plot_h = height - 2 * _MARGIN
    # Keep the severity guides visible even on a flat profile
    peak = max(float(np.max(profile.curvature, initial=0.0)), HIGH_SEVERITY_CURVATURE) * 1.1

    def sx(t: float) -> float:
        return _MARGIN + t * plot_w

    def sy(kappa: float) -> float:
        return _MARGIN + plot_h - (kappa / peak) * plot_h

    parts: list[str] = [
        f'<rect x="{_MARGIN:.0f}" y="{_MARGIN:.0f}" width="{plot_w:.0f}" height="{plot_h:.0f}"'
        ' fill="none" stroke="#555" stroke-width="1"/>'
    ]

    for level, severity in ((MEDIUM_SEVERITY_CURVATURE, "medium"), (HIGH_SEVERITY_CURVATURE, "high")):
        y = sy(level)
        parts.append(
            f'<line x1="{_MARGIN:.0f}" y1="{y:.1f}" x2="{_MARGIN + plot_w:.0f}" y2="{y:.1f}"'
            f' stroke="{_SEVERITY_COLORS[severity]}" stroke-dasharray="4 3" stroke-opacity="0.6"/>'
        )

    coords = " ".join(f"{sx(t):.1f},{sy(k):.1f}" for t, k in zip(profile.params, profile.curvature))
    parts.append(f'<polyline points="{coords}" fill="none" stroke="#42d4f4" stroke-width="1.5"/>')

    for cp in critical_points:
        parts.append(
            _marker(
                sx(cp.t),
                sy(cp.curvature),
                _MARKER_SHAPES[cp.type.value],
                _SEVERITY_COLORS[cp.severity.value],
            )
        )

    parts.append(
        f'<text x="{_MARGIN:.0f}" y="{height - 8:.0f}" fill="#ccc" font-size="11"'
        f' font-family="monospace">t 0..1 · κmax {peak / 1.1:.4f} · {len(critical_points)} critical</text>'
    )
    return _svg_wrap("\n".join(parts), width, height)
