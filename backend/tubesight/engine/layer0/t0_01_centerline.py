"""T0.01 — Centerline construction.

Centripetal Catmull-Rom spline through the control points. Missing or
unusable input falls back to the default S-curve.
"""

from __future__ import annotations

from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, transform
from tubesight.geometry.centerline import CenterlineCurve, resolve_control_points


@transform(
    id="T0.01",
    layer=Layer.CONSTRUCTION,
    description="Build centerline spline through control points",
)
def build_centerline(ctx: AnalysisContext) -> None:
    points, substituted = resolve_control_points(ctx.control_points)
    ctx.curve = CenterlineCurve(
        points,
        tension=ctx.config.tension,
        curve_type=ctx.config.curve_type,
    )
    ctx.used_default_points = substituted
