"""T1.01 — Curvature profile.

Finite-difference curvature at t_i = i / samples. Straight stretches read
exactly 0 (radius +inf).
"""

from __future__ import annotations

from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, transform
from tubesight.geometry.curvature import curvature_profile


@transform(
    id="T1.01",
    layer=Layer.SAMPLING,
    dependencies=["T0.01"],
    description="Sample curvature along the centerline",
)
def sample_curvature_profile(ctx: AnalysisContext) -> None:
    if ctx.curve is None:
        return
    ctx.profile = curvature_profile(ctx.curve, ctx.config.samples)
