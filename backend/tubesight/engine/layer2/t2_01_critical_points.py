"""T2.01 — Critical point detection.

Local maxima, minima and inflections of the curvature profile, scored
low/medium/high by curvature magnitude.
"""

from __future__ import annotations

from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, transform
from tubesight.geometry.critical_points import critical_points_from_profile


@transform(
    id="T2.01",
    layer=Layer.DETECTION,
    dependencies=["T1.01"],
    description="Classify curvature extrema and inflections",
)
def detect_critical_points(ctx: AnalysisContext) -> None:
    if ctx.curve is None or ctx.profile is None:
        ctx.critical_points = []
        return
    ctx.critical_points = critical_points_from_profile(ctx.curve, ctx.profile)
