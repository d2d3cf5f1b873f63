"""T3.01 — Curve complexity score (0-10)."""

from __future__ import annotations

from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, transform
from tubesight.geometry.critical_points import curve_degree


@transform(
    id="T3.01",
    layer=Layer.SUMMARY,
    dependencies=["T0.01"],
    description="Score overall curve complexity",
)
def score_curve_degree(ctx: AnalysisContext) -> None:
    if ctx.curve is None:
        return
    ctx.degree = curve_degree(ctx.curve, ctx.config.degree_samples)
