"""T0.02 — Centerline sampling.

Arc-length spaced positions with tangent/normal/binormal frames, the bulk
samples a renderer sweeps its tube cross-section along.
"""

from __future__ import annotations

from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, transform
from tubesight.geometry.frames import frenet_frames


@transform(
    id="T0.02",
    layer=Layer.CONSTRUCTION,
    dependencies=["T0.01"],
    description="Sample centerline frames evenly by arc length",
)
def sample_centerline(ctx: AnalysisContext) -> None:
    if ctx.curve is None:
        return
    ctx.path = frenet_frames(ctx.curve, ctx.config.path_divisions)
