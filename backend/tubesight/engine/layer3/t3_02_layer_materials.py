"""T3.02 — Layer material table. Static lookup, independent of the curve."""

from __future__ import annotations

from tubesight.catalog.materials import layer_material_table
from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, transform


@transform(
    id="T3.02",
    layer=Layer.SUMMARY,
    description="Attach material metadata per pipe layer",
)
def attach_layer_materials(ctx: AnalysisContext) -> None:
    ctx.materials = layer_material_table(ctx.config.layer_radii)
