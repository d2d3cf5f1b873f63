"""GET /api/materials — pipe layer material metadata."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query

from tubesight.catalog.materials import DEFAULT_LAYER_RADII, LAYERS, get_material_info, layer_material_table
from tubesight.models.analysis import MaterialInfo
from tubesight.models.responses import MaterialTableResponse

router = APIRouter()


@router.get("/materials", response_model=MaterialTableResponse)
async def materials() -> MaterialTableResponse:
    table = layer_material_table()
    return MaterialTableResponse(
        materials={layer: MaterialInfo(**asdict(props)) for layer, props in table.items()}
    )


@router.get("/materials/{layer}", response_model=MaterialInfo)
async def material(
    layer: str,
    diameter: float | None = Query(default=None, gt=0.5, description="Layer radius; defaults per layer"),
) -> MaterialInfo:
    if layer not in LAYERS:
        raise HTTPException(status_code=404, detail=f"Unknown layer {layer!r}")
    radius = diameter if diameter is not None else DEFAULT_LAYER_RADII[layer]
    return MaterialInfo(**asdict(get_material_info(layer, radius)))
