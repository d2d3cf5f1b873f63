"""Static material metadata for the concentric layers of a pipe wall."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

LAYERS = ("outer", "middle", "barrier", "inner")

WALL_THICKNESS = 0.5

# Layer radii the viewer renders by default
DEFAULT_LAYER_RADII: dict[str, float] = {
    "outer": 8.0,
    "middle": 7.2,
    "barrier": 6.6,
    "inner": 6.2,
}

# pressure in psi, temperature in °F, flow rate in GPM
_LAYER_CONFIGS: dict[str, dict[str, str | float]] = {
    "outer": {
        "material": "Aço Inoxidável 316L",
        "pressure": 150.0,
        "temperature": 450.0,
        "flow_rate": 100.0,
    },
    "middle": {
        "material": "Aço Carbono A106",
        "pressure": 200.0,
        "temperature": 400.0,
        "flow_rate": 120.0,
    },
    "barrier": {
        "material": "Revestimento PTFE",
        "pressure": 100.0,
        "temperature": 350.0,
        "flow_rate": 80.0,
    },
    "inner": {
        "material": "Inconel 625",
        "pressure": 300.0,
        "temperature": 600.0,
        "flow_rate": 150.0,
    },
}


@dataclass(frozen=True)
class MaterialProperties:
    layer: str
    material: str
    outer_diameter: float
    inner_diameter: float
    wall_thickness: float
    pressure: float
    temperature: float
    flow_rate: float


def get_material_info(layer: str, diameter: float) -> MaterialProperties:
    """Material metadata for ``layer``; unknown layer ids fall back to outer."""
    key = layer if layer in _LAYER_CONFIGS else "outer"
    config = _LAYER_CONFIGS[key]
    return MaterialProperties(
        layer=key,
        material=str(config["material"]),
        outer_diameter=diameter * 2,
        inner_diameter=(diameter - WALL_THICKNESS) * 2,
        wall_thickness=WALL_THICKNESS,
        pressure=float(config["pressure"]),
        temperature=float(config["temperature"]),
        flow_rate=float(config["flow_rate"]),
    )


def layer_material_table(radii: Mapping[str, float] | None = None) -> dict[str, MaterialProperties]:
    radii = radii or DEFAULT_LAYER_RADII
    return {layer: get_material_info(layer, radii[layer]) for layer in LAYERS if layer in radii}
