"""Centerline analysis data model — the structured output of the pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field

Vec3 = tuple[float, float, float]


class CriticalPointInfo(BaseModel):
    t: float
    position: Vec3
    tangent: Vec3
    curvature: float
    # None when the curve is locally straight (infinite radius)
    curvature_radius: float | None = None
    angle: float = 0.0
    type: str  # maximum, minimum, inflection
    severity: str  # low, medium, high


class PathSample(BaseModel):
    t: float
    position: Vec3
    tangent: Vec3
    normal: Vec3
    binormal: Vec3


class CurveSummary(BaseModel):
    control_points: list[Vec3] = Field(default_factory=list)
    used_default_points: bool = False
    curve_type: str = "centripetal"
    tension: float = 0.5
    length: float = 0.0
    start_tangent: Vec3 = (0.0, 0.0, 0.0)
    end_tangent: Vec3 = (0.0, 0.0, 0.0)
    path: list[PathSample] = Field(default_factory=list)


class MaterialInfo(BaseModel):
    layer: str
    material: str
    outer_diameter: float
    inner_diameter: float
    wall_thickness: float
    pressure: float  # psi
    temperature: float  # °F
    flow_rate: float  # GPM


class CenterlineAnalysis(BaseModel):
    curve: CurveSummary | None = None
    critical_points: list[CriticalPointInfo] = Field(default_factory=list)
    severity_counts: dict[str, int] = Field(default_factory=dict)
    degree: float = 0.0
    materials: dict[str, MaterialInfo] = Field(default_factory=dict)
