"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tubesight.models.analysis import CenterlineAnalysis, MaterialInfo


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class CenterlineResponse(BaseModel):
    analysis: CenterlineAnalysis
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class MaterialTableResponse(BaseModel):
    materials: dict[str, MaterialInfo] = Field(default_factory=dict)
