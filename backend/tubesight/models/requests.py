"""API request models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class CenterlineRequest(BaseModel):
    points: list[Any] | None = Field(
        default=None,
        description=(
            "Ordered {x, y, z} records; missing or non-numeric fields read as 0,"
            " non-object entries are skipped. Omitted or empty uses the default S-curve"
        ),
    )
    points_url: str | None = Field(
        default=None,
        description="URL of a JSON array of {x, y, z} records, fetched before analysis",
    )
    tension: float | None = Field(default=None, description="Spline tension (default from settings)")
    curve_type: Literal["centripetal", "chordal", "catmullrom"] = Field(default="centripetal")
    samples: int | None = Field(
        default=None, ge=1, le=20000, description="Curvature samples for critical points"
    )
    degree_samples: int | None = Field(
        default=None, ge=1, le=20000, description="Curvature samples for the complexity score"
    )
    path_divisions: int = Field(
        default=200, ge=1, le=5000, description="Arc-length frames returned for rendering"
    )
