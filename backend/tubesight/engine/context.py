"""AnalysisContext — the single mutable state object flowing through all transforms.

The geometry it holds (curve, profile, frames, critical points) is immutable;
transforms only attach new results to the context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from tubesight.catalog.materials import MaterialProperties
from tubesight.engine.config import AnalysisConfig
from tubesight.geometry.centerline import CenterlineCurve
from tubesight.geometry.critical_points import CriticalPoint
from tubesight.geometry.curvature import CurvatureProfile
from tubesight.geometry.frames import FrameSet


@dataclass
class AnalysisContext:
    """Shared state flowing through the entire pipeline."""

    # Raw control points as supplied (None → default centerline)
    control_points: Any = None
    config: AnalysisConfig = field(default_factory=AnalysisConfig)

    # --- Layer 0: construction ---
    curve: CenterlineCurve | None = None
    # True when the default control points replaced missing/unusable input
    used_default_points: bool = False
    # Arc-length sampled frames along the centerline
    path: FrameSet | None = None

    # --- Layer 1: sampling ---
    profile: CurvatureProfile | None = None

    # --- Layer 2: detection ---
    critical_points: list[CriticalPoint] = field(default_factory=list)

    # --- Layer 3: summary ---
    degree: float | None = None
    materials: dict[str, MaterialProperties] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def control_points_used(self) -> NDArray[np.float64]:
        if self.curve is None:
            return np.empty((0, 3))
        return self.curve.control_points

    @property
    def severity_counts(self) -> dict[str, int]:
        counts = {"low": 0, "medium": 0, "high": 0}
        for cp in self.critical_points:
            counts[cp.severity.value] += 1
        return counts
