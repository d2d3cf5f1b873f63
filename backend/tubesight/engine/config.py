"""Analysis configuration — resolution and spline shape for one run."""

from __future__ import annotations

from dataclasses import dataclass, field

from tubesight.catalog.materials import DEFAULT_LAYER_RADII
from tubesight.geometry.centerline import ARC_LENGTH_DIVISIONS, DEFAULT_TENSION
from tubesight.geometry.critical_points import DEFAULT_DEGREE_SAMPLES, DEFAULT_SAMPLES


@dataclass
class AnalysisConfig:
    """Controls how the centerline is built and how densely it is sampled."""

    # Spline shape
    tension: float = DEFAULT_TENSION
    curve_type: str = "centripetal"

    # Curvature profile resolution for critical-point detection
    samples: int = DEFAULT_SAMPLES
    # Resolution of the complexity score
    degree_samples: int = DEFAULT_DEGREE_SAMPLES

    # Arc-length frames handed to the renderer
    path_divisions: int = ARC_LENGTH_DIVISIONS

    # Layer radii for the material table
    layer_radii: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_LAYER_RADII))
