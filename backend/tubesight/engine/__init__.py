"""TubeSight centerline analysis engine."""

from tubesight.engine.registry import transform, Layer, get_registry, load_builtin_transforms
from tubesight.engine.context import AnalysisContext
from tubesight.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_builtin_transforms",
    "AnalysisContext",
    "Pipeline",
    "create_pipeline",
]
