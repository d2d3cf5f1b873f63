"""AnalysisContext → CenterlineAnalysis model (plain data for the renderer)."""

from __future__ import annotations

import math
from dataclasses import asdict

from tubesight.engine.context import AnalysisContext
from tubesight.geometry.critical_points import CriticalPoint
from tubesight.models.analysis import (
    CenterlineAnalysis,
    CriticalPointInfo,
    CurveSummary,
    MaterialInfo,
    PathSample,
)
from tubesight.utils.vectors import as_tuple


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def critical_point_info(cp: CriticalPoint) -> CriticalPointInfo:
    return CriticalPointInfo(
        t=cp.t,
        position=cp.position,
        tangent=cp.tangent,
        curvature=cp.curvature,
        curvature_radius=_finite_or_none(cp.curvature_radius),
        angle=cp.angle,
        type=cp.type.value,
        severity=cp.severity.value,
    )


def _curve_summary(ctx: AnalysisContext) -> CurveSummary | None:
    curve = ctx.curve
    if curve is None:
        return None

    path: list[PathSample] = []
    if ctx.path is not None:
        frames = ctx.path
        for i in range(len(frames)):
            path.append(
                PathSample(
                    t=float(frames.params[i]),
                    position=as_tuple(frames.positions[i]),
                    tangent=as_tuple(frames.tangents[i]),
                    normal=as_tuple(frames.normals[i]),
                    binormal=as_tuple(frames.binormals[i]),
                )
            )

    return CurveSummary(
        control_points=[as_tuple(p) for p in curve.control_points],
        used_default_points=ctx.used_default_points,
        curve_type=curve.curve_type,
        tension=curve.tension,
        length=round(curve.length(), 4),
        start_tangent=as_tuple(curve.tangent(0.0)),
        end_tangent=as_tuple(curve.tangent(1.0)),
        path=path,
    )


def context_to_analysis(ctx: AnalysisContext) -> CenterlineAnalysis:
    return CenterlineAnalysis(
        curve=_curve_summary(ctx),
        critical_points=[critical_point_info(cp) for cp in ctx.critical_points],
        severity_counts=ctx.severity_counts,
        degree=ctx.degree or 0.0,
        materials={layer: MaterialInfo(**asdict(props)) for layer, props in ctx.materials.items()},
    )
