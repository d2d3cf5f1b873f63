"""POST /api/centerline — centerline analysis for the 3D viewer."""

from __future__ import annotations

import asyncio
import time
from functools import partial

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from tubesight.config import Settings
from tubesight.dependencies import get_settings
from tubesight.engine.config import AnalysisConfig
from tubesight.engine.context import AnalysisContext
from tubesight.engine.pipeline import create_pipeline
from tubesight.engine.report import context_to_analysis
from tubesight.engine.visuals import render_curvature_profile_svg
from tubesight.models.requests import CenterlineRequest
from tubesight.models.responses import CenterlineResponse
from tubesight.points.loader import PointsFetchError, fetch_points_from_json, parse_point_records

router = APIRouter(prefix="/centerline")

# Critical-point detection and everything it depends on; no frames or materials
_PROFILE_TARGETS = {"T2.01"}


async def _resolve_points(req: CenterlineRequest, settings: Settings):
    """Control points from the request body, or fetched from points_url."""
    if req.points_url:
        loop = asyncio.get_running_loop()
        fetch = partial(fetch_points_from_json, req.points_url, timeout=settings.points_fetch_timeout)
        try:
            return await loop.run_in_executor(None, fetch)
        except PointsFetchError as e:
            raise HTTPException(status_code=502, detail=str(e)) from e

    if req.points is None:
        return None
    return parse_point_records(req.points)


def _analysis_config(req: CenterlineRequest, settings: Settings) -> AnalysisConfig:
    return AnalysisConfig(
        tension=req.tension if req.tension is not None else settings.default_tension,
        curve_type=req.curve_type,
        samples=req.samples or settings.default_samples,
        degree_samples=req.degree_samples or settings.default_degree_samples,
        path_divisions=req.path_divisions,
    )


async def _run(
    req: CenterlineRequest, settings: Settings, targets: set[str] | None = None
) -> AnalysisContext:
    points = await _resolve_points(req, settings)
    pipeline = create_pipeline(_analysis_config(req, settings))
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, pipeline.run, pipeline.context(points), targets)


@router.post("/analyze", response_model=CenterlineResponse)
async def analyze(
    req: CenterlineRequest,
    settings: Settings = Depends(get_settings),
) -> CenterlineResponse:
    start = time.perf_counter()

    ctx = await _run(req, settings)

    elapsed = (time.perf_counter() - start) * 1000

    return CenterlineResponse(
        analysis=context_to_analysis(ctx),
        processing_time_ms=round(elapsed, 1),
        transforms_completed=len(ctx.completed_transforms),
        transforms_failed=len(ctx.errors),
        errors=ctx.errors,
    )


@router.post("/profile.svg")
async def profile_svg(
    req: CenterlineRequest,
    settings: Settings = Depends(get_settings),
) -> Response:
    ctx = await _run(req, settings, _PROFILE_TARGETS)
    if ctx.profile is None:
        raise HTTPException(status_code=500, detail=ctx.errors or "curvature profile unavailable")
    svg = render_curvature_profile_svg(ctx.profile, ctx.critical_points)
    return Response(content=svg, media_type="image/svg+xml")
