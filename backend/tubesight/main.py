"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tubesight.config import settings
from tubesight.engine.registry import load_builtin_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.tubesight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="TubeSight",
        description="Pipe centerline geometry and curvature analysis for the 3D viewer",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    load_builtin_transforms()

    from tubesight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
