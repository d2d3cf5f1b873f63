"""Pipeline orchestrator — runs analysis transforms in dependency order."""

from __future__ import annotations

import logging
import time

from tubesight.engine.config import AnalysisConfig
from tubesight.engine.context import AnalysisContext
from tubesight.engine.registry import Layer, TransformRegistry, get_registry, load_builtin_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or AnalysisConfig()

    def context(self, control_points=None) -> AnalysisContext:
        """Fresh context carrying this pipeline's config."""
        return AnalysisContext(control_points=control_points, config=self.config)

    def run(self, ctx: AnalysisContext, targets: set[str] | None = None) -> AnalysisContext:
        """Run the pipeline on the given context.

        With ``targets``, only those transforms and their dependencies run.
        """
        start = time.perf_counter()
        ordered = self.registry.resolve_order(targets)

        logger.info(
            "Pipeline: %d transforms queued%s",
            len(ordered),
            f" for {sorted(targets)}" if targets else "",
        )

        for spec in ordered:
            self._run_one(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: AnalysisContext, layer: Layer) -> AnalysisContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(spec, ctx)
        return ctx

    def _run_one(self, spec, ctx: AnalysisContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)


def create_pipeline(config: AnalysisConfig | None = None) -> Pipeline:
    """Factory for a pipeline over the built-in transforms."""
    load_builtin_transforms()
    return Pipeline(config=config)
