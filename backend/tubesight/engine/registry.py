"""Transform registry — every analysis step is a standalone function registered via decorator.

Usage:
    @transform(id="T1.01", layer=Layer.SAMPLING, dependencies=["T0.01"])
    def curvature_profile(ctx: AnalysisContext) -> None:
        ctx.profile = compute(ctx.curve)

Adding a new step = creating one file with the decorator under a layerN package.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tubesight.engine.context import AnalysisContext

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3"]


class Layer(enum.IntEnum):
    CONSTRUCTION = 0
    SAMPLING = 1
    DETECTION = 2
    SUMMARY = 3


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["AnalysisContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of analysis transforms keyed by id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        specs = [s for s in self._transforms.values() if s.layer == layer]
        return sorted(specs, key=lambda s: s.id)

    def resolve_order(self, targets: set[str] | None = None) -> list[TransformSpec]:
        """Topological order of ``targets`` and everything they depend on.

        None runs every registered transform. Unknown target or dependency
        ids raise ValueError.
        """
        pool = self._transforms
        if targets is not None:
            unknown = set(targets) - pool.keys()
            if unknown:
                raise ValueError(f"Unknown transform IDs: {sorted(unknown)}")
            needed: set[str] = set()
            stack = list(targets)
            while stack:
                tid = stack.pop()
                if tid in needed:
                    continue
                needed.add(tid)
                stack.extend(pool[tid].dependencies)
            pool = {k: v for k, v in pool.items() if k in needed}

        for spec in pool.values():
            missing = [dep for dep in spec.dependencies if dep not in self._transforms]
            if missing:
                raise ValueError(f"Transform {spec.id} depends on unregistered {missing}")

        # Kahn's algorithm, ties broken by id
        in_degree: dict[str, int] = {tid: len(spec.dependencies) for tid, spec in pool.items()}

        queue = sorted(tid for tid, d in in_degree.items() if d == 0)
        ordered: list[TransformSpec] = []

        while queue:
            tid = queue.pop(0)
            ordered.append(pool[tid])
            for other_id, other_spec in pool.items():
                if tid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["AnalysisContext"], None]):
        spec = TransformSpec(
            id=id,
            layer=layer,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_builtin_transforms() -> None:
    """Import every layerN module so the @transform decorators fire. Idempotent."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"tubesight.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")
