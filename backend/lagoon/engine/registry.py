"""Stage registry: each pipeline stage is a function registered with ``@transform``.

    @transform(id="T3.01", layer=Layer.FILL, dependencies=["T2.01"])
    def flood_fill(ctx: LagoonContext) -> None:
        ...

Stages live one per module under ``lagoon.engine.layerN``; ``load_transforms``
imports them all so the decorators run.
"""

from __future__ import annotations

import enum
import heapq
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from lagoon.engine.context import LagoonContext

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


class Layer(enum.IntEnum):
    PATH = 0
    NORMALIZATION = 1
    RASTER = 2
    FILL = 3
    MEASURE = 4


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["LagoonContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
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
        return sorted(
            (s for s in self._transforms.values() if s.layer == layer),
            key=lambda s: s.id,
        )

    def resolve_order(self) -> list[TransformSpec]:
        """Every stage, each after its dependencies.

        Among stages that are ready at the same time, lower layers go first,
        then lower IDs.

        Raises:
            ValueError: a dependency names an unregistered stage, or the
                dependencies form a cycle.
        """
        pending: dict[str, int] = {}
        dependents: dict[str, list[str]] = {tid: [] for tid in self._transforms}
        for tid, spec in self._transforms.items():
            for dep in spec.dependencies:
                if dep not in self._transforms:
                    raise ValueError(f"{tid} depends on unregistered transform {dep}")
                dependents[dep].append(tid)
            pending[tid] = len(spec.dependencies)

        ready = [(s.layer, s.id) for s in self._transforms.values() if not s.dependencies]
        heapq.heapify(ready)
        ordered: list[TransformSpec] = []
        while ready:
            _, tid = heapq.heappop(ready)
            ordered.append(self._transforms[tid])
            for other in dependents[tid]:
                pending[other] -= 1
                if pending[other] == 0:
                    heapq.heappush(ready, (self._transforms[other].layer, other))

        if len(ordered) != len(self._transforms):
            stuck = sorted(set(self._transforms) - {s.id for s in ordered})
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def load_transforms() -> TransformRegistry:
    """Import every stage module so its ``@transform`` decorator registers it."""
    for layer_name in _LAYER_PACKAGES:
        package_name = f"lagoon.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a pipeline stage."""

    def decorator(fn: Callable[["LagoonContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or []),
                description=description,
            )
        )
        return fn

    return decorator
