"""Pipeline orchestrator — runs stages in dependency order with config gating."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from typing import Any

from contourscope.engine.config import PipelineConfig
from contourscope.engine.context import PipelineContext
from contourscope.engine.registry import (
    Layer,
    TransformRegistry,
    TransformSpec,
    get_registry,
    load_transforms,
)

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def _ordered(self, ctx: PipelineContext) -> tuple[list[TransformSpec], set[str]]:
        skip_ids = self._adaptive_gate(ctx)
        all_specs = self.registry.all()
        requested = {s.id for s in all_specs} - skip_ids
        return self.registry.resolve_order(requested), skip_ids

    def run(self, ctx: PipelineContext) -> PipelineContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ctx.config = self.config

        ordered, skip_ids = self._ordered(ctx)

        logger.info(
            "Pipeline: %d transforms queued (%d skipped)",
            len(ordered),
            len(skip_ids),
        )

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms, %d outer + %d hole contours in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            len(ctx.outer_contours),
            len(ctx.hole_contours),
            total,
        )
        return ctx

    def run_streaming(self, ctx: PipelineContext) -> Generator[dict[str, Any], None, None]:
        """Run the pipeline, yielding a progress dict after each stage.

        The caller's ``ctx`` is mutated in-place, so after the generator is
        exhausted the context contains all results (same as ``run()``).
        """
        ctx.config = self.config
        ordered, _ = self._ordered(ctx)
        total = len(ordered)

        for i, spec in enumerate(ordered):
            t0 = time.perf_counter()
            status = "ok"
            error = ""
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                status = "error"
                error = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

            yield {
                "transform_id": spec.id,
                "description": spec.description,
                "layer": spec.layer.name,
                "index": i,
                "total": total,
                "elapsed_ms": round((time.perf_counter() - t0) * 1000, 1),
                "status": status,
                "error": error,
            }

    def run_layer(self, ctx: PipelineContext, layer: Layer) -> PipelineContext:
        """Run only stages in a specific layer."""
        ctx.config = self.config
        specs = self.registry.get_layer(layer)
        for spec in specs:
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
        return ctx

    def _adaptive_gate(self, ctx: PipelineContext) -> set[str]:
        """Determine which stages to skip based on the config.

        - No morphological op: skip the pre-filter
        - Hull disabled: skip hull and the defects that depend on it
        - Defects disabled: skip defects only
        """
        skip: set[str] = set()
        cfg = self.config

        if cfg.morph_op == "none":
            skip.add("T0.01")  # Morphological filter
        if not cfg.compute_hull:
            skip.update({
                "T2.02",  # Convex hull
                "T2.03",  # Convexity defects
            })
        elif not cfg.compute_defects:
            skip.add("T2.03")

        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance with all stages loaded."""
    load_transforms()
    return Pipeline(config=config)
