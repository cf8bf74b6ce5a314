# barviz/chart/bar_chart.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from barviz.chart.config import ChartConfig, configure
from barviz.chart.layout import LayoutGeometry, compute_layout
from barviz.chart.render import ColorSource, render_chart
from barviz.svl.bar_verify import NormalizedData, normalize
from barviz.svl.errors import ConfigurationError
from barviz.ve.canvas import Canvas, ContextFactory
from barviz.ve.page import Page, default_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartHandle:
    config: ChartConfig
    data: NormalizedData
    layout: LayoutGeometry
    canvas: Canvas

    def to_png(self) -> bytes:
        return self.canvas.to_png()


def create_bar_chart(
    container_id: str,
    width: float,
    height: float,
    data: Iterable[Any],
    *,
    page: Optional[Page] = None,
    color_source: Optional[ColorSource] = None,
    context_factory: Optional[ContextFactory] = None,
) -> ChartHandle:
    """
    Render one bar chart into the container `container_id`.

    Everything that can fail (unknown container, empty data, bad values) is
    checked before the container is touched, so a failed call leaves the
    previous contents in place.
    """
    page = page or default_page()
    if not container_id:
        raise ConfigurationError("container id is required")
    container = page.get_element_by_id(container_id)
    if container is None:
        raise ConfigurationError(f"no container with id {container_id!r}")

    cfg = configure(container_id, width, height, data)
    normalized = normalize(cfg.data)
    geo = compute_layout(cfg, normalized)

    canvas = Canvas(width, height, f"{container_id}-{random.random()}", context_factory)
    container.replace_children(canvas)
    render_chart(canvas.get_context("2d"), cfg, normalized, geo, color_source)

    logger.info("rendered bar chart %s: %d bars, %sx%s", canvas.id, normalized.item_count, width, height)
    return ChartHandle(config=cfg, data=normalized, layout=geo, canvas=canvas)
