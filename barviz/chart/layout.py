# barviz/chart/layout.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

from barviz.chart.config import ChartConfig
from barviz.svl.bar_verify import NormalizedData
from barviz.svl.errors import EmptyDatasetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutGeometry:
    item_count: int
    vertical_margin: float
    horizontal_margin: float
    vertical_axis_length: float
    horizontal_axis_length: float
    vertical_upper_bound: int
    vertical_label_step: float
    horizontal_label_step: float
    # pixel distance between value ticks; equals
    # (vertical_axis_length / vertical_upper_bound) * vertical_label_step
    vertical_tick_spacing: float

    def vertical_tick_values(self) -> List[float]:
        return [self.vertical_upper_bound - i * self.vertical_label_step for i in range(self.item_count + 1)]

    def vertical_tick_y(self, i: int) -> float:
        return self.vertical_margin + i * self.vertical_tick_spacing

    def slot_x(self, i: int) -> float:
        """Left edge of the i-th category slot on the horizontal axis."""
        return self.horizontal_margin + i * self.horizontal_label_step


def upper_bound(max_value: float) -> int:
    # inclusive: 30 -> 30, 31 -> 40
    return math.ceil(max_value / 10) * 10


def compute_layout(config: ChartConfig, normalized: NormalizedData) -> LayoutGeometry:
    n = normalized.item_count
    if n <= 0:
        raise EmptyDatasetError("cannot lay out a chart with no items")

    v_len = config.height - 2 * config.vertical_margin
    h_len = config.width - 2 * config.horizontal_margin
    bound = upper_bound(normalized.max_value)

    geo = LayoutGeometry(
        item_count=n,
        vertical_margin=config.vertical_margin,
        horizontal_margin=config.horizontal_margin,
        vertical_axis_length=v_len,
        horizontal_axis_length=h_len,
        vertical_upper_bound=bound,
        vertical_label_step=bound / n,
        horizontal_label_step=h_len / n,
        vertical_tick_spacing=v_len / n,
    )
    logger.debug("layout for %s: %s", config.container_id, geo)
    return geo
