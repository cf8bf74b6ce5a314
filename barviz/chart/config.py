# barviz/chart/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple

AXIS_RATIO = 10      # percent of width/height kept as margin on each side
FONT_RATIO = 3       # percent of width/height used as label font size


@dataclass(frozen=True)
class ChartConfig:
    container_id: str
    width: float
    height: float
    data: Tuple[Any, ...]

    vertical_margin: float
    horizontal_margin: float
    axis_ratio: int = AXIS_RATIO

    axis_color: str = "#b1b1b1"
    axis_width: float = 0.75

    font_ratio: int = FONT_RATIO
    font_family: str = "times"
    font_style: str = "normal"
    font_weight: str = "300"
    font_color: str = "#666"
    vertical_font_size: float = 0.0
    horizontal_font_size: float = 0.0

    gridline_color: str = "#e5e5e5"
    gridline_width: float = 0.5

    def font(self, size: float) -> str:
        return f"{self.font_style} {self.font_weight} {format_number(size)}px {self.font_family}"


def format_number(v: float) -> str:
    v = float(v)
    return str(int(v)) if v.is_integer() else repr(v)


def configure(container_id: str, width: float, height: float, data: Iterable[Any] = ()) -> ChartConfig:
    """Margins and font sizes derived from the canvas size; everything else is fixed."""
    return ChartConfig(
        container_id=container_id,
        width=width,
        height=height,
        data=() if data is None else tuple(data),
        vertical_margin=height * AXIS_RATIO / 100,
        horizontal_margin=width * AXIS_RATIO / 100,
        vertical_font_size=height * FONT_RATIO / 100,
        horizontal_font_size=width * FONT_RATIO / 100,
    )
