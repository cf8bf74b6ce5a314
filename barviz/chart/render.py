# barviz/chart/render.py
# Drawing steps for a bar chart. Each step sets all the context state it
# uses, so any one of them can be replayed on its own.
from __future__ import annotations

from typing import Callable, Optional

from barviz.chart.colors import RGB, RandomColorSource, rgb_css, rgba_css
from barviz.chart.config import ChartConfig, format_number
from barviz.chart.layout import LayoutGeometry
from barviz.svl.bar_verify import NormalizedData
from barviz.ve.canvas import Context2D

BAR_FILL_ALPHA = 0.3

ColorSource = Callable[[], RGB]


def _line(ctx: Context2D, x0: float, y0: float, x1: float, y1: float) -> None:
    ctx.begin_path()
    ctx.move_to(x0, y0)
    ctx.line_to(x1, y1)
    ctx.stroke()


def draw_vertical_axis(ctx: Context2D, cfg: ChartConfig) -> None:
    ctx.stroke_style = cfg.axis_color
    ctx.line_width = cfg.axis_width
    _line(ctx, cfg.horizontal_margin, cfg.vertical_margin,
          cfg.horizontal_margin, cfg.height - cfg.vertical_margin)


def draw_horizontal_axis(ctx: Context2D, cfg: ChartConfig) -> None:
    ctx.stroke_style = cfg.axis_color
    ctx.line_width = cfg.axis_width
    y = cfg.height - cfg.vertical_margin
    _line(ctx, cfg.horizontal_margin, y, cfg.width - cfg.horizontal_margin, y)


def draw_vertical_labels(ctx: Context2D, cfg: ChartConfig, geo: LayoutGeometry) -> None:
    ctx.font = cfg.font(cfg.vertical_font_size)
    ctx.fill_style = cfg.font_color
    ctx.text_align = "right"
    ctx.text_baseline = "alphabetic"

    x = cfg.horizontal_margin - cfg.horizontal_margin / cfg.axis_ratio
    for i, value in enumerate(geo.vertical_tick_values()):
        ctx.fill_text(format_number(value), x, geo.vertical_tick_y(i))


def draw_horizontal_labels(ctx: Context2D, cfg: ChartConfig, geo: LayoutGeometry, data: NormalizedData) -> None:
    ctx.font = cfg.font(cfg.horizontal_font_size)
    ctx.fill_style = cfg.font_color
    ctx.text_align = "center"
    ctx.text_baseline = "top"

    y = cfg.height - cfg.vertical_margin + cfg.vertical_margin / cfg.axis_ratio
    for i, label in enumerate(data.labels):
        ctx.fill_text(label, geo.slot_x(i) + geo.horizontal_label_step / 2, y)


def draw_horizontal_gridlines(ctx: Context2D, cfg: ChartConfig, geo: LayoutGeometry) -> None:
    ctx.stroke_style = cfg.gridline_color
    ctx.line_width = cfg.gridline_width
    x0 = cfg.horizontal_margin
    x1 = cfg.horizontal_margin + geo.horizontal_axis_length
    for i in range(geo.item_count + 1):
        y = geo.vertical_tick_y(i)
        _line(ctx, x0, y, x1, y)


def draw_vertical_gridlines(ctx: Context2D, cfg: ChartConfig, geo: LayoutGeometry) -> None:
    ctx.stroke_style = cfg.gridline_color
    ctx.line_width = cfg.gridline_width
    for i in range(geo.item_count + 1):
        x = geo.slot_x(i)
        _line(ctx, x, cfg.height - cfg.vertical_margin, x, cfg.vertical_margin)


def bar_height(geo: LayoutGeometry, value: float, max_value: float) -> float:
    # negative: bars grow upward from the baseline
    if max_value == 0:
        return 0.0
    return -geo.vertical_axis_length * value / max_value


def draw_bars(ctx: Context2D, cfg: ChartConfig, geo: LayoutGeometry, data: NormalizedData,
              color_source: ColorSource) -> None:
    step = geo.horizontal_label_step
    gap = step / cfg.axis_ratio
    y = cfg.height - cfg.vertical_margin
    for i, value in enumerate(data.values):
        color = color_source()
        ctx.stroke_style = rgb_css(color)
        ctx.fill_style = rgba_css(color, BAR_FILL_ALPHA)
        ctx.begin_path()
        ctx.rect(geo.slot_x(i) + gap, y, step - 2 * gap, bar_height(geo, value, data.max_value))
        ctx.stroke()
        ctx.fill()


def render_chart(ctx: Context2D, cfg: ChartConfig, data: NormalizedData, geo: LayoutGeometry,
                 color_source: Optional[ColorSource] = None) -> None:
    draw_vertical_axis(ctx, cfg)
    draw_horizontal_axis(ctx, cfg)
    draw_vertical_labels(ctx, cfg, geo)
    draw_horizontal_labels(ctx, cfg, geo, data)
    draw_horizontal_gridlines(ctx, cfg, geo)
    draw_vertical_gridlines(ctx, cfg, geo)
    draw_bars(ctx, cfg, geo, data, color_source or RandomColorSource())
