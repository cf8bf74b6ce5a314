# barviz/ve/canvas.py
# Immediate-mode 2D drawing surface, canvas-style API on top of Pillow.
from __future__ import annotations

import io
import re
from functools import lru_cache
from typing import Callable, List, Optional, Protocol, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from barviz import settings

RGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]


class Context2D(Protocol):
    stroke_style: str
    fill_style: str
    line_width: float
    font: str
    text_align: str
    text_baseline: str

    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def rect(self, x: float, y: float, w: float, h: float) -> None: ...
    def stroke(self) -> None: ...
    def fill(self) -> None: ...
    def fill_text(self, text: str, x: float, y: float) -> None: ...


_RGB_FN = re.compile(r"^rgba?\(\s*([-\d.]+)\s*,\s*([-\d.]+)\s*,\s*([-\d.]+)\s*(?:,\s*([-\d.]+)\s*)?\)$", re.I)
_FONT = re.compile(r"(\d+(?:\.\d+)?)px\s+(.+)$")


def _clamp(v: float, lo: int = 0, hi: int = 255) -> int:
    return max(lo, min(hi, int(round(v))))


def parse_color(s: str) -> RGBA:
    """'#666', '#e5e5e5', 'rgb(1, 2, 3)', 'rgba(1, 2, 3, 0.3)' or a named colour."""
    s = (s or "").strip()
    m = _RGB_FN.match(s)
    if m:
        r, g, b, a = m.groups()
        alpha = 1.0 if a is None else max(0.0, min(1.0, float(a)))
        return (_clamp(float(r)), _clamp(float(g)), _clamp(float(b)), _clamp(alpha * 255))
    rgb = ImageColor.getrgb(s)
    if len(rgb) == 4:
        return rgb
    return (*rgb, 255)


@lru_cache(maxsize=64)
def load_font(family: str, size: float):
    size = max(1.0, size)
    path = settings.FONT_PATH or f"{family}.ttf"
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        return ImageFont.load_default(size=size)


def parse_font(font: str) -> Tuple[float, str]:
    m = _FONT.search(font or "")
    if not m:
        return 10.0, "sans-serif"
    return float(m.group(1)), m.group(2).strip()


class PillowContext:
    """Canvas-2D style context drawing onto an RGBA Pillow image."""

    def __init__(self, width: float, height: float):
        self.image = Image.new("RGBA", (max(0, int(round(width))), max(0, int(round(height)))), (0, 0, 0, 0))
        self.stroke_style = "#000"
        self.fill_style = "#000"
        self.line_width = 1.0
        self.font = "10px sans-serif"
        self.text_align = "start"
        self.text_baseline = "alphabetic"
        self._subpaths: List[Tuple[List[Point], bool]] = []

    # --- paths ---
    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(([(x, y)], False))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1][0].append((x, y))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._subpaths.append(([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], True))

    def stroke(self) -> None:
        color = parse_color(self.stroke_style)
        width = max(1, int(round(self.line_width)))

        def paint(draw: ImageDraw.ImageDraw) -> None:
            for pts, closed in self._subpaths:
                if len(pts) < 2:
                    continue
                seq = pts + [pts[0]] if closed else pts
                draw.line(seq, fill=color, width=width)

        self._composite(paint)

    def fill(self) -> None:
        color = parse_color(self.fill_style)

        def paint(draw: ImageDraw.ImageDraw) -> None:
            for pts, _ in self._subpaths:
                if len(pts) >= 3:
                    draw.polygon(pts, fill=color)

        self._composite(paint)

    # --- text ---
    def fill_text(self, text: str, x: float, y: float) -> None:
        size, family = parse_font(self.font)
        font = load_font(family, size)
        text = str(text)
        color = parse_color(self.fill_style)

        def paint(draw: ImageDraw.ImageDraw) -> None:
            left, _, right, bottom = draw.textbbox((0, 0), text, font=font)
            w = right - left
            if hasattr(font, "getmetrics"):
                ascent, descent = font.getmetrics()
            else:
                ascent, descent = bottom, 0

            dx = {"right": -w, "end": -w, "center": -w / 2}.get(self.text_align, 0)
            dy = {
                "top": 0,
                "hanging": 0,
                "middle": -(ascent + descent) / 2,
                "bottom": -(ascent + descent),
                "ideographic": -(ascent + descent),
            }.get(self.text_baseline, -ascent)
            draw.text((x + dx, y + dy), text, fill=color, font=font)

        self._composite(paint)

    # --- output ---
    def _composite(self, paint: Callable[[ImageDraw.ImageDraw], None]) -> None:
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        paint(ImageDraw.Draw(layer))
        self.image.alpha_composite(layer)

    def to_png(self) -> bytes:
        bio = io.BytesIO()
        self.image.save(bio, format="PNG")
        return bio.getvalue()


ContextFactory = Callable[[float, float], Context2D]


class Canvas:
    """The drawing surface that gets attached to a page container."""

    def __init__(self, width: float, height: float, element_id: str,
                 context_factory: Optional[ContextFactory] = None):
        self.id = element_id
        self.width = width
        self.height = height
        self._context = (context_factory or PillowContext)(width, height)

    def get_context(self, kind: str = "2d") -> Context2D:
        if kind != "2d":
            raise ValueError(f"unsupported context type: {kind!r}")
        return self._context

    def to_png(self) -> bytes:
        export = getattr(self._context, "to_png", None)
        if export is None:
            raise TypeError(f"{type(self._context).__name__} cannot export PNG")
        return export()
