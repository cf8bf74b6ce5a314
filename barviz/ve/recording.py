# barviz/ve/recording.py
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

_STATE = ("stroke_style", "fill_style", "line_width", "font", "text_align", "text_baseline")


@dataclass
class DrawCommand:
    op: str
    args: Tuple[Any, ...]
    state: Dict[str, Any] = field(default_factory=dict)


class RecordingContext:
    """
    Headless 2D context that keeps every call instead of painting pixels.
    Handy for inspecting geometry and for shipping draw lists as JSON.
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.stroke_style = "#000"
        self.fill_style = "#000"
        self.line_width = 1.0
        self.font = "10px sans-serif"
        self.text_align = "start"
        self.text_baseline = "alphabetic"
        self.commands: List[DrawCommand] = []

    def _record(self, op: str, *args) -> None:
        self.commands.append(DrawCommand(op, args, {k: getattr(self, k) for k in _STATE}))

    def begin_path(self):
        self._record("begin_path")

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def rect(self, x, y, w, h):
        self._record("rect", x, y, w, h)

    def stroke(self):
        self._record("stroke")

    def fill(self):
        self._record("fill")

    def fill_text(self, text, x, y):
        self._record("fill_text", str(text), x, y)

    def ops(self, name: str) -> List[DrawCommand]:
        return [c for c in self.commands if c.op == name]

    def clear(self) -> None:
        self.commands = []

    def to_json(self) -> str:
        payload = {
            "width": self.width,
            "height": self.height,
            "commands": [
                {"op": c.op, "args": list(c.args), "state": c.state}
                for c in self.commands
            ],
        }
        return json.dumps(payload)
