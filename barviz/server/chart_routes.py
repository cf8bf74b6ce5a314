# barviz/server/chart_routes.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field, model_validator

from barviz import settings
from barviz.chart.bar_chart import create_bar_chart
from barviz.chart.colors import RandomColorSource
from barviz.svl.errors import BarChartError
from barviz.ve.page import Page
from barviz.ve.recording import RecordingContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chart", tags=["chart"])

PREVIEW_CONTAINER = "preview"


class BarChartRequest(BaseModel):
    width: float = Field(default=600, gt=0)
    height: float = Field(default=400, gt=0)
    # items are checked by the chart normalizer, not here, so bad values come back as 400s
    data: List[Dict[str, Any]] = Field(default_factory=list)
    seed: Optional[int] = None
    format: Literal["png", "commands"] = "png"

    @model_validator(mode="after")
    def size_caps(self):
        if self.width > settings.MAX_WIDTH or self.height > settings.MAX_HEIGHT:
            raise ValueError(f"chart size capped at {settings.MAX_WIDTH}x{settings.MAX_HEIGHT}")
        return self


@router.post("/bar")
def bar_chart(req: BarChartRequest = Body(...)) -> Response:
    page = Page([PREVIEW_CONTAINER])
    factory = RecordingContext if req.format == "commands" else None
    try:
        handle = create_bar_chart(
            PREVIEW_CONTAINER, req.width, req.height, req.data,
            page=page,
            color_source=RandomColorSource(req.seed),
            context_factory=factory,
        )
    except BarChartError as e:
        logger.info("rejected bar chart request: %s", e)
        return JSONResponse({"ok": False, "error": str(e)}, status_code=400)

    if req.format == "commands":
        return Response(handle.canvas.get_context("2d").to_json(), media_type="application/json")
    return Response(handle.to_png(), media_type="image/png")
