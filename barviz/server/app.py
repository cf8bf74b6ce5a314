# barviz/server/app.py — FastAPI app factory

from fastapi import FastAPI

from barviz.settings import configure_logging
from barviz.server.chart_routes import router as chart_router


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="barviz")
    app.include_router(chart_router)          # /chart/bar

    @app.get("/")
    def root():
        return {"ok": True, "msg": "barviz running"}

    return app


app = create_app()
