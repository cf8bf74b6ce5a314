# barviz/settings.py
import logging
import os

LOG_LEVEL = os.environ.get("BARVIZ_LOG_LEVEL", "INFO").upper()
FONT_PATH = os.environ.get("BARVIZ_FONT_PATH")
MAX_WIDTH = int(os.environ.get("BARVIZ_MAX_WIDTH", "4000"))
MAX_HEIGHT = int(os.environ.get("BARVIZ_MAX_HEIGHT", "4000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
