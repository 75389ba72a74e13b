# esg_impact/logging_setup.py
from __future__ import annotations
import logging

from .config import SETTINGS

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once. Later calls only adjust the level."""
    lvl = (level or SETTINGS.log_level or "INFO").upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=lvl, format=_FORMAT)
    root.setLevel(lvl)
