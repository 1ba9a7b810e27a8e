from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def parse_level(value: Optional[str]) -> Optional[int]:
    """Return the numeric level for ``"debug"``/``"20"``-style text, else None."""
    text = (value or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def configure_root(level: int = logging.INFO) -> int:
    """Install the compact console format once and set the root level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level
