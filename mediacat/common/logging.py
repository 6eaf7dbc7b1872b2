# mediacat/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "mediacat", level: int | str | None = None) -> logging.Logger:
    """
    Return the package logger. Level defaults to Settings.log_level.
    If no handlers are set anywhere, we add a basicConfig once.
    """
    if level is None:
        from mediacat.common.settings import get_settings
        level = get_settings().log_level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
