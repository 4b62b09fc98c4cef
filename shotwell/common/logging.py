# shotwell/common/logging.py
from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str = "shotwell", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a named logger. If the root logger has no handlers yet we add a
    basicConfig once, so library use stays quiet unless the host app configures
    logging itself.

    The level defaults to ``Settings.log_level``.
    """
    if level is None:
        from shotwell.common.settings import get_settings

        level = get_settings().log_level.upper()

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
