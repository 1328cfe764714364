"""Logging setup shared by the eternity_core package.

Library modules log through child loggers of ``eternity``; the handler is
attached once on the package logger, at the level named by ETERNITY_LOG_LEVEL.
"""

from __future__ import annotations

import logging

from . import config

LOGGER_NAME = "eternity"


def get_logger(name: str = "") -> logging.Logger:
    """Returns the package logger, or a child of it when ``name`` is given."""
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(config.log_level())

    if not name:
        return root
    return root.getChild(name)
