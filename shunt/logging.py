"""SHUNT FILE PURPOSE
Purpose: logging setup with strict debug gating and an explicit level override.
Hot path: yes (logger calls occur on every status change; default is quiet).
Feature flags: SHUNT_DEBUG, SHUNT_LOG_LEVEL.
Failure mode: never crash due to logging; unknown level names fall back to the debug-gated default.
"""

from __future__ import annotations

import logging

from shunt.config import is_debug, log_level

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARNING": logging.WARNING, "ERROR": logging.ERROR}


def resolve_level() -> int:
    default = logging.INFO if is_debug() else logging.WARNING
    return _LEVELS.get(log_level() or "", default)


def _configure() -> logging.Logger:
    logger = logging.getLogger("shunt")
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(resolve_level())
    return logger


logger = _configure()
