from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "XORPNG_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def resolve_log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def configure_logging(verbose: bool = False) -> None:
    # stdout carries image bytes or generated paths, so logs go to stderr.
    logging.basicConfig(level=resolve_log_level(verbose), format=LOG_FORMAT, stream=sys.stderr)
