from __future__ import annotations

import logging
import os

logger = logging.getLogger(__package__)
if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False


def level_from_env(default: int = logging.WARNING) -> int:
    level = os.getenv("RESOLVED_LOG_LEVEL")
    if not level:
        return default

    if level.isdigit():
        return int(level)

    match logging.getLevelName(level.upper()):
        case int(num):
            return num
        case _:
            return default


logger.setLevel(level_from_env())
