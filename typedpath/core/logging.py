from __future__ import annotations

import logging

_LOGGER_NAME = "typedpath"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if isinstance(level, str):
        level = level.strip().upper()
    logger.setLevel(level)

    if not any(getattr(handler, "_typedpath_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._typedpath_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
