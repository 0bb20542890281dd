"""Root logging setup for processes embedding the rhyme engine."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from .observability import get_logger

LOG_LEVEL_ENV = "TUKANT_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False

_logger = get_logger(__name__).bind(component="logging_config")


def _resolve_level(level: Union[str, int, None]) -> Optional[int]:
    """Map a level name or number to an int; ``None`` when it names nothing."""

    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else None


def configure_logging(level: Union[str, int, None] = None, *, force: bool = False) -> int:
    """Install a root handler and set the ``tukant`` logger level.

    ``level`` wins over the ``TUKANT_LOG_LEVEL`` environment variable; with
    neither, or with a name :mod:`logging` does not know, ``INFO`` is used and
    the unknown name is reported.  Only the first call configures anything
    unless ``force`` is set.  Returns the level the ``tukant`` logger ends up
    with.
    """

    global _CONFIGURED

    package_logger = logging.getLogger("tukant")
    if _CONFIGURED and not force:
        return package_logger.getEffectiveLevel()

    requested = level if level is not None else os.environ.get(LOG_LEVEL_ENV)
    resolved = _resolve_level(requested) if requested not in (None, "") else logging.INFO
    effective = resolved if resolved is not None else logging.INFO

    logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, force=force)
    package_logger.setLevel(effective)
    _CONFIGURED = True

    if resolved is None:
        _logger.warning(
            "Unknown log level; using INFO",
            context={"requested": requested, "variable": LOG_LEVEL_ENV},
        )
    return effective


__all__ = ["LOG_LEVEL_ENV", "configure_logging"]
