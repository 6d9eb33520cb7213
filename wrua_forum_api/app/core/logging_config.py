"""Process-wide logging for the forum API, its scripts and the client."""

import logging
from typing import List, Optional

from .config import resolve_path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks the handlers installed here, so other handlers on the root logger
# (pytest's capture handler, uvicorn's own setup) do not count as ours.
_OWNER_ATTR = "_wrua_forum_handler"


def _level(name: str) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        path = resolve_path(logfile)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def installed_handlers() -> List[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, _OWNER_ATTR, False)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the forum's stderr and optional file handlers to the root logger.

    Handlers are added on the first call only; later calls (one per
    ``create_app`` in the test-suite) just apply ``level``.  A relative
    ``logfile`` is placed under the project root, like the database.
    Unknown level names mean ``INFO``.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))
    if installed_handlers():
        return

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        setattr(handler, _OWNER_ATTR, True)
        root.addHandler(handler)
