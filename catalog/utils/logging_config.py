"""
Logging setup for the catalog service.

Console output always; `app.log` and `error.log` under LOG_DIR once the
service runs with DEBUG off.
"""
import logging
import sys
from pathlib import Path
from catalog.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_MARK = "_catalog_handler"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    return handler


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach the catalog handlers to the root logger. Safe to call more than once."""
    root_logger = logging.getLogger()
    level = _resolve_level(settings.LOG_LEVEL)
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else level)

    for existing in [h for h in root_logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        root_logger.removeHandler(existing)
        existing.close()

    handlers = [_handler(logging.StreamHandler(sys.stdout), level)]
    if not settings.DEBUG:
        logs_dir = Path(settings.LOG_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_handler(logging.FileHandler(logs_dir / "app.log"), level))
        handlers.append(_handler(logging.FileHandler(logs_dir / "error.log"), logging.ERROR))

    for handler in handlers:
        root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # SQL_ECHO already routes statements through the engine's own logger
    if not settings.SQL_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return root_logger
