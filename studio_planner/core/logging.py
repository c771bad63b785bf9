import logging

from studio_planner.core.config import settings

ROOT_LOGGER = "studio_planner"


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.setLevel(settings.LOG_LEVEL.upper())
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


"""
Logging setup and it configures:
- One stream handler on the package root logger
- Log level from settings (LOG_LEVEL)
- Per-module child loggers (store.local, export.exporter, ...)

The main purpose:
Standardized application logging.
"""
