"""Logging configuration for the AI playground."""
import sys

from loguru import logger

from .config import Config, config as default_config


def setup_logging(cfg: Config = default_config) -> None:
    """Route loguru output to stderr at the configured level.

    The console menu owns stdout, so log records never go there.
    """
    level = "DEBUG" if cfg["app.debug"] else cfg.get("logging.level", "WARNING")

    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=level,
        backtrace=True,
        diagnose=bool(cfg["app.debug"]),
    )
    logger.debug(f"Logging configured at level {level}")
