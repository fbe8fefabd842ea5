"""
Runtime configuration, read from environment variables.

Nothing here changes normalization results; the record ceiling stays a
constant in rules.py because its value is part of the error message.
"""

import logging
import os

LOGGER_NAME = "contact_hasher"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.INFO

logger = logging.getLogger(__name__)


def _get_env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, value, default)
        return default


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if isinstance(resolved, int):
        return resolved

    logger.warning("Unknown log level %r, using %s", level, logging.getLevelName(DEFAULT_LOG_LEVEL))
    return DEFAULT_LOG_LEVEL


class Config:
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "dev")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

    # Uploads above this size are refused before decoding.
    MAX_UPLOAD_BYTES = _get_env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)

    # Raw emails and phone numbers are personal data; keep them out of logs
    # unless explicitly asked for.
    LOG_VALUES = _get_env_bool("LOG_VALUES", False)


def configure_logging(level=None) -> logging.Logger:
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(_resolve_level(level or Config.LOG_LEVEL))

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
