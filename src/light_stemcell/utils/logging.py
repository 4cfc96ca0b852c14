"""Logging helpers.

Records from the manager carry context such as the storage account and
the stemcell being handled. ``ContextFormatter`` renders that context as
``key=value`` pairs after the message when structured output is enabled.
"""

import logging
import sys
from typing import Any

from light_stemcell.utils.errors import ConfigurationError

PACKAGE_LOGGER = "light_stemcell"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
STRUCTURED_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class ContextFormatter(logging.Formatter):
    """Formatter that appends a record's context as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} {pairs}"


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown log level '{level}'", config_key="logging.level")
    return value


def configure_logging(level: str = "INFO", structured: bool = False) -> None:
    """Send light_stemcell logs to stderr.

    Only the CLI calls this. Library users configure logging themselves
    and may hand the manager their own logger.

    Args:
        level: Log level name, case-insensitive
        structured: Include timestamps, logger names and record context

    Raises:
        ConfigurationError: If the level name is unknown
    """
    handler = logging.StreamHandler(sys.stderr)
    if structured:
        handler.setFormatter(ContextFormatter(STRUCTURED_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_parse_level(level))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the light_stemcell namespace."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """Adapter that stores bound fields on each record as ``context``.

    Fields passed per call through ``extra`` are merged over the bound
    ones.
    """

    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        context = dict(self.extra or {})
        context.update(kwargs.pop("extra", None) or {})
        kwargs["extra"] = {"context": context}
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextLoggerAdapter:
    """Get a logger whose records carry the given context fields.

    Args:
        name: Module name
        **context: Fields attached to every record

    Returns:
        ContextLoggerAdapter
    """
    return ContextLoggerAdapter(get_logger(name), context)
