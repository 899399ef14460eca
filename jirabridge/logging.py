"""Logging for the jirabridge logger namespace.

Every module logs under "jirabridge.<module>". setup() attaches one
stderr handler to the "jirabridge" logger, so the host application's
root logger is left alone when jirabridge is embedded.

Configure via config.yaml (logging.level, logging.format) or env
(LOGGING_LEVEL, LOGGING_FORMAT). Levels: DEBUG, INFO, WARNING, ERROR.
"""

import logging

from jirabridge.config import LoggingConfig

LOGGER_NAME = "jirabridge"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant, INFO when unknown."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class BridgeLogging:
    """Applies LoggingConfig to the jirabridge logger."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> logging.Logger:
        """Set level and handler on the jirabridge logger; safe to call again."""
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(self._format))
        logger.addHandler(handler)
        logger.setLevel(self._level)
        logger.propagate = False
        return logger

    def get_logger(self, name: str) -> logging.Logger:
        """Return a child of the jirabridge logger (name with or without prefix)."""
        if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
            return logging.getLogger(name)
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
