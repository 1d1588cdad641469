import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict
from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "gogs_client"

class Logger:
    """Configures the package logger from a Config.

    Library modules log through ``logging.getLogger(__name__)``, so every
    handler attached here also receives the HTTP layer's records.
    """
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize logger with configuration"""
        self.config = config

        if LOGGER_NAME in self._loggers:
            self.logger = self._loggers[LOGGER_NAME]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(LOGGER_NAME)
            self._loggers[LOGGER_NAME] = self.logger

        self.logger.setLevel(self._get_log_level())

        self.formatter = logging.Formatter(
            self.config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

        log_file = self.config.get("logging.file")
        if log_file:
            path = Path(log_file)
            if not path.parent.exists():
                try:
                    path.parent.mkdir(parents=True, exist_ok=True)
                except OSError:
                    raise LoggerError(f"Cannot create log directory: {path.parent}")

            max_size = self.config.get("logging.max_size", 1024 * 1024)  # 1MB default
            backup_count = self.config.get("logging.backup_count", 3)

            try:
                handler = RotatingFileHandler(
                    str(path),
                    maxBytes=max_size,
                    backupCount=backup_count
                )
            except OSError as e:
                raise LoggerError(f"Failed to setup log file: {str(e)}")
            handler.setFormatter(self.formatter)
            self.logger.addHandler(handler)

        if self.config.get("logging.console_output", False):
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(self.formatter)
            self.logger.addHandler(console_handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level
