"""
Simple logging utility for the Build Farm Dashboard

Two environments: DEV (shows INFO+) and PROD (shows WARNING+ only).
DASHBOARD_LOG_LEVEL, when set to a standard level name, overrides both.
"""

import logging
import os

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_level() -> int:
    override = os.getenv("DASHBOARD_LOG_LEVEL", "").upper()
    if override in _LEVEL_NAMES:
        return getattr(logging, override)

    is_dev = os.getenv("DASH_ENV", "PROD").upper() == "DEV"
    return logging.INFO if is_dev else logging.WARNING


class SimpleLogger:
    """Minimal logging wrapper shared by dashboard modules"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(f"dashboard.{name}")
        self._setup_logger()

    def _setup_logger(self):
        """Attach a console handler once per named logger"""
        if self.logger.handlers:
            return

        self.logger.setLevel(_resolve_level())

        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        self.logger.addHandler(handler)

    def _format(self, message: str, context: dict) -> str:
        if context:
            return f"{message} {context}"
        return message

    def info(self, message: str, **kwargs):
        """Info level - shown in DEV only"""
        self.logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs):
        """Warning level - shown in DEV and PROD"""
        self.logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs):
        """Error level - always shown"""
        self.logger.error(self._format(message, kwargs))


def get_logger(name: str) -> SimpleLogger:
    """Get a logger instance for a module"""
    return SimpleLogger(name)
