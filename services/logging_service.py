# Copyright (C) 2026 BPS
# This file is part of Fishing Tweaks.
#
# Services Module - Logging Service

import logging
import os
import sys

LOGGER_NAME = 'FishingTweaks'
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'


class LoggingService:
    """
    Centralized logging service

    Every module logs through logging.getLogger('FishingTweaks'). Handlers are
    attached to that logger only, leaving the host's root logging untouched.
    """

    def __init__(self, log_file: str = None, log_level: int = logging.INFO, console: bool = True):
        """
        Initialize logging service

        Args:
            log_file: Path to log file
            log_level: Logging level (default: INFO)
            console: Also log to stderr
        """
        if log_file is None:
            log_file = os.path.join(
                os.path.dirname(os.path.abspath(__file__)) if not getattr(sys, 'frozen', False)
                else os.path.dirname(sys.executable),
                'fishing_tweaks.log'
            )

        self.log_file = log_file
        self.log_level = log_level
        self.console = console
        self.logger = None
        self._handlers = []
        self._setup_logging()

    def _setup_logging(self):
        """Attach file (and console) handlers to the shared logger"""
        formatter = logging.Formatter(LOG_FORMAT)
        self._handlers.append(logging.FileHandler(self.log_file, encoding='utf-8'))
        if self.console:
            self._handlers.append(logging.StreamHandler())

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(self.log_level)
        self.logger.propagate = False
        for handler in self._handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def close(self):
        """Detach and close this service's handlers"""
        if self.logger is None:
            return
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._handlers = []
        self.logger.propagate = True

    def get_logger(self):
        """Get the logger instance"""
        return self.logger

