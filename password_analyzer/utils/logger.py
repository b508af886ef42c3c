"""
Logging utilities for the Password Analyzer.

Nothing logged through here may contain a password; log lengths, counts
and buckets instead.
"""

import logging
import os
import sys
from typing import Optional


class Logger:
    """Custom logger for the password analyzer"""

    def __init__(self, name: str = "password_analyzer", log_file: Optional[str] = None,
                 level: int = logging.WARNING, console: bool = True):
        """Initialize the logger

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            console: Whether to log to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Replace handlers left over from a previous setup
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self):
        """Get the logger instance"""
        return self.logger


def get_logger(name: str = "password_analyzer") -> logging.Logger:
    """Get a child logger without touching handlers

    Core modules log through this so they inherit whatever the CLI set up
    on the package logger, and stay silent when used as a library.
    """
    return logging.getLogger(name)
