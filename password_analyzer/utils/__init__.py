"""
Utility modules for the Password Analyzer.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    PasswordAnalyzerError,
    ConfigError,
    WordlistNotFoundError,
    InvalidPolicyError,
)
from .logger import Logger, get_logger
