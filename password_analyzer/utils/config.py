"""
Configuration handling for the Password Analyzer.

Settings live in a JSON object. Known keys are type-checked on the way in,
so a hand-edited file with ``"include_symbols": "false"`` is rejected
instead of being read as a truthy string.
"""

import os
import json
from typing import Dict, Any, Optional, Union
from password_analyzer.utils.exceptions import ConfigError


class Config:
    """Configuration manager for the password analyzer"""

    DEFAULT_CONFIG = {
        "verbosity": "warning",
        "log_file": None,
        # Generator defaults, same as the interactive client
        "length": 16,
        "include_lowercase": True,
        "include_uppercase": True,
        "include_numbers": True,
        "include_symbols": True,
        "count": 1,
    }

    # Accepted types per key; None is only allowed where listed
    TYPES = {
        "verbosity": (str,),
        "log_file": (str, type(None)),
        "length": (int,),
        "include_lowercase": (bool,),
        "include_uppercase": (bool,),
        "include_numbers": (bool,),
        "include_symbols": (bool,),
        "count": (int,),
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = self.DEFAULT_CONFIG.copy()
        self.config_path = config_path or os.path.expanduser("~/.password_analyzer_config.json")

        if os.path.exists(self.config_path):
            self.load()

    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file: {e}")

        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file must contain a JSON object: {self.config_path}")
        self.update(user_config)

    def save(self) -> None:
        """Save current configuration to file"""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Error saving config file: {e}")

    def update(self, values: Dict[str, Any]) -> None:
        """Check and apply several configuration values

        Raises:
            ConfigError: if a known key has a value of the wrong type
        """
        for key, value in values.items():
            check_type(key, value)
        self.config.update(values)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def __contains__(self, key: str) -> bool:
        return key in self.config


def check_type(key: str, value: Any) -> None:
    """Raise ConfigError if ``value`` has the wrong type for ``key``

    Unknown keys pass through untouched.
    """
    expected = Config.TYPES.get(key)
    if expected is None:
        return
    # bool is an int subclass; a length of ``true`` is still a mistake
    if isinstance(value, bool) and bool not in expected:
        raise ConfigError(f"Config value for '{key}' must be {expected[0].__name__}, got bool")
    if not isinstance(value, expected):
        raise ConfigError(
            f"Config value for '{key}' must be {expected[0].__name__}, "
            f"got {type(value).__name__}"
        )


def verbosity_to_level(verbosity: Union[str, int]) -> int:
    """Convert verbosity string to logging level

    Args:
        verbosity: Verbosity string or logging level integer

    Returns:
        Logging level as integer
    """
    if isinstance(verbosity, int):
        return verbosity

    levels = {
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50
    }

    return levels.get(verbosity.lower(), 30)  # Default to WARNING
