"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import get_config

    rounds = get_config().get_int("BCRYPT_SALT_ROUNDS", 12)
    exclude_similar = get_config().get_bool("PASSWORD_EXCLUDE_SIMILAR", True)
"""
import os
import json
import logging
from core.singleton import SingletonMeta
from typing import Any, Optional, Dict
from pathlib import Path
from dotenv import load_dotenv

from constants import ConfigKeys, Defaults
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    - Type conversion
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_cache: Dict[str, Any] = {}
        self._config_file_path = Path(
            config_file or os.getenv(ConfigKeys.CONFIG_FILE, "config/settings.json")
        )

        # Load environment variables
        self._load_env()

        # Load JSON config
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)
            logger.info("Environment variables loaded from .env")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if self._config_file_path.exists():
            try:
                with open(self._config_file_path, 'r', encoding='utf-8') as f:
                    self._config_cache = json.load(f)
                logger.info(f"Configuration loaded from {self._config_file_path}")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load config file: {e}")
                self._config_cache = {}
        else:
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        env_value = os.getenv(key)
        if env_value is not None:
            return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}",
                code="CONFIG_MISSING",
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def set(self, key: str, value: Any):
        """Override a value for the lifetime of this instance."""
        self._config_cache[key] = value


def get_config() -> Config:
    """Current Config singleton (re-created after clear_instance())."""
    return Config.get_instance()


def get_salt_rounds() -> int:
    """bcrypt work factor, BCRYPT_SALT_ROUNDS or 12."""
    return get_config().get_int(ConfigKeys.BCRYPT_SALT_ROUNDS, Defaults.SALT_ROUNDS)


def get_log_level() -> str:
    """Get logging level"""
    return str(get_config().get(ConfigKeys.LOG_LEVEL, default=Defaults.LOG_LEVEL)).upper()
