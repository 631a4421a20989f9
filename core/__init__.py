# core/__init__.py
"""
SkillShare Core Module
======================

Ambient services shared by the password toolkit.

Public API:
    - Configuration: Config, get_config
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .config import Config, get_config
from .singleton import SingletonMeta
from .logging_config import LoggingConfig

__all__ = [
    "Config",
    "get_config",
    "SingletonMeta",
    "LoggingConfig",
]
