"""
singleton.py — SkillShare
==========================
Single place that defines the Singleton pattern for the toolkit.

    class MyService(metaclass=SingletonMeta): ...
    MyService()  # or MyService.get_instance()

- Thread-safe via double-checked locking
- clear_instance() for tests
- Logs creation and removal at DEBUG level
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """
    Metaclass that turns a plain class into a thread-safe singleton.

    Usage:
        class Config(metaclass=SingletonMeta):
            def __init__(self):
                ...

        cfg1 = Config()
        cfg2 = Config()
        assert cfg1 is cfg2
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def get_instance(cls, *args, **kwargs):
        """Same as calling the class."""
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        """Drop the cached instance (tests only)."""
        with cls._lock:
            if cls in cls._instances:
                del cls._instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


__all__ = ["SingletonMeta"]
