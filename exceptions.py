"""
exceptions.py
=============
SkillShare — Password Toolkit Exception System

All toolkit exceptions inherit from SkillShareError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
SkillShareError
├── ValidationError
│   ├── MissingFieldError
│   └── InvalidValueError
├── HashingError
└── ConfigurationError

A password that fails the strength rules is NOT an exception: it is
reported through ValidationResult.is_valid / errors.
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class SkillShareError(Exception):
    """Base exception for all SkillShare toolkit errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "PWD_EMPTY"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(SkillShareError):
    """Raised when caller-provided input is unusable."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class MissingFieldError(ValidationError):
    """Raised when a required argument is empty or None."""

    def __init__(self, field: str, message: str = "", **kwargs):
        super().__init__(
            message or f"Required field is missing: '{field}'", field=field, **kwargs
        )


class InvalidValueError(ValidationError):
    """Raised when an argument has the wrong type, range or format."""

    def __init__(self, field: str, reason: str = "", **kwargs):
        msg = f"Invalid value for field '{field}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg, field=field, **kwargs)
        self.reason = reason


# ─── Hashing ─────────────────────────────────────────────────────────────────

class HashingError(SkillShareError):
    """Raised when the bcrypt backend fails on otherwise valid input."""


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(SkillShareError):
    """Raised when configuration or a generation policy is invalid."""
