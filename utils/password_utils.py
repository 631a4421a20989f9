# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure password policy functions: strength scoring, validation,
sequential-run detection and secure generation. No hashing here
(see utils/auth_utils.py).

Scoring (calculate_strength), one point each, max 8:
  +1  length >= 8
  +1  length >= 12
  +1  length >= 16
  +1  has lowercase letter
  +1  has uppercase letter
  +1  has digit
  +1  has special character  !@#$%^&*(),.?":{}|<>
  +1  unique characters >= 70% of length

  >= 7  → "very-strong"
  6     → "strong"
  4-5   → "fair"
  2-3   → "weak"
  0-1   → "very-weak"
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import asdict, dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from constants import (
    COMMON_PASSWORDS,
    COMMON_PREFIXES,
    SEQUENCE_SOURCES,
    CharClasses,
    ConfigKeys,
    Defaults,
    Messages,
    PasswordRules,
    StrengthLevel,
)
from exceptions import ConfigurationError, InvalidValueError

logger = logging.getLogger(__name__)


# ─── Result types ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StrengthResult:
    score: int
    level: str
    feedback: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validate_strength().

    `errors` are blocking rule violations; `strength.feedback` holds
    advisory hints that never affect `is_valid`.
    """
    is_valid: bool
    errors: Tuple[str, ...]
    strength: StrengthResult

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GenerationPolicy:
    """Character-class policy for generate_secure()."""
    length: int = Defaults.GENERATE_LENGTH
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_special_chars: bool = True
    exclude_similar: bool = True  # drop i l o I L O 0 1

    @classmethod
    def from_config(cls, cfg=None) -> "GenerationPolicy":
        """Build the default policy from PASSWORD_* configuration keys."""
        if cfg is None:
            from core.config import get_config
            cfg = get_config()
        return cls(
            length=cfg.get_int(ConfigKeys.GENERATE_LENGTH, Defaults.GENERATE_LENGTH),
            include_lowercase=cfg.get_bool(ConfigKeys.INCLUDE_LOWERCASE, True),
            include_uppercase=cfg.get_bool(ConfigKeys.INCLUDE_UPPERCASE, True),
            include_numbers=cfg.get_bool(ConfigKeys.INCLUDE_NUMBERS, True),
            include_special_chars=cfg.get_bool(ConfigKeys.INCLUDE_SPECIAL, True),
            exclude_similar=cfg.get_bool(ConfigKeys.EXCLUDE_SIMILAR, True),
        )

    def charset(self) -> str:
        """Union of the enabled alphabets, in class order."""
        parts = []
        if self.include_lowercase:
            parts.append(CharClasses.LOWERCASE)
        if self.include_uppercase:
            parts.append(CharClasses.UPPERCASE)
        if self.include_numbers:
            parts.append(CharClasses.DIGITS)
        if self.include_special_chars:
            parts.append(CharClasses.GENERATOR_SPECIAL)

        chars = "".join(parts)
        if self.exclude_similar:
            chars = "".join(c for c in chars if c not in CharClasses.SIMILAR)
        return chars


# ─── Lookup tables ───────────────────────────────────────────────────────────

def _build_sequences(sources: Iterable[str], run: int) -> FrozenSet[str]:
    runs = set()
    for source in sources:
        for i in range(len(source) - run + 1):
            chunk = source[i:i + run]
            runs.add(chunk)
            runs.add(chunk[::-1])
    return frozenset(runs)


SEQUENCES: FrozenSet[str] = _build_sequences(SEQUENCE_SOURCES, PasswordRules.SEQUENCE_RUN)


# ─── Character class helpers ─────────────────────────────────────────────────

def _has_lower(password: str) -> bool:
    return any(c in CharClasses.LOWERCASE for c in password)


def _has_upper(password: str) -> bool:
    return any(c in CharClasses.UPPERCASE for c in password)


def _has_digit(password: str) -> bool:
    return any(c in CharClasses.DIGITS for c in password)


def _has_special(password: str) -> bool:
    return any(c in CharClasses.SPECIAL for c in password)


def has_common_pattern(password: str) -> bool:
    """True for well-known passwords and passwords starting with a common prefix."""
    lowered = password.lower()
    if lowered in COMMON_PASSWORDS:
        return True
    return lowered.startswith(COMMON_PREFIXES)


def has_sequential_chars(password: str) -> bool:
    """
    True if any 3-character window of `password` (case-insensitive) is an
    ascending or descending run of the alphabet, the digits, or a QWERTY row.

        has_sequential_chars("abc123")  → True
        has_sequential_chars("cba321")  → True
        has_sequential_chars("qwe123")  → True
        has_sequential_chars("ComplexP4ssw0rd!")  → False
    """
    if not isinstance(password, str):
        return False

    run = PasswordRules.SEQUENCE_RUN
    lowered = password.lower()
    return any(
        lowered[i:i + run] in SEQUENCES
        for i in range(len(lowered) - run + 1)
    )


# ─── Scoring ─────────────────────────────────────────────────────────────────

def _level_for(score: int) -> str:
    for minimum, level in StrengthLevel.THRESHOLDS:
        if score >= minimum:
            return level
    return StrengthLevel.VERY_WEAK


def calculate_strength(password: str) -> StrengthResult:
    """Score `password` 0-8 and attach advisory feedback."""
    if not isinstance(password, str):
        raise InvalidValueError("password", Messages.NOT_A_STRING)

    length = len(password)
    special = _has_special(password)
    unique = len(set(password))

    score = sum([
        length >= PasswordRules.MIN_LENGTH,
        length >= PasswordRules.GOOD_LENGTH,
        length >= PasswordRules.GREAT_LENGTH,
        _has_lower(password),
        _has_upper(password),
        _has_digit(password),
        special,
        unique >= length * PasswordRules.UNIQUE_BONUS_RATIO,
    ])

    feedback = []
    if length < PasswordRules.GOOD_LENGTH:
        feedback.append(Messages.HINT_LONGER)
    if not special:
        feedback.append(Messages.HINT_SPECIAL)
    if unique < length * PasswordRules.UNIQUE_WARN_RATIO:
        feedback.append(Messages.HINT_VARIED)

    return StrengthResult(score=score, level=_level_for(score), feedback=tuple(feedback))


def validate_strength(password: str) -> ValidationResult:
    """
    Check `password` against the blocking policy rules.

    Never raises for bad passwords: a non-string or empty value yields a
    single "Password must be a string" error and a zero score.
    """
    if not isinstance(password, str) or not password:
        return ValidationResult(
            is_valid=False,
            errors=(Messages.NOT_A_STRING,),
            strength=StrengthResult(score=0, level=StrengthLevel.VERY_WEAK),
        )

    errors = []

    if len(password) < PasswordRules.MIN_LENGTH:
        errors.append(Messages.TOO_SHORT)
    if len(password) > PasswordRules.MAX_LENGTH:
        errors.append(Messages.TOO_LONG)
    elif len(password.encode("utf-8")) > PasswordRules.BCRYPT_MAX_BYTES:
        errors.append(Messages.TOO_LONG_BYTES)

    if not _has_lower(password):
        errors.append(Messages.NO_LOWERCASE)
    if not _has_upper(password):
        errors.append(Messages.NO_UPPERCASE)
    if not _has_digit(password):
        errors.append(Messages.NO_NUMBER)
    if not _has_special(password):
        errors.append(Messages.NO_SPECIAL)

    if has_common_pattern(password):
        errors.append(Messages.COMMON_PATTERN)
    if has_sequential_chars(password):
        errors.append(Messages.SEQUENTIAL)

    strength = calculate_strength(password)
    logger.debug(
        f"Password validated: {len(errors)} error(s), level={strength.level}"
    )
    return ValidationResult(is_valid=not errors, errors=tuple(errors), strength=strength)


def validate_password_change(current: str, new: str, confirm: str) -> ValidationResult:
    """validate_strength(new) plus the reuse and confirmation checks."""
    result = validate_strength(new)
    errors = list(result.errors)

    if isinstance(new, str) and new == current:
        errors.append(Messages.SAME_AS_CURRENT)
    if confirm != new:
        errors.append(Messages.CONFIRM_MISMATCH)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), strength=result.strength)


# ─── Generation ──────────────────────────────────────────────────────────────

def generate_secure(
        length: Optional[int] = None,
        policy: Optional[GenerationPolicy] = None,
) -> str:
    """
    Random password of exactly `length` characters drawn uniformly from the
    classes enabled in `policy`, using the `secrets` CSPRNG.

    Raises:
        InvalidValueError: length is not a positive integer
        ConfigurationError: policy enables no character class
    """
    policy = policy or GenerationPolicy()
    if length is None:
        length = policy.length

    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidValueError("length", "must be a positive integer")

    charset = policy.charset()
    if not charset:
        raise ConfigurationError(Messages.NO_CHAR_CLASS, code="POLICY_EMPTY")

    return "".join(secrets.choice(charset) for _ in range(length))
