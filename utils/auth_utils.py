# -*- coding: utf-8 -*-
"""
utils/auth_utils.py
=====================
bcrypt hashing facade on top of passlib.

  hash_password()      salted digest, new salt every call
  check_password()     verify plain text against a digest
  generate_salt()      "$2b$<rounds>$<22 chars>" salt/config string
  hash_with_salt()     deterministic digest for a given salt
  is_password_hashed() cheap prefix check

Work factor comes from BCRYPT_SALT_ROUNDS (core.config).
bcrypt only reads the first 72 bytes of a secret; longer passwords are
rejected instead of silently truncated.
"""
import logging
import re
import secrets
from typing import Optional, Tuple

from passlib.exc import PasswordTruncateError
from passlib.hash import bcrypt as _bcrypt
from passlib.utils.binary import BCRYPT_CHARS, bcrypt64

from constants import Defaults, Messages, PasswordRules
from core.config import get_salt_rounds
from exceptions import HashingError, InvalidValueError, MissingFieldError

logger = logging.getLogger(__name__)

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
DEFAULT_IDENT = "2b"
SALT_CHARS = 22

_SALT_CONFIG_RE = re.compile(
    r"^\$(?P<ident>2[aby])\$(?P<rounds>\d{2})\$(?P<salt>[./A-Za-z0-9]{%d})$" % SALT_CHARS
)
_BARE_SALT_RE = re.compile(r"^[./A-Za-z0-9]{%d}$" % SALT_CHARS)


def _resolve_rounds(rounds: Optional[int]) -> int:
    if rounds is None:
        rounds = get_salt_rounds()
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidValueError("rounds", "must be an integer")
    if not Defaults.MIN_SALT_ROUNDS <= rounds <= Defaults.MAX_SALT_ROUNDS:
        raise InvalidValueError(
            "rounds",
            f"must be between {Defaults.MIN_SALT_ROUNDS} and {Defaults.MAX_SALT_ROUNDS}",
        )
    return rounds


def _exceeds_bcrypt_limit(password: str) -> bool:
    return len(password.encode("utf-8")) > PasswordRules.BCRYPT_MAX_BYTES


def _require_password(password) -> None:
    if not isinstance(password, str) or not password:
        raise InvalidValueError("password", Messages.EMPTY_PASSWORD)
    if _exceeds_bcrypt_limit(password):
        raise InvalidValueError("password", Messages.TOO_LONG_BYTES)


def _hash(password: str, **settings) -> str:
    try:
        return _bcrypt.using(truncate_error=True, **settings).hash(password)
    except PasswordTruncateError as exc:
        raise InvalidValueError("password", Messages.TOO_LONG_BYTES) from exc
    except ValueError as exc:
        raise HashingError("Password hashing failed", detail=str(exc)) from exc


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plain-text password using bcrypt with a fresh random salt."""
    _require_password(password)
    return _hash(password, rounds=_resolve_rounds(rounds))


def is_password_hashed(password: str) -> bool:
    """Return True if the value looks like a bcrypt hash."""
    return isinstance(password, str) and password.startswith(BCRYPT_PREFIXES)


def check_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain password against a bcrypt hash.

    Empty arguments raise MissingFieldError; a malformed digest or a
    password bcrypt could never have hashed whole is simply a mismatch.
    """
    if not plain:
        raise MissingFieldError("plain", Messages.COMPARE_MISSING)
    if not hashed:
        raise MissingFieldError("hashed", Messages.COMPARE_MISSING)

    if isinstance(plain, str) and _exceeds_bcrypt_limit(plain):
        return False

    try:
        return _bcrypt.verify(plain, hashed)
    except (ValueError, TypeError) as exc:
        logger.debug(f"Password check against malformed hash: {exc}")
        return False


def generate_salt(rounds: Optional[int] = None) -> str:
    """Fresh bcrypt salt string, e.g. "$2b$12$N9qo8uLOickgx2ZMRZoMye"."""
    rounds = _resolve_rounds(rounds)
    salt = "".join(secrets.choice(BCRYPT_CHARS) for _ in range(SALT_CHARS))
    # last char only carries 2 significant bits
    salt = bcrypt64.repair_unused(salt)
    return f"${DEFAULT_IDENT}${rounds:02d}${salt}"


def _split_salt(salt: str) -> Tuple[str, int, str]:
    match = _SALT_CONFIG_RE.match(salt)
    if match:
        rounds = _resolve_rounds(int(match.group("rounds")))
        return match.group("ident"), rounds, match.group("salt")
    if _BARE_SALT_RE.match(salt):
        return DEFAULT_IDENT, _resolve_rounds(None), salt
    raise InvalidValueError(
        "salt", f"expected '$2b$NN$' + {SALT_CHARS} chars or a bare {SALT_CHARS}-char salt"
    )


def hash_with_salt(password: str, salt: str) -> str:
    """
    Hash `password` with a caller-supplied salt.

    Same password + same salt always gives the same digest, and the
    digest keeps the salt's $2a$/$2b$/$2y$ prefix.
    """
    _require_password(password)
    if not isinstance(salt, str) or not salt:
        raise MissingFieldError("salt")

    ident, rounds, raw_salt = _split_salt(salt)
    raw_salt = bcrypt64.repair_unused(raw_salt)
    return _hash(password, ident=ident, rounds=rounds, salt=raw_salt)
