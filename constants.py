"""
SkillShare Constants - Single Source of Truth
==============================================

Every lookup table, message and configuration key used by the password
toolkit lives here. All tables are immutable (tuple / frozenset).
"""


class ConfigKeys:
    """
    Configuration keys read through core.config.

    Usage:
        from constants import ConfigKeys as CK
        rounds = config.get_int(CK.BCRYPT_SALT_ROUNDS, 12)
    """

    CONFIG_FILE = "SKILLSHARE_CONFIG_FILE"
    BCRYPT_SALT_ROUNDS = "BCRYPT_SALT_ROUNDS"
    LOG_LEVEL = "LOG_LEVEL"
    LOG_DIR = "LOG_DIR"

    # ==================== Generation Policy ====================
    GENERATE_LENGTH = "PASSWORD_GENERATE_LENGTH"
    INCLUDE_LOWERCASE = "PASSWORD_INCLUDE_LOWERCASE"
    INCLUDE_UPPERCASE = "PASSWORD_INCLUDE_UPPERCASE"
    INCLUDE_NUMBERS = "PASSWORD_INCLUDE_NUMBERS"
    INCLUDE_SPECIAL = "PASSWORD_INCLUDE_SPECIAL"
    EXCLUDE_SIMILAR = "PASSWORD_EXCLUDE_SIMILAR"


class Defaults:
    SALT_ROUNDS = 12
    MIN_SALT_ROUNDS = 4
    MAX_SALT_ROUNDS = 31
    GENERATE_LENGTH = 16
    LOG_LEVEL = "INFO"
    LOG_DIR = "logs"


class StrengthLevel:
    """Levels returned in StrengthResult.level, weakest first."""

    VERY_WEAK = "very-weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    # (minimum score, level), checked top-down
    THRESHOLDS = (
        (7, VERY_STRONG),
        (6, STRONG),
        (4, FAIR),
        (2, WEAK),
    )

    ALL = (VERY_WEAK, WEAK, FAIR, STRONG, VERY_STRONG)


class PasswordRules:
    MIN_LENGTH = 8
    MAX_LENGTH = 128
    GOOD_LENGTH = 12
    GREAT_LENGTH = 16
    UNIQUE_BONUS_RATIO = 0.7
    UNIQUE_WARN_RATIO = 0.5
    SEQUENCE_RUN = 3
    BCRYPT_MAX_BYTES = 72  # bcrypt ignores everything past this


class CharClasses:
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS = "0123456789"
    # characters that count toward the "special" requirement
    SPECIAL = '!@#$%^&*(),.?":{}|<>'
    # alphabet used by the generator
    GENERATOR_SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"
    SIMILAR = frozenset("ilo" "ILO" "01")


# Alphabet runs scanned for 3-character sequences (both directions)
SEQUENCE_SOURCES = (
    CharClasses.LOWERCASE,
    CharClasses.DIGITS,
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
)

COMMON_PREFIXES = ("password", "123456", "qwerty", "admin", "letmein")

COMMON_PASSWORDS = frozenset({
    "password", "password1", "password123", "passw0rd", "p@ssw0rd",
    "123456", "12345678", "123456789", "1234567890",
    "qwerty", "qwerty123", "abc123", "111111", "000000",
    "letmein", "welcome", "welcome1", "monkey", "dragon",
    "iloveyou", "sunshine", "princess", "football", "baseball",
    "admin", "admin123", "login", "master", "trustno1",
})


class Messages:
    NOT_A_STRING = "Password must be a string"
    TOO_SHORT = f"Password must be at least {PasswordRules.MIN_LENGTH} characters long"
    TOO_LONG = f"Password cannot exceed {PasswordRules.MAX_LENGTH} characters"
    TOO_LONG_BYTES = f"Password cannot exceed {PasswordRules.BCRYPT_MAX_BYTES} bytes when UTF-8 encoded"
    NO_LOWERCASE = "Password must contain at least one lowercase letter"
    NO_UPPERCASE = "Password must contain at least one uppercase letter"
    NO_NUMBER = "Password must contain at least one number"
    NO_SPECIAL = "Password must contain at least one special character"
    COMMON_PATTERN = "Password contains common patterns that are not secure"
    SEQUENTIAL = "Password should not contain sequential characters (e.g., 123, abc)"

    SAME_AS_CURRENT = "New password must be different from current password"
    CONFIRM_MISMATCH = "New passwords do not match"

    # advisory feedback
    HINT_LONGER = "Consider using a longer password"
    HINT_SPECIAL = "Add special characters for better security"
    HINT_VARIED = "Use more varied characters"

    # input errors
    EMPTY_PASSWORD = "Password must be a non-empty string"
    COMPARE_MISSING = "Both passwords are required for comparison"
    NO_CHAR_CLASS = "At least one character type must be included"
