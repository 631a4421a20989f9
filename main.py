"""
SkillShare Password Toolkit: Command Line Entry Point
=====================================================

Usage:
    skillshare-pw check "MyP4ssw0rd!"
    skillshare-pw generate --length 20 --count 3
    skillshare-pw generate --no-special --allow-similar
    skillshare-pw hash                      # prompts for the password
    skillshare-pw verify "MyP4ssw0rd!" '$2b$12$...'

    skillshare-pw --version

Exit codes: 0 ok / valid / match, 1 invalid / mismatch, 2 input or config error.
"""
import argparse
import getpass
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from constants import ConfigKeys
from core.config import get_config
from core.logging_config import LoggingConfig
from exceptions import SkillShareError
from utils.auth_utils import check_password, hash_password
from utils.password_utils import GenerationPolicy, generate_secure, validate_strength
from version import VERSION

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def _read_password(value: Optional[str], prompt: str = "Password: ") -> str:
    if value is not None:
        return value
    return getpass.getpass(prompt)


def _cmd_check(args) -> int:
    result = validate_strength(_read_password(args.password))
    print(json.dumps(result.to_dict(), indent=2))
    return EXIT_OK if result.is_valid else EXIT_FAILED


def _cmd_generate(args) -> int:
    policy = GenerationPolicy.from_config()
    overrides = {}
    if args.length is not None:
        overrides["length"] = args.length
    if args.no_lowercase:
        overrides["include_lowercase"] = False
    if args.no_uppercase:
        overrides["include_uppercase"] = False
    if args.no_numbers:
        overrides["include_numbers"] = False
    if args.no_special:
        overrides["include_special_chars"] = False
    if args.allow_similar:
        overrides["exclude_similar"] = False
    policy = replace(policy, **overrides)

    for _ in range(args.count):
        print(generate_secure(policy=policy))
    return EXIT_OK


def _cmd_hash(args) -> int:
    print(hash_password(_read_password(args.password), rounds=args.rounds))
    return EXIT_OK


def _cmd_verify(args) -> int:
    matched = check_password(args.password, args.digest)
    print("match" if matched else "no match")
    return EXIT_OK if matched else EXIT_FAILED


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI interface."""
    parser = argparse.ArgumentParser(
        prog="skillshare-pw",
        description="SkillShare password toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-dir",
        help="Write a rotating log file to this directory (default: LOG_DIR, if set)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="Validate password strength (JSON output)")
    p_check.add_argument("password", nargs="?", help="Password (prompted if omitted)")
    p_check.set_defaults(func=_cmd_check)

    p_gen = sub.add_parser("generate", help="Generate secure random passwords")
    p_gen.add_argument("--length", "-l", type=int, help="Password length (default: 16)")
    p_gen.add_argument("--count", "-n", type=int, default=1, help="How many to print")
    p_gen.add_argument("--no-lowercase", action="store_true")
    p_gen.add_argument("--no-uppercase", action="store_true")
    p_gen.add_argument("--no-numbers", action="store_true")
    p_gen.add_argument("--no-special", action="store_true")
    p_gen.add_argument(
        "--allow-similar",
        action="store_true",
        help="Keep look-alike characters such as l, 1, O, 0"
    )
    p_gen.set_defaults(func=_cmd_generate)

    p_hash = sub.add_parser("hash", help="Print a bcrypt digest")
    p_hash.add_argument("password", nargs="?", help="Password (prompted if omitted)")
    p_hash.add_argument("--rounds", type=int, help="bcrypt work factor")
    p_hash.set_defaults(func=_cmd_hash)

    p_verify = sub.add_parser("verify", help="Check a password against a digest")
    p_verify.add_argument("password")
    p_verify.add_argument("digest")
    p_verify.set_defaults(func=_cmd_verify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    log_to_file = args.log_dir is not None or get_config().get(ConfigKeys.LOG_DIR) is not None
    LoggingConfig.setup_logging(
        log_level="DEBUG" if args.verbose else None,
        log_dir=args.log_dir,
        enable_file=log_to_file,
    )

    try:
        return args.func(args)
    except SkillShareError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
