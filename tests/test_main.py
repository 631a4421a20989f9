# -*- coding: utf-8 -*-
"""
tests/test_main.py
====================
Tests for the skillshare-pw command line interface.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import json
import logging
import pytest

import main as cli
from constants import CharClasses, ConfigKeys
from version import VERSION


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCheck:

    def test_valid_password(self, capsys):
        assert cli.main(["check", "VeryStrongP4ssw0rd!@#$"]) == cli.EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["is_valid"] is True
        assert data["strength"]["level"] == "very-strong"

    def test_invalid_password(self, capsys):
        assert cli.main(["check", "1234567"]) == cli.EXIT_FAILED
        data = json.loads(capsys.readouterr().out)
        assert "Password must be at least 8 characters long" in data["errors"]

    def test_prompts_when_missing(self, capsys, monkeypatch):
        monkeypatch.setattr(cli.getpass, "getpass", lambda prompt="": "VeryStrongP4ssw0rd!@#$")
        assert cli.main(["check"]) == cli.EXIT_OK


class TestGenerate:

    def test_default(self, capsys):
        assert cli.main(["generate"]) == cli.EXIT_OK
        assert len(capsys.readouterr().out.strip()) == 16

    def test_count_and_length(self, capsys):
        cli.main(["generate", "--length", "10", "--count", "3"])
        lines = capsys.readouterr().out.split()
        assert len(lines) == 3
        assert all(len(line) == 10 for line in lines)

    def test_numbers_only(self, capsys):
        cli.main(["generate", "--no-lowercase", "--no-uppercase", "--no-special", "-l", "12"])
        out = capsys.readouterr().out.strip()
        assert len(out) == 12
        assert set(out) <= set(CharClasses.DIGITS)

    def test_no_classes_is_error(self, capsys):
        code = cli.main([
            "generate", "--no-lowercase", "--no-uppercase", "--no-numbers", "--no-special",
        ])
        assert code == cli.EXIT_ERROR
        assert "At least one character type must be included" in capsys.readouterr().err

    def test_bad_length_is_error(self, capsys):
        assert cli.main(["generate", "--length", "0"]) == cli.EXIT_ERROR


class TestHashAndVerify:

    def test_hash_then_verify(self, capsys):
        assert cli.main(["hash", "TestPassword123!"]) == cli.EXIT_OK
        digest = capsys.readouterr().out.strip()
        assert digest.startswith("$2b$04$")

        assert cli.main(["verify", "TestPassword123!", digest]) == cli.EXIT_OK
        assert capsys.readouterr().out.strip() == "match"

        assert cli.main(["verify", "WrongPassword123!", digest]) == cli.EXIT_FAILED
        assert capsys.readouterr().out.strip() == "no match"

    def test_hash_empty_is_error(self, capsys):
        assert cli.main(["hash", ""]) == cli.EXIT_ERROR
        assert "Password must be a non-empty string" in capsys.readouterr().err

    def test_missing_command(self):
        with pytest.raises(SystemExit):
            cli.main([])


class TestOptions:

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])
        assert exc.value.code == 0
        assert VERSION in capsys.readouterr().out

    def test_log_dir_from_config(self, tmp_path, monkeypatch, capsys):
        log_dir = tmp_path / "cli-logs"
        monkeypatch.setenv(ConfigKeys.LOG_DIR, str(log_dir))

        assert cli.main(["generate"]) == cli.EXIT_OK
        assert list(log_dir.glob("log_*.log"))

    def test_log_dir_flag_wins(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv(ConfigKeys.LOG_DIR, str(tmp_path / "from-config"))

        assert cli.main(["--log-dir", str(tmp_path / "from-flag"), "generate"]) == cli.EXIT_OK
        assert list((tmp_path / "from-flag").glob("log_*.log"))
        assert not (tmp_path / "from-config").exists()

    def test_no_file_logging_without_log_dir(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        assert cli.main(["generate"]) == cli.EXIT_OK
        assert not (tmp_path / "logs").exists()
