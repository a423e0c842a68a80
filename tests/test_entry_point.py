"""
Command-line handling of the packaged entry point.
"""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from tictactoe.__main__ import LOG_LEVEL_ENV, main, parse_args


def test_entry_point_lives_in_the_package():
    assert main.__module__ == "tictactoe.__main__"


def test_default_log_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    args, qt_args = parse_args([])
    assert args.log_level == "WARNING"
    assert qt_args == []


def test_log_level_flag_is_case_insensitive(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    args, _ = parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    args, _ = parse_args([])
    assert args.log_level == "INFO"


def test_qt_flags_are_passed_through(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    args, qt_args = parse_args(["-style", "Fusion", "--log-level", "ERROR"])
    assert args.log_level == "ERROR"
    assert qt_args == ["-style", "Fusion"]
