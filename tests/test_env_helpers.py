import os

import pytest

from loopfpy.env import (
    default_log_level,
    default_processes,
    normalize_log_level as _normalize_log_level,
    parse_int_env as _parse_int_env,
)


def test_parse_int_env_defaults_and_minimum():
    os.environ.pop("LOOPFPY_TEST_INT", None)
    assert _parse_int_env("LOOPFPY_TEST_INT", default=7, minimum=3) == 7

    os.environ["LOOPFPY_TEST_INT"] = ""
    assert _parse_int_env("LOOPFPY_TEST_INT", default=7, minimum=3) == 7

    os.environ["LOOPFPY_TEST_INT"] = "garbage"
    assert _parse_int_env("LOOPFPY_TEST_INT", default=7, minimum=3) == 7

    os.environ["LOOPFPY_TEST_INT"] = "2"
    assert _parse_int_env("LOOPFPY_TEST_INT", default=7, minimum=3) == 3

    os.environ["LOOPFPY_TEST_INT"] = "10"
    assert _parse_int_env("LOOPFPY_TEST_INT", default=7, minimum=3) == 10
    os.environ.pop("LOOPFPY_TEST_INT", None)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", "DEBUG"),
        ("INFO", "INFO"),
        (" warning ", "WARNING"),
        ("", "WARNING"),
        ("verbose", "WARNING"),
    ],
)
def test_normalize_log_level(raw: str, expected: str):
    assert _normalize_log_level(raw) == expected


def test_defaults_from_environment(monkeypatch):
    monkeypatch.delenv("LOOPFPY_PROCESSES", raising=False)
    monkeypatch.delenv("LOOPFPY_LOG_LEVEL", raising=False)
    assert default_processes() == 1
    assert default_log_level() == "WARNING"

    monkeypatch.setenv("LOOPFPY_PROCESSES", "4")
    monkeypatch.setenv("LOOPFPY_LOG_LEVEL", "error")
    assert default_processes() == 4
    assert default_log_level() == "ERROR"

    monkeypatch.setenv("LOOPFPY_PROCESSES", "0")
    assert default_processes() == 1
