"""
Tests for environment parsing in config
"""
import pytest

from shopcolor.config import _env_float


def test_env_float_default_when_unset(monkeypatch):
    monkeypatch.delenv("REQUEST_TIMEOUT_SEC", raising=False)
    assert _env_float("REQUEST_TIMEOUT_SEC", 10.0) == 10.0


def test_env_float_default_when_blank(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT_SEC", "  ")
    assert _env_float("REQUEST_TIMEOUT_SEC", 10.0) == 10.0


def test_env_float_parses(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT_SEC", "2.5")
    assert _env_float("REQUEST_TIMEOUT_SEC", 10.0) == 2.5


@pytest.mark.parametrize("raw,fragment", [
    ("ten", "must be a number of seconds"),
    ("0", "must be greater than 0"),
    ("-3", "must be greater than 0"),
])
def test_env_float_bad_value_exits_with_message(monkeypatch, raw, fragment):
    monkeypatch.setenv("REQUEST_TIMEOUT_SEC", raw)
    with pytest.raises(SystemExit) as info:
        _env_float("REQUEST_TIMEOUT_SEC", 10.0)
    assert fragment in str(info.value)
    assert "REQUEST_TIMEOUT_SEC" in str(info.value)
