import pytest

from config.config import ARITHMETIC_CONFIG, BOOLEAN_CONFIG, validate_config
from core import FUNCTION_PRECEDENCE


def test_default_config_is_valid():
    validate_config()


def test_sentinel_precedence_rejected(monkeypatch):
    precedence = dict(ARITHMETIC_CONFIG["precedence"], **{"^": FUNCTION_PRECEDENCE})
    monkeypatch.setitem(ARITHMETIC_CONFIG, "precedence", precedence)
    with pytest.raises(AssertionError):
        validate_config()


def test_boolean_chars_must_differ(monkeypatch):
    monkeypatch.setitem(BOOLEAN_CONFIG, "or_char", BOOLEAN_CONFIG["and_char"])
    with pytest.raises(AssertionError):
        validate_config()
