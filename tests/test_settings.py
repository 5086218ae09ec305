import pytest
from pydantic import ValidationError

from config.settings import ValidatorSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("FORM_VALIDATION_STRICT_CONFIG", raising=False)
    monkeypatch.delenv("FORM_VALIDATION_LOG_LEVEL", raising=False)

    settings = ValidatorSettings.from_env()

    assert settings.strict_config is False
    assert settings.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("FORM_VALIDATION_STRICT_CONFIG", "true")
    monkeypatch.setenv("FORM_VALIDATION_LOG_LEVEL", "debug")

    settings = ValidatorSettings.from_env()

    assert settings.strict_config is True
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_fails_at_load(monkeypatch):
    monkeypatch.setenv("FORM_VALIDATION_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        ValidatorSettings.from_env()
