import logging

import pytest
import structlog

from pkg_jwt.env import settings_from_env
from pkg_jwt.log import configure_logging
from pkg_jwt.settings import DEFAULT_COOKIE_NAME, VerifierSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("PKG_JWT_SECRET_KEY", "PKG_JWT_COOKIE_NAME", "PKG_JWT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_settings_from_env_defaults(monkeypatch):
    monkeypatch.setenv("PKG_JWT_SECRET_KEY", "s3cr3t")

    settings = settings_from_env()
    assert settings.secret_key == b"s3cr3t"
    assert settings.cookie_name == DEFAULT_COOKIE_NAME
    assert settings.log_level == "info"


def test_settings_from_env_overrides(monkeypatch):
    monkeypatch.setenv("PKG_JWT_SECRET_KEY", "s3cr3t")
    monkeypatch.setenv("PKG_JWT_COOKIE_NAME", " session ")
    monkeypatch.setenv("PKG_JWT_LOG_LEVEL", "DEBUG")

    settings = settings_from_env()
    assert settings.cookie_name == "session"
    assert settings.log_level == "debug"


@pytest.mark.parametrize("value", [None, ""])
def test_settings_from_env_fails_closed(monkeypatch, value):
    if value is not None:
        monkeypatch.setenv("PKG_JWT_SECRET_KEY", value)

    with pytest.raises(RuntimeError, match="PKG_JWT_SECRET_KEY"):
        settings_from_env()


def test_settings_repr_hides_secret():
    assert "hunter2" not in repr(VerifierSettings(secret_key=b"hunter2"))


def test_configure_logging():
    try:
        configure_logging("debug")
        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()


@pytest.mark.parametrize("value", ["verbose", "trace", "notset", "warn"])
def test_settings_from_env_rejects_unknown_log_level(monkeypatch, value):
    monkeypatch.setenv("PKG_JWT_SECRET_KEY", "s3cr3t")
    monkeypatch.setenv("PKG_JWT_LOG_LEVEL", value)

    with pytest.raises(RuntimeError, match="PKG_JWT_LOG_LEVEL"):
        settings_from_env()


def test_configure_logging_applies_level_to_root_logger():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("warning")
        assert root.level == logging.WARNING

        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
        structlog.reset_defaults()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="verbose"):
        configure_logging("verbose")
