import logging

from xorpng.app.diagnostics import LOG_LEVEL_ENV_VAR, resolve_log_level


def test_default_level_is_warning(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert resolve_log_level() == logging.WARNING


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_log_level() == logging.INFO


def test_unknown_level_falls_back(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    assert resolve_log_level() == logging.WARNING


def test_verbose_overrides_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    assert resolve_log_level(verbose=True) == logging.DEBUG
