import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        (" test ", "config.testing"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_by_name(env, expected):
    assert get_settings_module(env) == expected


def test_settings_module_reads_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"
