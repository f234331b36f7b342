"""Settings modules, selected by the APP_ENV environment variable."""

import os

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module(env: str = None) -> str:
    """Dotted path of the settings module; unknown names fall back to development."""
    name = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return f"config.{_ENV_ALIASES.get(name, 'development')}"
