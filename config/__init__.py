import os
from typing import Optional

DEFAULT_ENV = "development"

# Accepted APP_ENV spellings -> settings module under config/
ENVIRONMENTS = {
    "dev": "development",
    "development": "development",
    "local": "development",
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted path of the settings module for `env` (APP_ENV when omitted).

    Unknown or empty names fall back to development.
    """
    if env is None:
        env = os.getenv("APP_ENV", DEFAULT_ENV)
    name = ENVIRONMENTS.get(env.strip().lower(), DEFAULT_ENV)
    return f"config.{name}"
