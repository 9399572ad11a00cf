from __future__ import annotations

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, module",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        (" test ", "config.testing"),
        ("dev", "config.development"),
        ("staging", "config.development"),
        ("", "config.development"),
    ],
)
def test_env_names_map_to_settings_modules(env, module):
    assert get_settings_module(env) == module


def test_app_env_is_read_when_no_name_given(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
