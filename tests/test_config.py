from pathlib import Path

import pytest

from src.config import DEFAULT_API_URL, DEFAULT_OUTPUT_PATH, ConfigError, load_settings


def test_missing_api_key_raises():
    with pytest.raises(ConfigError, match="POLAR_API_KEY"):
        load_settings({})


def test_blank_api_key_raises():
    with pytest.raises(ConfigError):
        load_settings({"POLAR_API_KEY": "   "})


def test_defaults():
    settings = load_settings({"POLAR_API_KEY": "abc"})
    assert settings.api_key == "abc"
    assert settings.api_url == DEFAULT_API_URL
    assert settings.output_path == DEFAULT_OUTPUT_PATH
    assert settings.output_path.name == "polar-products.json"
    assert settings.category == "Font"
    assert settings.payment_processor == "stripe"
    assert settings.request_timeout is None


def test_overrides():
    settings = load_settings({
        "POLAR_API_KEY": "abc",
        "POLAR_API_URL": "https://sandbox-api.polar.sh/v1/",
        "POLAR_OUTPUT_PATH": "/tmp/x.json",
        "POLAR_REQUEST_TIMEOUT": "30",
    })
    assert settings.api_url == "https://sandbox-api.polar.sh/v1"
    assert settings.output_path == Path("/tmp/x.json")
    assert settings.request_timeout == 30.0


def test_bad_timeout_raises():
    with pytest.raises(ConfigError, match="POLAR_REQUEST_TIMEOUT"):
        load_settings({"POLAR_API_KEY": "abc", "POLAR_REQUEST_TIMEOUT": "soon"})


def test_settings_are_immutable():
    settings = load_settings({"POLAR_API_KEY": "abc"})
    with pytest.raises(AttributeError):
        settings.api_key = "other"
