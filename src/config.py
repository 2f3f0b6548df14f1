"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_API_URL = "https://api.polar.sh/v1"
DEFAULT_OUTPUT_PATH = PROJECT_ROOT / "products" / "polar-products.json"
DEFAULT_CATEGORY = "Font"
DEFAULT_PAYMENT_PROCESSOR = "stripe"

USAGE = "Usage: POLAR_API_KEY=your_key python -m src.main"


class ConfigError(Exception):
    """Required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Immutable settings built once at startup."""

    api_key: str
    api_url: str = DEFAULT_API_URL
    output_path: Path = DEFAULT_OUTPUT_PATH
    category: str = DEFAULT_CATEGORY
    payment_processor: str = DEFAULT_PAYMENT_PROCESSOR
    request_timeout: float | None = None


def _parse_timeout(value: str | None) -> float | None:
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigError(f"POLAR_REQUEST_TIMEOUT must be a number, got {value!r}") from None
    return timeout if timeout > 0 else None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment.

    Raises ConfigError when POLAR_API_KEY is not set.
    """
    if env is None:
        env = os.environ

    api_key = env.get("POLAR_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("POLAR_API_KEY environment variable is required")

    output_path = env.get("POLAR_OUTPUT_PATH")
    return Settings(
        api_key=api_key,
        api_url=env.get("POLAR_API_URL", DEFAULT_API_URL).rstrip("/"),
        output_path=Path(output_path) if output_path else DEFAULT_OUTPUT_PATH,
        category=env.get("POLAR_PRODUCT_CATEGORY", DEFAULT_CATEGORY),
        payment_processor=env.get("POLAR_PAYMENT_PROCESSOR", DEFAULT_PAYMENT_PROCESSOR),
        request_timeout=_parse_timeout(env.get("POLAR_REQUEST_TIMEOUT")),
    )
