"""Application configuration classes."""

from __future__ import annotations

import os

SUPPORTED_RATE_PROVIDERS = {"ecb", "european_central_bank", "mock"}
PROVIDER_ALIASES = {"european_central_bank": "ecb"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _optional_float(raw: str) -> float | None:
    raw = raw.strip()
    return float(raw) if raw else None


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "ecb-rates"
    SECRET_KEY = _get_env("SECRET_KEY", "change-me")
    FX_RATE_PROVIDER = _get_env("FX_RATE_PROVIDER", "ecb")
    ECB_RATES_BASE_URL = _get_env(
        "ECB_RATES_BASE_URL", "https://www.ecb.europa.eu/stats/eurofxref"
    )
    ECB_LATEST_PATH = _get_env("ECB_LATEST_PATH", "eurofxref-daily.xml")
    ECB_RECENT_PATH = _get_env("ECB_RECENT_PATH", "eurofxref-hist-90d.xml")
    ECB_FULL_PATH = _get_env("ECB_FULL_PATH", "eurofxref-hist.xml")
    # Empty means no timeout: the requests default is used.
    REQUEST_TIMEOUT_SECONDS: float | None = _optional_float(_get_env("REQUEST_TIMEOUT_SECONDS", ""))
    ECB_MAX_RETRIES = int(_get_env("ECB_MAX_RETRIES", "1"))
    ECB_BACKOFF_SECONDS = float(_get_env("ECB_BACKOFF_SECONDS", "0.5"))
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON_ENABLED = _get_env("LOG_JSON_ENABLED", "false").lower() == "true"
    LOG_FORMAT = _get_env("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")


class DevelopmentConfig(BaseConfig):
    """Configuration for local development."""

    DEBUG = True
    TESTING = False


class ProductionConfig(BaseConfig):
    """Configuration for production deployments."""

    DEBUG = False
    TESTING = False


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}


def get_config(config_name: str | None = None) -> type[BaseConfig]:
    """Return the config class for the requested environment.

    Args:
        config_name: Optional explicit config identifier. If omitted, the
            APP_ENV environment variable is consulted.

    Raises:
        KeyError: If the requested configuration is not defined.
        ValueError: If FX_RATE_PROVIDER names an unsupported provider.
    """

    env_candidate = config_name if config_name is not None else os.getenv("APP_ENV", "development")
    env_name = (env_candidate or "development").lower()
    try:
        config_cls = CONFIG_BY_ENV[env_name]
    except KeyError as exc:
        raise KeyError(f"Unknown APP_ENV '{env_name}'") from exc

    _validate_provider(config_cls)
    return config_cls


def config_as_dict(config_cls: type[BaseConfig] | None = None) -> dict[str, object]:
    """Flatten the upper-case settings of a config class into a mapping."""

    source = config_cls or BaseConfig
    return {name: getattr(source, name) for name in dir(source) if name.isupper()}


def _validate_provider(config_cls: type[BaseConfig]) -> None:
    normalized = normalize_provider(config_cls.FX_RATE_PROVIDER)
    if normalized not in SUPPORTED_RATE_PROVIDERS:
        raise ValueError(
            f"Unsupported FX_RATE_PROVIDER '{config_cls.FX_RATE_PROVIDER}'. "
            f"Allowed values: {sorted(SUPPORTED_RATE_PROVIDERS)}"
        )
    config_cls.FX_RATE_PROVIDER = normalized


def normalize_provider(value: str | None) -> str:
    if not value:
        return ""
    normalized = value.lower()
    return PROVIDER_ALIASES.get(normalized, normalized)
