"""Registry and factory for reference rate providers."""

from __future__ import annotations

import os
from typing import Callable, Dict, Iterable, List

from config import normalize_provider

from .base import BaseRateProvider, ProviderError

ProviderFactory = Callable[[], BaseRateProvider]

_PROVIDER_FACTORIES: Dict[str, ProviderFactory] = {}


def _default_factories() -> Iterable[tuple[str, ProviderFactory]]:
    from flask import current_app, has_app_context

    from config import config_as_dict

    from .ecb_provider import ECBRateProvider
    from .mock import MockRateProvider

    def ecb_factory() -> ECBRateProvider:
        config = current_app.config if has_app_context() else config_as_dict()
        return ECBRateProvider.from_config(config)

    return [
        (MockRateProvider.name, MockRateProvider),
        (ECBRateProvider.name, ecb_factory),
    ]


def register_provider(name: str, factory: ProviderFactory) -> None:
    """Register a provider factory under the given name."""

    if not name:
        raise ValueError("Provider name cannot be empty.")
    normalized = name.lower()
    _PROVIDER_FACTORIES[normalized] = factory


def unregister_provider(name: str) -> None:
    """Remove a provider factory; primarily for testing."""

    _PROVIDER_FACTORIES.pop(name.lower(), None)


def list_providers() -> List[str]:
    """Return the list of registered provider identifiers."""

    return sorted(_PROVIDER_FACTORIES.keys())


def _resolve_name(name: str | None = None) -> str:
    return normalize_provider(name or os.getenv("FX_RATE_PROVIDER") or "ecb")


def get_provider(name: str | None = None) -> BaseRateProvider:
    """Instantiate a provider using the supplied or configured name."""

    provider_name = _resolve_name(name)
    try:
        factory = _PROVIDER_FACTORIES[provider_name]
    except KeyError as exc:
        available = ", ".join(list_providers()) or "none registered"
        raise ProviderError(
            f"Unknown provider '{provider_name}'. Available providers: {available}"
        ) from exc
    return factory()


def init_provider(app) -> BaseRateProvider:
    """Attach the configured provider to the Flask app."""

    with app.app_context():
        provider = get_provider(app.config.get("FX_RATE_PROVIDER"))
    app.extensions["rate_provider"] = provider
    return provider


def reset_registry(default_factories: Iterable[tuple[str, ProviderFactory]] | None = None) -> None:
    """Reset provider registry; useful for tests."""

    _PROVIDER_FACTORIES.clear()

    factories = default_factories or _default_factories()
    for name, factory in factories:
        register_provider(name, factory)


reset_registry()
