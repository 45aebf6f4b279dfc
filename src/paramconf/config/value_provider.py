"""
Single register/get surface over a set of config providers.

Each descriptor is routed to the one provider whose ``type`` matches its
``provider_type``. A descriptor naming a type nobody owns is a configuration
error, raised at registration so misconfiguration surfaces at startup.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from paramconf.config.providers.base import (
    ConfigProvider,
    ProvidedConfigValue,
    ResolvedValue,
    is_provided_config_value,
)
from paramconf.core.errors import (
    ConfigurationError,
    ProvidedConfigError,
    format_error_message,
)
from paramconf.logging import sanitize_parameter_name

logger = structlog.get_logger()


class ValueProvider:
    """Resolves ``ProvidedConfigValue`` descriptors through the matching provider."""

    def __init__(self, providers: Iterable[ConfigProvider]) -> None:
        self._providers: dict[str, ConfigProvider] = {}
        for provider in providers:
            if provider.type in self._providers:
                raise ConfigurationError(
                    f"Duplicate config provider type '{provider.type}'",
                    details={"provider_type": provider.type},
                )
            self._providers[provider.type] = provider

    @property
    def providers(self) -> list[ConfigProvider]:
        return list(self._providers.values())

    def provider_for(self, config: ProvidedConfigValue) -> ConfigProvider:
        provider = self._providers.get(config.provider_type)
        if provider is None:
            raise ConfigurationError(
                f"No config provider registered for type '{config.provider_type}'",
                details={
                    "provider_type": config.provider_type,
                    "known": sorted(self._providers),
                },
            )
        return provider

    def register(self, config: ProvidedConfigValue) -> None:
        self.provider_for(config).register(config)

    def register_all(self, config: Any) -> int:
        """Register every provided value found in a nested config tree.

        Walks mappings and dataclass instances; lists and scalars are skipped.
        Mapping nodes shaped like a descriptor are registered as one.

        Returns:
            Number of descriptors registered
        """
        count = 0

        if is_provided_config_value(config):
            value = (
                config
                if isinstance(config, ProvidedConfigValue)
                else ProvidedConfigValue.from_mapping(config)
            )
            self.register(value)
            return 1

        if isinstance(config, Mapping):
            children: Iterable[Any] = config.values()
        elif dataclasses.is_dataclass(config) and not isinstance(config, type):
            children = (getattr(config, f.name) for f in dataclasses.fields(config))
        else:
            return 0

        for child in children:
            count += self.register_all(child)
        return count

    async def get(self, config: ProvidedConfigValue) -> ResolvedValue:
        """Resolve a descriptor; ``None`` means the value does not exist."""
        return await self.provider_for(config).get(config)

    async def get_value(self, config: ProvidedConfigValue) -> Any:
        """Resolve a descriptor, raising if it resolves to no value.

        Raises:
            ProvidedConfigError: the provider returned no value
            ConfigurationError: no provider owns the descriptor's type
        """
        value = await self.get(config)
        if value is None:
            error = ProvidedConfigError(
                config.provider_type,
                key=sanitize_parameter_name(config.value, config.sensitive),
            )
            logger.error("provided_config_value_missing", error=format_error_message(error))
            raise error
        return value
