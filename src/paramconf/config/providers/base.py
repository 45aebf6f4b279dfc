"""Descriptor and provider contracts for provided configuration values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal, Protocol, runtime_checkable


class ProviderType(StrEnum):
    """Built-in provider types."""

    STATIC = "Static"
    PARAMETER_STORE = "ParameterStore"
    RELOADABLE_PARAMETER_STORE = "ReloadableParameterStore"


@dataclass(frozen=True)
class ProvidedConfigValue:
    """A configuration value to be resolved by a ``ConfigProvider``.

    ``provider_type`` picks the provider. ``value`` is what that provider
    resolves: a parameter name for the parameter store providers, or the
    literal config value for the static provider.
    """

    provider_type: str
    value: str
    sensitive: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProvidedConfigValue":
        provider_type = data.get("providerType", data.get("provider_type"))
        value = data.get("value")
        if not provider_type or value is None:
            raise ValueError("Provided config value requires providerType and value")
        return cls(
            provider_type=str(provider_type),
            value=str(value),
            sensitive=bool(data.get("sensitive", False)),
        )


def is_provided_config_value(obj: Any) -> bool:
    """Whether ``obj`` is, or is shaped like, a provided config value."""
    if isinstance(obj, ProvidedConfigValue):
        return True
    if isinstance(obj, Mapping):
        provider_type = obj.get("providerType", obj.get("provider_type"))
        return bool(provider_type) and isinstance(provider_type, str) and bool(obj.get("value"))
    return False


@runtime_checkable
class ReloadableProvidedValue(Protocol):
    """A provided value that can be refreshed in place, e.g. a rotating token."""

    type: Literal["ReloadableProvidedValue"]

    def get(self) -> str | None:
        """Current value, without I/O."""
        ...

    async def reload(self, auto_jitter: bool = True) -> str | None:
        """Fetch the value again, store it and return it."""
        ...


ResolvedValue = str | ReloadableProvidedValue | None


class ConfigProvider(Protocol):
    """Resolves descriptors whose ``provider_type`` equals ``type``."""

    type: str

    def register(self, value: ProvidedConfigValue) -> None:
        ...

    async def get(self, provided_config: ProvidedConfigValue) -> ResolvedValue:
        ...
