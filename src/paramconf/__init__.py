"""
paramconf - resolve provided configuration values from a remote parameter store.

Application code declares ``ProvidedConfigValue`` descriptors, registers them
with a ``ValueProvider`` at startup and resolves them later. Parameter store
backed providers coalesce registered lookups into one bulk fetch.
"""

from paramconf.config.providers import (
    ParameterStoreConfigProvider,
    ProvidedConfigValue,
    ProviderType,
    ReloadableParameterStoreConfigProvider,
    ReloadableValue,
    StaticConfigProvider,
)
from paramconf.config.value_provider import ValueProvider
from paramconf.core.errors import (
    ConfigurationError,
    ItemNotFound,
    ParamConfError,
    ProvidedConfigError,
)
from paramconf.factory import default_value_provider, open_parameter_store_api
from paramconf.store import ParameterStoreApi

__all__ = [
    "ConfigurationError",
    "ItemNotFound",
    "ParamConfError",
    "ParameterStoreApi",
    "ParameterStoreConfigProvider",
    "ProvidedConfigError",
    "ProvidedConfigValue",
    "ProviderType",
    "ReloadableParameterStoreConfigProvider",
    "ReloadableValue",
    "StaticConfigProvider",
    "ValueProvider",
    "default_value_provider",
    "open_parameter_store_api",
]
