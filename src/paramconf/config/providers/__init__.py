from paramconf.config.providers.base import (
    ConfigProvider,
    ProvidedConfigValue,
    ProviderType,
    ReloadableProvidedValue,
    ResolvedValue,
    is_provided_config_value,
)
from paramconf.config.providers.parameter_store import ParameterStoreConfigProvider
from paramconf.config.providers.reloadable import (
    ReloadableParameterStoreConfigProvider,
    ReloadableValue,
)
from paramconf.config.providers.static import StaticConfigProvider

__all__ = [
    "ConfigProvider",
    "ParameterStoreConfigProvider",
    "ProvidedConfigValue",
    "ProviderType",
    "ReloadableParameterStoreConfigProvider",
    "ReloadableProvidedValue",
    "ReloadableValue",
    "ResolvedValue",
    "StaticConfigProvider",
    "is_provided_config_value",
]
