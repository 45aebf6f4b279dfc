from __future__ import annotations

from paramconf.config.providers.base import ProvidedConfigValue, ProviderType


class StaticConfigProvider:
    """Returns the descriptor's own value; used for values that are not indirections."""

    type: str = ProviderType.STATIC

    def register(self, value: ProvidedConfigValue) -> None:
        pass

    async def get(self, provided_config: ProvidedConfigValue) -> str | None:
        return provided_config.value
