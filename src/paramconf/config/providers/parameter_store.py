from __future__ import annotations

import structlog

from paramconf.config.providers.base import ProvidedConfigValue, ProviderType
from paramconf.core.lazy import Lazy
from paramconf.store.client import ParameterStoreApi

logger = structlog.get_logger()


class ParameterStoreConfigProvider:
    """Resolves parameter store keys, batching everything registered up front.

    The first ``get`` loads every key registered so far with one bulk fetch
    (N/10 remote calls instead of N). Keys registered after that are not added
    to the batch; they, and keys the store did not have at batch time, are
    fetched one by one.

    Only a successful bulk fetch is kept. If it fails, every caller waiting on
    it gets the error and the next ``get`` runs the bulk fetch again.
    """

    type: str = ProviderType.PARAMETER_STORE

    def __init__(self, parameter_store: ParameterStoreApi) -> None:
        self._parameter_store = parameter_store
        self._keys: dict[str, ProvidedConfigValue] = {}
        self.resolver: Lazy[dict[str, str | None]] = Lazy(self._load_registered)

    def register(self, value: ProvidedConfigValue) -> None:
        self._keys[value.value] = value

    @property
    def registered(self) -> dict[str, ProvidedConfigValue]:
        return dict(self._keys)

    async def _load_registered(self) -> dict[str, str | None]:
        keys = list(self._keys)
        found = await self._parameter_store.get_parameters(keys)
        logger.debug("parameter_store_preloaded", registered=len(keys), found=len(found))
        # None marks "fetched, not in the store"; a missing key was never fetched
        return {key: found.get(key) for key in keys}

    async def get(self, provided_config: ProvidedConfigValue) -> str | None:
        loaded = await self.resolver()

        value = loaded.get(provided_config.value)
        if value is not None:
            return value

        return await self._parameter_store.get_parameter_safe(
            provided_config.value, provided_config.sensitive
        )
