from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Literal

import structlog

from paramconf.config.providers.base import ProvidedConfigValue, ProviderType
from paramconf.core.jitter import DEFAULT_RELOAD_JITTER, Jitter
from paramconf.core.lazy import Lazy
from paramconf.store.client import ParameterStoreApi

logger = structlog.get_logger()


class ReloadableValue:
    """A provided value that can be refreshed without re-registering.

    ``get`` never does I/O. ``reload`` sleeps a jittered delay (unless
    ``auto_jitter`` is False) so that many processes reloading on the same
    schedule do not hit the store at the same instant, then fetches again.

    Overlapping reloads are not coalesced. Each reload takes a ticket when it
    is issued and only overwrites the held value if no later-issued reload has
    already done so; concurrent reloads settle on the newest-issued result.
    """

    type: Literal["ReloadableProvidedValue"] = "ReloadableProvidedValue"

    def __init__(
        self,
        initial_value: str | None,
        reload_fn: Callable[[], Awaitable[str | None]],
        *,
        jitter: Jitter = DEFAULT_RELOAD_JITTER,
    ) -> None:
        self._value = initial_value
        self._reload_fn = reload_fn
        self._jitter = jitter
        self._issued = 0
        self._applied = 0

    def get(self) -> str | None:
        return self._value

    async def reload(self, auto_jitter: bool = True) -> str | None:
        self._issued += 1
        ticket = self._issued

        if auto_jitter:
            await asyncio.sleep(self._jitter.sample())

        new_value = await self._reload_fn()

        if ticket > self._applied:
            self._value = new_value
            self._applied = ticket
        else:
            logger.debug("reload_superseded", ticket=ticket, applied=self._applied)
        return new_value

    def __repr__(self) -> str:
        state = "unset" if self._value is None else "set"
        return f"ReloadableValue({state})"


class ReloadableParameterStoreConfigProvider:
    """Like ``ParameterStoreConfigProvider`` but hands out ``ReloadableValue`` wrappers.

    Every registered key gets a wrapper from the bulk fetch, including keys the
    store did not have yet; those start out as ``None`` and pick up a value on
    reload.
    A failed bulk fetch is not kept either; the next ``get`` tries it again.
    """

    type: str = ProviderType.RELOADABLE_PARAMETER_STORE

    def __init__(
        self,
        parameter_store: ParameterStoreApi,
        *,
        jitter: Jitter = DEFAULT_RELOAD_JITTER,
    ) -> None:
        self._parameter_store = parameter_store
        self._jitter = jitter
        self._keys: dict[str, ProvidedConfigValue] = {}
        self.resolver: Lazy[dict[str, ReloadableValue]] = Lazy(self._load_registered)

    def register(self, value: ProvidedConfigValue) -> None:
        self._keys[value.value] = value

    @property
    def registered(self) -> dict[str, ProvidedConfigValue]:
        return dict(self._keys)

    def _reloader(self, key: str, with_decrypt: bool) -> Callable[[], Awaitable[str | None]]:
        async def reload() -> str | None:
            return await self._parameter_store.get_parameter_safe(key, with_decrypt)

        return reload

    async def _load_registered(self) -> dict[str, ReloadableValue]:
        keys = list(self._keys)
        found = await self._parameter_store.get_parameters(keys)
        logger.debug("reloadable_parameters_preloaded", registered=len(keys), found=len(found))

        # bulk fetch always decrypts, so reloads do too
        return {
            key: ReloadableValue(found.get(key), self._reloader(key, True), jitter=self._jitter)
            for key in keys
        }

    async def get(self, provided_config: ProvidedConfigValue) -> ReloadableValue:
        loaded = await self.resolver()

        existing = loaded.get(provided_config.value)
        if existing is not None:
            return existing

        reload_fn = self._reloader(provided_config.value, provided_config.sensitive)
        return ReloadableValue(await reload_fn(), reload_fn, jitter=self._jitter)
