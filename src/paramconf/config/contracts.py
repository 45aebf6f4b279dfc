from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Literal

from paramconf.config.providers.base import (
    ProvidedConfigValue,
    ProviderType,
    ReloadableProvidedValue,
)
from paramconf.config.value_provider import ValueProvider
from paramconf.core.errors import ProvidedConfigError


@dataclass(frozen=True)
class ProvidedDBConfig:
    """Database connection settings whose secrets come from providers."""

    username: ProvidedConfigValue
    password: ProvidedConfigValue
    url: ProvidedConfigValue
    port: ProvidedConfigValue
    database: str
    type: Literal["mysql", "postgresql", "sqlite"] = "postgresql"
    use_ssl: bool = True
    read_replica_url: ProvidedConfigValue | None = None
    read_replica_port: ProvidedConfigValue | None = None


@dataclass(frozen=True, repr=False)
class DBConfig:
    username: str
    password: str
    url: str
    port: int
    database: str
    type: str
    use_ssl: bool
    read_replica_url: str | None = None
    read_replica_port: int | None = None

    def __repr__(self) -> str:
        return (
            f"DBConfig(username={self.username!r}, password='***', url={self.url!r}, "
            f"port={self.port}, database={self.database!r})"
        )


def _as_text(value: object) -> str:
    if isinstance(value, ReloadableProvidedValue):
        current = value.get()
        if current is None:
            raise ProvidedConfigError(
                ProviderType.RELOADABLE_PARAMETER_STORE,
                "Reloadable config value has no current value",
            )
        return current
    return str(value)


async def _required(value_provider: ValueProvider, config: ProvidedConfigValue) -> str:
    return _as_text(await value_provider.get_value(config))


async def _optional(
    value_provider: ValueProvider, config: ProvidedConfigValue | None
) -> str | None:
    if config is None:
        return None
    return _as_text(await value_provider.get_value(config))


async def get_db_config(config: ProvidedDBConfig, value_provider: ValueProvider) -> DBConfig:
    """Resolve every provided field of ``config`` concurrently."""
    username, password, url, port, replica_url, replica_port = await asyncio.gather(
        _required(value_provider, config.username),
        _required(value_provider, config.password),
        _required(value_provider, config.url),
        _required(value_provider, config.port),
        _optional(value_provider, config.read_replica_url),
        _optional(value_provider, config.read_replica_port),
    )

    return DBConfig(
        username=username,
        password=password,
        url=url,
        port=int(port),
        database=config.database,
        type=config.type,
        use_ssl=config.use_ssl,
        read_replica_url=replica_url,
        read_replica_port=int(replica_port) if replica_port is not None else None,
    )
