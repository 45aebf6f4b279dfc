from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aioboto3

from paramconf.config.providers import (
    ParameterStoreConfigProvider,
    ReloadableParameterStoreConfigProvider,
    StaticConfigProvider,
)
from paramconf.config.settings import Settings, get_settings
from paramconf.config.value_provider import ValueProvider
from paramconf.core.jitter import Jitter
from paramconf.store.client import ParameterStoreApi


@asynccontextmanager
async def open_parameter_store_api(
    settings: Settings | None = None,
    session: aioboto3.Session | None = None,
) -> AsyncIterator[ParameterStoreApi]:
    """Open an SSM client and yield a ``ParameterStoreApi`` bound to it."""
    settings = settings or get_settings()
    session = session or aioboto3.Session(
        region_name=settings.aws_region,
        profile_name=settings.aws_profile,
    )
    async with session.client("ssm", endpoint_url=settings.aws_endpoint_url) as ssm:
        yield ParameterStoreApi(
            ssm,
            max_concurrent_chunks=settings.max_concurrent_chunks,
            max_attempts=settings.retry_max_attempts,
            backoff_multiplier=settings.retry_backoff_multiplier,
            backoff_min=settings.retry_backoff_min,
            backoff_max=settings.retry_backoff_max,
        )


def default_value_provider(
    api: ParameterStoreApi,
    settings: Settings | None = None,
) -> ValueProvider:
    """Build a ``ValueProvider`` over the parameter store and static providers."""
    settings = settings or get_settings()
    jitter = Jitter(base=settings.reload_jitter_base, spread=settings.reload_jitter_spread)
    return ValueProvider(
        [
            ParameterStoreConfigProvider(api),
            ReloadableParameterStoreConfigProvider(api, jitter=jitter),
            StaticConfigProvider(),
        ]
    )
