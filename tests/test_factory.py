"""Tests for factory.py."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from paramconf.config.settings import Settings
from paramconf.factory import default_value_provider, open_parameter_store_api
from paramconf.store.client import ParameterStoreApi


def mock_session(client):
    session = MagicMock()
    session.client = MagicMock(
        return_value=AsyncMock(
            __aenter__=AsyncMock(return_value=client),
            __aexit__=AsyncMock(return_value=None),
        )
    )
    return session


@pytest.mark.asyncio
async def test_open_parameter_store_api_uses_settings():
    client = AsyncMock()
    client.get_parameter = AsyncMock(return_value={"Parameter": {"Value": "v"}})
    session = mock_session(client)
    settings = Settings(aws_endpoint_url="http://localhost:4566", max_concurrent_chunks=4)

    async with open_parameter_store_api(settings, session=session) as api:
        assert isinstance(api, ParameterStoreApi)
        assert api.max_concurrent_chunks == 4
        assert await api.get_parameter("/a") == "v"

    session.client.assert_called_once_with("ssm", endpoint_url="http://localhost:4566")


@pytest.mark.asyncio
@patch("paramconf.factory.aioboto3.Session")
async def test_open_parameter_store_api_creates_session(mock_session_class):
    mock_session_class.return_value = mock_session(AsyncMock())
    settings = Settings(aws_region="eu-west-1", aws_profile="ops")

    async with open_parameter_store_api(settings):
        pass

    mock_session_class.assert_called_once_with(region_name="eu-west-1", profile_name="ops")


def test_default_value_provider_builds_all_providers():
    api = ParameterStoreApi(AsyncMock())
    settings = Settings(reload_jitter_base=1.0, reload_jitter_spread=0.5)

    provider = default_value_provider(api, settings)

    assert [p.type for p in provider.providers] == [
        "ParameterStore",
        "ReloadableParameterStore",
        "Static",
    ]
    reloadable = provider.providers[1]
    assert reloadable._jitter.base == 1.0
    assert reloadable._jitter.spread == 0.5
