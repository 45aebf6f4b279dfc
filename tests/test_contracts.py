import pytest
from paramconf.config.contracts import ProvidedDBConfig, get_db_config
from paramconf.config.providers import (
    ParameterStoreConfigProvider,
    ProvidedConfigValue,
    ReloadableParameterStoreConfigProvider,
    StaticConfigProvider,
)
from paramconf.config.value_provider import ValueProvider
from paramconf.core.errors import ProvidedConfigError


@pytest.fixture
def value_provider(api, ssm):
    ssm.parameters = {
        "/db/username": "app",
        "/db/password": "hunter2",
        "/db/url": "db.internal",
        "/db/replica": "replica.internal",
    }
    return ValueProvider(
        [
            ParameterStoreConfigProvider(api),
            ReloadableParameterStoreConfigProvider(api),
            StaticConfigProvider(),
        ]
    )


def db_config(**overrides) -> ProvidedDBConfig:
    fields = dict(
        username=ProvidedConfigValue("ParameterStore", "/db/username"),
        password=ProvidedConfigValue("ReloadableParameterStore", "/db/password", True),
        url=ProvidedConfigValue("ParameterStore", "/db/url"),
        port=ProvidedConfigValue("Static", "5432"),
        database="orders",
    )
    fields.update(overrides)
    return ProvidedDBConfig(**fields)


@pytest.mark.asyncio
async def test_resolves_db_config(value_provider):
    config = db_config(
        read_replica_url=ProvidedConfigValue("ParameterStore", "/db/replica"),
        read_replica_port=ProvidedConfigValue("Static", "5433"),
    )
    value_provider.register_all(config)

    resolved = await get_db_config(config, value_provider)

    assert resolved.username == "app"
    assert resolved.password == "hunter2"
    assert resolved.url == "db.internal"
    assert resolved.port == 5432
    assert resolved.read_replica_url == "replica.internal"
    assert resolved.read_replica_port == 5433
    assert resolved.use_ssl is True
    assert "hunter2" not in repr(resolved)


@pytest.mark.asyncio
async def test_optional_replica_fields(value_provider):
    resolved = await get_db_config(db_config(), value_provider)

    assert resolved.read_replica_url is None
    assert resolved.read_replica_port is None


@pytest.mark.asyncio
async def test_missing_required_value_raises(value_provider):
    config = db_config(url=ProvidedConfigValue("ParameterStore", "/db/missing"))

    with pytest.raises(ProvidedConfigError):
        await get_db_config(config, value_provider)


@pytest.mark.asyncio
async def test_reloadable_without_value_raises(value_provider):
    config = db_config(
        password=ProvidedConfigValue("ReloadableParameterStore", "/db/rotating", True)
    )

    with pytest.raises(ProvidedConfigError):
        await get_db_config(config, value_provider)
