"""Tests for config/loader.py."""

import pytest
import yaml
from paramconf.config.loader import declarations_path, load_declarations
from paramconf.config.providers import ProvidedConfigValue
from paramconf.config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("PARAMCONF_ENVIRONMENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def declarations_dir(tmp_path):
    data = {
        "db": {
            "password": {
                "providerType": "ParameterStore",
                "value": "/prod/db/password",
                "sensitive": True,
            },
            "port": {"providerType": "Static", "value": 5432},
            "database": "orders",
        },
        "features": ["a", "b"],
    }
    (tmp_path / "prod.yaml").write_text(yaml.dump(data))
    return tmp_path


def test_declarations_path(tmp_path):
    assert declarations_path(tmp_path, "prod") == tmp_path / "prod.yaml"


def test_loads_environment_file(declarations_dir):
    config = load_declarations(declarations_dir, "prod")

    assert config["db"]["password"] == ProvidedConfigValue(
        "ParameterStore", "/prod/db/password", True
    )
    assert config["db"]["port"] == ProvidedConfigValue("Static", "5432")
    assert config["db"]["database"] == "orders"
    assert config["features"] == ["a", "b"]


def test_missing_file_yields_empty(tmp_path):
    assert load_declarations(tmp_path, "staging") == {}


def test_defaults_to_local_env(tmp_path):
    (tmp_path / "local.yaml").write_text("name: local-app\n")

    assert load_declarations(tmp_path) == {"name": "local-app"}


def test_default_env_comes_from_settings(tmp_path, monkeypatch):
    (tmp_path / "local.yaml").write_text("name: local-app\n")
    (tmp_path / "staging.yaml").write_text("name: staging-app\n")
    monkeypatch.setenv("PARAMCONF_ENVIRONMENT", "staging")

    assert load_declarations(tmp_path) == {"name": "staging-app"}
    assert load_declarations(tmp_path, "local") == {"name": "local-app"}


def test_invalid_yaml_yields_empty(tmp_path):
    (tmp_path / "local.yaml").write_text("key: [unclosed\n")

    assert load_declarations(tmp_path) == {}


def test_non_mapping_document_yields_empty(tmp_path):
    (tmp_path / "local.yaml").write_text("- a\n- b\n")

    assert load_declarations(tmp_path) == {}


def test_mapping_source():
    config = load_declarations({"token": {"providerType": "Static", "value": "abc"}})

    assert config == {"token": ProvidedConfigValue("Static", "abc")}
