"""
Loading of provided value declarations.

A declarations file is plain YAML, one per environment
(``<directory>/<env>.yaml``), the environment defaulting to
``PARAMCONF_ENVIRONMENT``. Mapping nodes carrying ``providerType`` and
``value`` become ``ProvidedConfigValue`` instances; everything else is kept
as is. No schema is applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from paramconf.config.providers.base import ProvidedConfigValue, is_provided_config_value
from paramconf.config.settings import get_settings

logger = structlog.get_logger()


def declarations_path(directory: str | Path, env: str) -> Path:
    return Path(directory) / f"{env}.yaml"


def _convert(node: Any) -> Any:
    if is_provided_config_value(node):
        if isinstance(node, ProvidedConfigValue):
            return node
        return ProvidedConfigValue.from_mapping(node)
    if isinstance(node, Mapping):
        return {key: _convert(value) for key, value in node.items()}
    return node


def load_declarations(
    source: str | Path | Mapping[str, Any] = "config",
    env: str | None = None,
) -> dict[str, Any]:
    """
    Load config declarations for ``env``.

    Args:
        source: Directory holding ``<env>.yaml`` files, or an already loaded mapping
        env: Environment name, defaults to ``Settings.environment``

    Returns:
        Nested dict with descriptor nodes converted to ProvidedConfigValue
    """
    env = env or get_settings().environment

    if isinstance(source, Mapping):
        data: Any = source
    else:
        path = declarations_path(source, env)
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("declarations_file_unavailable", file=str(path), error=str(e))
            data = {}

    if not isinstance(data, Mapping):
        logger.warning("declarations_not_a_mapping", env=env, type=type(data).__name__)
        data = {}

    loaded = _convert(data)
    logger.info("loaded_declarations", env=env)
    return loaded
