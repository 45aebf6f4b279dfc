"""
paramconf configuration system.

- Pydantic-based settings (environment variables, .env files)
- Provided config values resolved through pluggable providers
- Declaration files loaded per environment
"""

from paramconf.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
