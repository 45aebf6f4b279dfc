"""
Error types shared by the store client and the config providers.

- ItemNotFound: the parameter does not exist. Never retried.
- ConfigurationError: a descriptor or provider set is misconfigured.
- ProvidedConfigError: a strict lookup resolved to no value.

Any other failure from the remote store is transient and propagates unchanged
once the retry budget is spent.
"""

from __future__ import annotations

from typing import Any


class ParamConfError(Exception):
    """Base exception for paramconf errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ParamConfError):
    """Raised for configuration-related errors."""


class ItemNotFound(ParamConfError):
    """Raised when a parameter does not exist in the remote store."""

    def __init__(self, parameter: str, message: str | None = None):
        super().__init__(
            message or f"Parameter Store key '{parameter}' not found",
            details={"parameter": parameter},
        )
        self.parameter = parameter


class ProvidedConfigError(ParamConfError):
    """Raised when a provided config value cannot be resolved."""

    def __init__(self, provider_type: str, message: str | None = None, **details: Any):
        super().__init__(
            message or f"Unable to provide config value using provider '{provider_type}'",
            details={"provider_type": provider_type, **details},
        )
        self.provider_type = provider_type


def format_error_message(error: ParamConfError) -> str:
    """Format an error message including its details."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
