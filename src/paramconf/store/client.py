"""
Parameter Store access layer.

Wraps an async SSM client (aiobotocore, as handed out by ``aioboto3``) with
the paging, chunking and retry rules the remote store needs. No values are
cached here; caching lives in the config providers.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable
from typing import Any

import structlog
from botocore.exceptions import ClientError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from paramconf.core.errors import ItemNotFound
from paramconf.logging import sanitize_parameter_name

logger = structlog.get_logger()

# GetParameters accepts at most 10 names per call
GET_PARAMETERS_CHUNK_SIZE = 10
MAX_CONCURRENT_CHUNKS = 10

PARAMETER_NOT_FOUND = "ParameterNotFound"


def is_parameter_not_found(exc: BaseException) -> bool:
    """Whether ``exc`` is the store telling us the parameter does not exist."""
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code") == PARAMETER_NOT_FOUND
    return False


def grouped(items: Iterable[str], size: int) -> list[list[str]]:
    """Split ``items`` into consecutive groups of at most ``size``."""
    if size < 1:
        raise ValueError("Group size must be positive")
    items = list(items)
    return [items[i : i + size] for i in range(0, len(items), size)]


class ParameterStoreApi:
    """Parameter Store operations over an async SSM client."""

    def __init__(
        self,
        ssm: Any,
        *,
        max_concurrent_chunks: int = MAX_CONCURRENT_CHUNKS,
        max_attempts: int = 10,
        backoff_multiplier: float = 2.0,
        backoff_min: float = 1.0,
        backoff_max: float = 30.0,
    ) -> None:
        if max_concurrent_chunks < 1:
            raise ValueError("max_concurrent_chunks must be positive")
        self._ssm = ssm
        self._max_concurrent_chunks = max_concurrent_chunks
        self._max_attempts = max_attempts
        self._backoff_multiplier = backoff_multiplier
        self._backoff_min = backoff_min
        self._backoff_max = backoff_max

    @property
    def max_concurrent_chunks(self) -> int:
        return self._max_concurrent_chunks

    async def list_parameters(self) -> AsyncIterator[str]:
        """Yield every parameter name, one page at a time."""
        next_token: str | None = None
        while True:
            request: dict[str, Any] = {}
            if next_token:
                request["NextToken"] = next_token

            described = await self._ssm.describe_parameters(**request)

            for parameter in described.get("Parameters") or []:
                name = parameter.get("Name")
                if name:
                    yield name

            next_token = described.get("NextToken")
            if not next_token:
                return

    async def get_parameters(self, names: Iterable[str]) -> dict[str, str]:
        """Fetch many parameters (decrypted) in chunks of 10.

        At most ``max_concurrent_chunks`` GetParameters calls are in flight at
        once. Names the store does not know are absent from the result.
        """
        names = list(dict.fromkeys(names))
        result: dict[str, str] = {}

        if not names:
            return result

        limiter = asyncio.Semaphore(self._max_concurrent_chunks)

        async def fetch_chunk(chunk: list[str]) -> None:
            async with limiter:
                response = await self._retrying(
                    self._ssm.get_parameters,
                    description=f"chunk of {len(chunk)}",
                    Names=chunk,
                    WithDecryption=True,
                )

            for parameter in response.get("Parameters") or []:
                name = parameter.get("Name")
                value = parameter.get("Value")
                if name and value:
                    result[name] = value

        chunks = grouped(names, GET_PARAMETERS_CHUNK_SIZE)
        logger.debug("parameter_bulk_fetch", keys=len(names), chunks=len(chunks))

        await asyncio.gather(*(fetch_chunk(chunk) for chunk in chunks))

        return result

    async def get_parameter(self, name: str, with_decrypt: bool = False) -> str:
        """Load a single parameter value, decrypting if requested.

        Decryption requires the caller's role to have access to the KMS key.

        Raises:
            ItemNotFound: the parameter does not exist. This is not retried.
        """
        response = await self._retrying(
            self._ssm.get_parameter,
            description=sanitize_parameter_name(name, with_decrypt),
            Name=name,
            WithDecryption=with_decrypt,
        )
        parameter = response.get("Parameter") or {}
        return parameter.get("Value") or ""

    async def get_parameter_safe(self, name: str, with_decrypt: bool = False) -> str | None:
        """Like ``get_parameter`` but a missing parameter resolves to ``None``."""
        try:
            return await self.get_parameter(name, with_decrypt)
        except ItemNotFound:
            return None

    async def set_parameter(self, name: str, value: str, encrypt: bool) -> None:
        """Save a value, overwriting any existing parameter of the same name."""
        await self._ssm.put_parameter(
            Name=name,
            Value=value,
            Overwrite=True,
            Type="SecureString" if encrypt else "String",
        )

    async def _retrying(self, call: Any, *, description: str, **kwargs: Any) -> dict[str, Any]:
        """Invoke ``call`` with capped exponential backoff.

        A ParameterNotFound response is translated to ItemNotFound and stops
        the loop immediately. Everything else is retried until the attempt
        budget is exhausted, then re-raised unchanged.
        """

        def log_retry(retry_state: RetryCallState) -> None:
            exc = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                "parameter_fetch_retry",
                parameter=description,
                attempt=retry_state.attempt_number,
                error=type(exc).__name__ if exc else None,
            )

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(Exception) & retry_if_not_exception_type(ItemNotFound),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(
                multiplier=self._backoff_multiplier,
                min=self._backoff_min,
                max=self._backoff_max,
            ),
            before_sleep=log_retry,
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                try:
                    return await call(**kwargs)
                except ClientError as exc:
                    if is_parameter_not_found(exc):
                        raise ItemNotFound(kwargs.get("Name", description)) from exc
                    raise
        raise AssertionError("unreachable")  # pragma: no cover
