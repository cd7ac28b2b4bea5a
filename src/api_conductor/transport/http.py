# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Default transport built on ``httpx.AsyncClient``.

The scheduler and the identity only depend on ``TransportProtocol``; this
module provides the implementation used when no transport is injected.
"""

import logging
from collections.abc import Mapping
from types import TracebackType

import httpx
from typing_extensions import Self

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpxTransport:
    """
    Transport that performs calls with a shared ``httpx.AsyncClient``.

    The client is created lazily unless one is supplied. Clients created here
    are closed by ``aclose()`` or when leaving the async context; supplied
    clients are left open for their owner to close.

    Example:
        >>> async with HttpxTransport(timeout=10.0) as transport:
        ...     api = ApiBuilder(ApiConfig(host="https://api.example.com"), transport)
        ...     response = await api.get("/status")
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: str | bytes | None = None,
    ) -> httpx.Response:
        logger.debug(f"{method} {url}")
        return await self.client.request(
            method, url, headers=dict(headers), content=body
        )

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["DEFAULT_TIMEOUT", "HttpxTransport"]
