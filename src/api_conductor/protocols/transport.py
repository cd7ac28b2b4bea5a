# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocols for the HTTP transport collaborator."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TransportResponse(Protocol):
    """
    Minimal protocol for a transport response.

    ``httpx.Response`` satisfies it, so responses returned by the default
    transport are handed to callers unchanged.
    """

    @property
    def status_code(self) -> int:
        """HTTP status code."""
        ...

    def json(self) -> Any:
        """Decode the response body as JSON."""
        ...


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Protocol for the function that performs the actual HTTP call.

    The library never opens connections itself; it only calls this
    capability with a fully built URL, method, headers and serialized body.
    """

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: str | bytes | None = None,
    ) -> TransportResponse:
        """Perform one HTTP call and return its response."""
        ...
