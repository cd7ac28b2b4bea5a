# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
API surface for api_conductor.

``ApiBuilder`` exposes one coroutine per HTTP verb. Each call becomes a
queued request handled by the builder's ``RequestScheduler``, and resolves
with the transport response once the scheduler has processed it.
"""

from typing import Any

from .protocols.transport import TransportProtocol, TransportResponse
from .scheduler.config import ApiConfig
from .scheduler.scheduler import RequestScheduler
from .types.queue import QueuedRequest
from .types.request import HttpMethod, QueryParams, coerce_body


class ApiBuilder:
    """
    Per-verb entry points over a request scheduler.

    Subclass it to describe an API:

    Example:
        >>> class UsersApi(ApiBuilder):
        ...     async def get_user(self, user_id: int) -> dict:
        ...         response = await self.get(f"/users/{user_id}", is_authenticated=True)
        ...         return response.json()
        >>>
        >>> api = UsersApi(ApiConfig(host="https://api.example.com", identity=identity))
        >>> user = await api.get_user(42)

    Every call may fail: with the transport's error, with an identity error
    for authenticated calls, with ``UnauthorizedError`` on 401, or with
    ``RequestDiscardedError`` when the identity logs out before dispatch.
    Non-2xx responses other than 401 are returned, not raised.
    """

    def __init__(
        self, config: ApiConfig, transport: TransportProtocol | None = None
    ) -> None:
        self.config = config
        self.scheduler = RequestScheduler(config, transport)

    async def get(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        query_params: QueryParams | None = None,
        is_authenticated: bool | None = None,
        is_forced: bool = False,
    ) -> TransportResponse:
        return await self._submit(
            HttpMethod.GET, path, None, headers, query_params, is_authenticated, is_forced
        )

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
        query_params: QueryParams | None = None,
        is_authenticated: bool | None = None,
        is_forced: bool = False,
    ) -> TransportResponse:
        return await self._submit(
            HttpMethod.POST, path, body, headers, query_params, is_authenticated, is_forced
        )

    async def put(
        self,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
        query_params: QueryParams | None = None,
        is_authenticated: bool | None = None,
        is_forced: bool = False,
    ) -> TransportResponse:
        return await self._submit(
            HttpMethod.PUT, path, body, headers, query_params, is_authenticated, is_forced
        )

    async def patch(
        self,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
        query_params: QueryParams | None = None,
        is_authenticated: bool | None = None,
        is_forced: bool = False,
    ) -> TransportResponse:
        return await self._submit(
            HttpMethod.PATCH, path, body, headers, query_params, is_authenticated, is_forced
        )

    async def delete(
        self,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
        query_params: QueryParams | None = None,
        is_authenticated: bool | None = None,
        is_forced: bool = False,
    ) -> TransportResponse:
        return await self._submit(
            HttpMethod.DELETE, path, body, headers, query_params, is_authenticated, is_forced
        )

    async def _submit(
        self,
        method: HttpMethod,
        path: str,
        body: Any,
        headers: dict[str, str] | None,
        query_params: QueryParams | None,
        is_authenticated: bool | None,
        is_forced: bool,
    ) -> TransportResponse:
        request = QueuedRequest(
            method=method,
            path=path,
            body=coerce_body(body),
            headers=dict(headers) if headers else None,
            is_authenticated=(
                self.config.default_auth_required
                if is_authenticated is None
                else is_authenticated
            ),
            is_forced=is_forced,
            query_params=query_params,
        )
        response: TransportResponse = await self.scheduler.enqueue(request)
        return response


__all__ = ["ApiBuilder"]
