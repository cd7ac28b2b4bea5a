# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request scheduler for api_conductor.

Turns queued requests into transport calls: forced requests first, the rest
in FIFO order bounded by the configured concurrency limit. Authenticated
requests are handed to the bound identity before dispatch, and a 401 answer
logs the identity out.
"""

import asyncio
import logging
from typing import Any

from ..exceptions import (
    ApiConductorError,
    ConfigurationError,
    RequestDiscardedError,
    TransportError,
    UnauthorizedError,
)
from ..notifier import IdentityEvent
from ..observability.metrics import SchedulerMetrics
from ..protocols.transport import TransportProtocol, TransportResponse
from ..transport.http import HttpxTransport
from ..types.queue import QueuedRequest
from ..types.request import encode_query_params, merge_query_params
from .config import ApiConfig
from .scope import SchedulingScope

logger = logging.getLogger(__name__)

UNAUTHORIZED_STATUS = 401


class RequestScheduler:
    """
    Admission and dispatch of queued requests.

    Admission runs after every enqueue and after every completed call, and
    keeps admitting until nothing more is admissible. Selecting a request and
    incrementing the in-flight count happen without a suspension point in
    between, and a finished call decrements the count before admission runs
    again, so concurrent drains never over-admit.

    When the bound identity emits ``logout`` the whole queue of the scope is
    discarded and every discarded request fails with
    ``RequestDiscardedError``.

    Attributes:
        config: Scheduler configuration
        transport: Transport performing the HTTP calls
        scope: Queue and in-flight counter used by this scheduler
        metrics: Request lifecycle counters
    """

    def __init__(
        self, config: ApiConfig, transport: TransportProtocol | None = None
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            config: Scheduler configuration
            transport: Transport for the HTTP calls; defaults to HttpxTransport
        """
        self.config = config
        self.transport: TransportProtocol = transport or HttpxTransport()
        self.scope = config.scope if config.scope is not None else SchedulingScope()
        self.metrics = SchedulerMetrics()
        self._active_tasks: set[asyncio.Task[None]] = set()

        if config.identity is not None:
            config.identity.add_listener(IdentityEvent.LOGOUT, self._on_identity_logout)

        logger.debug(
            f"Initialized {self.__class__.__name__} for {config.host} "
            f"(limit={config.request_queue_limit}, scope={self.scope.name})"
        )

    @property
    def queue_limit(self) -> int:
        return self.config.request_queue_limit

    @property
    def pending_count(self) -> int:
        return self.scope.pending_count

    @property
    def queue_size(self) -> int:
        return len(self.scope)

    def enqueue(self, request: QueuedRequest) -> "asyncio.Future[Any]":
        """
        Queue a request and run admission.

        Returns:
            The request's future, settled with the transport response or an
            error once the request has been processed.
        """
        self.scope.append(request, self)
        self.metrics.requests_enqueued += 1
        self._drain()
        return request.future

    def clear_queue(self) -> int:
        """
        Discard every queued request of the scope.

        In-flight requests are not affected.

        Returns:
            Number of discarded requests.
        """
        discarded = self.scope.clear()
        for request in discarded:
            request.reject(
                RequestDiscardedError(
                    f"{request.method.value} {request.path} discarded after logout"
                )
            )

        if discarded:
            self.metrics.requests_discarded += len(discarded)
            if self.config.metrics is not None:
                self.config.metrics.observe_discard(len(discarded))
            logger.warning(f"Discarded {len(discarded)} queued requests")
        return len(discarded)

    def build_url(self, request: QueuedRequest) -> str:
        query = encode_query_params(
            merge_query_params(self.config.default_query_params, request.query_params)
        )
        url = f"{self.config.host}{self.config.path}{request.path}"
        return f"{url}?{query}" if query else url

    def get_metrics(self) -> dict[str, Any]:
        return {
            **self.metrics.to_dict(),
            "pending_count": self.pending_count,
            "queue_size": self.queue_size,
            "queue_limit": self.queue_limit,
        }

    async def wait_idle(self) -> None:
        """Wait until every dispatched request has finished."""
        while self._active_tasks:
            await asyncio.gather(*list(self._active_tasks), return_exceptions=True)

    def _on_identity_logout(self) -> None:
        self.clear_queue()

    def _drain(self) -> None:
        while True:
            entry = self.scope.take_next(self.queue_limit)
            if entry is None:
                return
            request, owner = entry

            # Skip entries whose awaiting caller has gone away
            if request.is_settled:
                continue

            (owner or self)._start(request)

    def _start(self, request: QueuedRequest) -> None:
        self.scope.pending_count += 1
        self.metrics.requests_dispatched += 1
        if request.is_forced:
            self.metrics.forced_dispatched += 1
        if self.config.metrics is not None:
            self.config.metrics.observe_dispatch(request.method.value, request.is_forced)

        task = asyncio.create_task(self._dispatch(request))
        self._active_tasks.add(task)
        task.add_done_callback(self._active_tasks.discard)

    async def _dispatch(self, request: QueuedRequest) -> None:
        outcome = "error"
        try:
            response = await self._execute(request)
        except asyncio.CancelledError:
            request.future.cancel()
            raise
        except UnauthorizedError as e:
            outcome = "unauthorized"
            self.metrics.unauthorized_responses += 1
            self.metrics.requests_failed += 1
            request.reject(e)
        except Exception as e:
            self.metrics.requests_failed += 1
            logger.debug(f"{request.method.value} {request.path} failed: {e}")
            request.reject(e)
        else:
            outcome = "success"
            self.metrics.requests_succeeded += 1
            request.resolve(response)
        finally:
            if self.config.metrics is not None:
                self.config.metrics.observe_completion(request.method.value, outcome)
            # Decrement before admitting more work
            self.scope.pending_count -= 1
            self._drain()

    async def _execute(self, request: QueuedRequest) -> TransportResponse:
        url = self.build_url(request)
        identity = self.config.identity

        if request.is_authenticated:
            if identity is None:
                raise ConfigurationError(
                    "Request is_authenticated is set to true, "
                    "but there is no identity in configuration."
                )
            request = await identity.authenticate_request(request)

        body = request.body.serialize() if request.body is not None else None
        headers = {**self.config.default_headers, **(request.headers or {})}

        logger.debug(f"Dispatching {request.method.value} {url}")
        try:
            response = await self.transport(
                url, method=request.method.value, headers=headers, body=body
            )
        except asyncio.CancelledError:
            raise
        except ApiConductorError:
            raise
        except Exception as e:
            raise TransportError(
                f"{request.method.value} {url} failed: {e}"
            ) from e

        if response.status_code == UNAUTHORIZED_STATUS and identity is not None:
            # Credentials are considered outdated
            await self._force_logout()
            raise UnauthorizedError("Unauthorized request error.", status_code=401)

        return response

    async def _force_logout(self) -> None:
        identity = self.config.identity
        if identity is None or not identity.is_authenticated:
            return
        try:
            await identity.logout()
        except asyncio.CancelledError:
            raise
        except ApiConductorError as e:
            logger.error(f"Forced logout after 401 failed: {e}")


__all__ = ["UNAUTHORIZED_STATUS", "RequestScheduler"]
