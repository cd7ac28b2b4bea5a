# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Queue types for the request scheduler.

This module defines the entry carried through the scheduling pipeline, from
the API surface into the scheduling scope's queue and on to dispatch.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from .request import HttpMethod, QueryParams, RequestBody

if TYPE_CHECKING:
    from asyncio import Future


def _new_future() -> "Future[Any]":
    return asyncio.get_running_loop().create_future()


@dataclass
class QueuedRequest:
    """
    A request waiting in the scheduler's queue.

    The ``future`` is the request's completion pair: the scheduler settles it
    exactly once, either with the transport response or with an error. The
    entry is removed from the queue exactly once, either by dispatch or by a
    logout-triggered discard.

    Attributes:
        method: HTTP method
        path: Request path appended to the configured host and prefix
        body: Request body variant, or None
        headers: Per-request headers; override the configured defaults
        is_authenticated: Whether the identity must attach credentials
        is_forced: Whether the request bypasses FIFO order and the limit
        query_params: Per-request query parameters; override the defaults
        future: Future resolved with the response or rejected with an error
        queue_entry_time: UTC timestamp when the entry was created
    """

    method: HttpMethod
    path: str
    body: RequestBody | None = None
    headers: dict[str, str] | None = None
    is_authenticated: bool = False
    is_forced: bool = False
    query_params: QueryParams | None = None
    future: "Future[Any]" = field(default_factory=_new_future, repr=False)
    queue_entry_time: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def is_settled(self) -> bool:
        """Whether the completion future has already been settled."""
        return self.future.done()

    def resolve(self, result: Any) -> None:
        """Settle the entry with a result, unless it is already settled."""
        if not self.future.done():
            self.future.set_result(result)

    def reject(self, error: BaseException) -> None:
        """Settle the entry with an error, unless it is already settled."""
        if not self.future.done():
            self.future.set_exception(error)


__all__ = ["QueuedRequest"]
