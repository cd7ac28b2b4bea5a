# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Scheduling scope: the queue and in-flight counter shared by schedulers.

A scope is private to one scheduler unless it is passed explicitly to
several ``ApiConfig`` instances, in which case the schedulers compete for
the same concurrency budget.
"""

import logging
from collections import deque
from typing import Any

from ..types.queue import QueuedRequest

logger = logging.getLogger(__name__)


class SchedulingScope:
    """
    Ordered pending queue plus the count of requests in flight.

    Selection rules:
        1. The first forced request anywhere in the queue is taken, whatever
           the in-flight count.
        2. Otherwise the head is taken if fewer than ``limit`` requests are
           in flight.
        3. Otherwise nothing is taken.

    Each entry remembers the scheduler that queued it, so whichever
    scheduler drains the scope dispatches the entry through its owner.

    Attributes:
        name: Label used in log messages
        pending_count: Number of requests currently in flight
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self.pending_count = 0
        self._queue: deque[tuple[QueuedRequest, Any]] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def is_empty(self) -> bool:
        return not self._queue

    def append(self, request: QueuedRequest, owner: Any = None) -> None:
        self._queue.append((request, owner))

    def take_next(self, limit: int) -> tuple[QueuedRequest, Any] | None:
        """Remove and return the next admissible request and its owner, if any."""
        for index, entry in enumerate(self._queue):
            if entry[0].is_forced:
                del self._queue[index]
                return entry

        if self._queue and self.pending_count < limit:
            return self._queue.popleft()

        return None

    def clear(self) -> list[QueuedRequest]:
        """Remove and return every queued request."""
        discarded = [request for request, _ in self._queue]
        self._queue.clear()
        if discarded:
            logger.debug(f"Scope '{self.name}' cleared {len(discarded)} requests")
        return discarded


__all__ = ["SchedulingScope"]
