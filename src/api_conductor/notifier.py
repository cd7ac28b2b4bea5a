# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lifecycle notifications for identities.

The identity composes a ``Notifier`` instead of inheriting from an event
emitter. The set of events is closed: only members of ``IdentityEvent`` can
be subscribed to or emitted.
"""

import inspect
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[[], Any]


class IdentityEvent(Enum):
    """Events emitted by an identity."""

    LOGIN = "login"
    LOGOUT = "logout"


class Notifier:
    """
    Subscribe/unsubscribe/emit for the closed set of identity events.

    Listeners take no arguments and may be plain callables or coroutine
    functions. They run in subscription order; awaitable results are awaited
    before the next listener runs. Exceptions raised by a listener propagate
    to the code that emitted the event.

    Example:
        >>> notifier = Notifier()
        >>> notifier.subscribe(IdentityEvent.LOGOUT, scheduler.clear_queue)
        >>> await notifier.emit(IdentityEvent.LOGOUT)
    """

    def __init__(self) -> None:
        self._listeners: dict[IdentityEvent, list[Listener]] = {
            event: [] for event in IdentityEvent
        }

    def subscribe(self, event: IdentityEvent, listener: Listener) -> None:
        """Register ``listener`` for ``event``."""
        self._listeners[IdentityEvent(event)].append(listener)

    def unsubscribe(self, event: IdentityEvent, listener: Listener) -> None:
        """Remove one registration of ``listener`` for ``event``, if any."""
        listeners = self._listeners[IdentityEvent(event)]
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: IdentityEvent) -> int:
        return len(self._listeners[IdentityEvent(event)])

    async def emit(self, event: IdentityEvent) -> None:
        """Call every listener registered for ``event``."""
        event = IdentityEvent(event)
        # Copy so listeners can unsubscribe while being notified
        for listener in list(self._listeners[event]):
            result = listener()
            if inspect.isawaitable(result):
                await result
        logger.debug(f"Emitted identity event '{event.value}'")


__all__ = ["IdentityEvent", "Listener", "Notifier"]
