# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for identity mechanisms consumed by the request scheduler."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..notifier import IdentityEvent
    from ..types.queue import QueuedRequest


@runtime_checkable
class IdentityProtocol(Protocol):
    """
    What the scheduler needs from an identity.

    The scheduler asks the identity to authenticate entries before dispatch,
    logs it out when the server answers 401, and listens for ``logout`` to
    discard its queue.
    """

    @property
    def is_authenticated(self) -> bool:
        """Whether credentials are currently held."""
        ...

    async def authenticate_request(self, request: "QueuedRequest") -> "QueuedRequest":
        """Attach credentials to the request."""
        ...

    async def logout(self) -> None:
        """Invalidate the held credentials."""
        ...

    def add_listener(
        self, event: "IdentityEvent", listener: Callable[[], Any]
    ) -> None:
        """Subscribe to an identity lifecycle event."""
        ...

    def remove_listener(
        self, event: "IdentityEvent", listener: Callable[[], Any]
    ) -> None:
        """Unsubscribe from an identity lifecycle event."""
        ...
