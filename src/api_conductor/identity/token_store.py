# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token store for the OAuth identity.

Holds the current credentials, mirrors them into durable storage and owns
the single renewal timer.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ..exceptions import DataIntegrityError
from ..protocols.clock import ClockProtocol, TimerHandle
from ..protocols.storage import CredentialStorageProtocol
from ..types.credentials import Credentials
from .config import OAuthIdentityConfig

logger = logging.getLogger(__name__)


def compute_renewal_delay(expires_in: float, lead_time: float) -> float:
    """
    Seconds to wait before renewing a token that expires in ``expires_in``.

    Renews ``lead_time`` seconds before expiry. When the lead time is longer
    than the token lifetime the renewal fires at expiry instead of producing
    a negative delay.
    """
    if lead_time > expires_in:
        return expires_in
    return expires_in - lead_time


class TokenStore:
    """
    Owner of an identity's credentials and renewal timer.

    Invariants:
        - at most one credentials value is held at a time
        - at most one renewal timer is armed; installing credentials always
          cancels the previous one first
        - durable storage writes run one at a time, in call order, on a
          worker thread so blocking storages never stall the event loop

    Attributes:
        config: Identity configuration
        storage: Durable storage, used only when ``config.storage_enabled``
        clock: Clock used to arm the renewal timer
    """

    def __init__(
        self,
        config: OAuthIdentityConfig,
        storage: CredentialStorageProtocol,
        clock: ClockProtocol,
        on_renewal_due: Callable[[str], None],
    ) -> None:
        """
        Initialize the token store.

        Args:
            config: Identity configuration
            storage: Durable storage for credentials
            clock: Clock used to arm the renewal timer
            on_renewal_due: Called with the captured refresh token when the
                renewal timer fires
        """
        self.config = config
        self.storage = storage
        self.clock = clock
        self._on_renewal_due = on_renewal_due

        self._credentials: Credentials | None = None
        self._timer: TimerHandle | None = None
        self._timer_delay: float | None = None
        self._storage_lock = asyncio.Lock()

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    @property
    def has_timer(self) -> bool:
        return self._timer is not None

    @property
    def timer_delay(self) -> float | None:
        """Delay in seconds of the currently armed timer, if any."""
        return self._timer_delay

    def restore(self) -> Credentials | None:
        """
        Load persisted credentials as the initial state.

        Does not arm a renewal timer. Unreadable values, or values without
        ``expires_in``, are logged and ignored.

        Returns:
            The restored credentials, or None if nothing usable was stored.
        """
        if not self.config.storage_enabled:
            return None

        raw = self.storage.get_item(self.config.storage_key)
        if raw is None:
            return None

        try:
            credentials = Credentials.from_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Ignoring unreadable credentials under '{self.config.storage_key}': {e}"
            )
            return None

        if credentials.expires_in is None:
            logger.warning(
                f"Ignoring stored credentials without expires_in under "
                f"'{self.config.storage_key}'"
            )
            return None

        self._credentials = credentials
        logger.debug(f"Restored credentials from '{self.config.storage_key}'")
        return credentials

    async def install(self, credentials: Credentials) -> None:
        """
        Replace the held credentials, re-arm renewal and persist them.

        The previous renewal timer is cancelled even when the new
        credentials cannot be renewed.

        Raises:
            DataIntegrityError: If ``expires_in`` is missing. Nothing is
                changed in that case.
        """
        if credentials.expires_in is None:
            raise DataIntegrityError(
                "Credentials without expires_in are not supported"
            )

        self._credentials = credentials
        self.cancel_timer()

        # Renewal needs a refresh token
        if credentials.refresh_token is not None and self.config.token_renewal_enabled:
            delay = compute_renewal_delay(
                credentials.expires_in,
                self.config.renewal_lead_time(credentials.expires_in),
            )
            self.schedule_renewal(credentials.refresh_token, delay)

        if self.config.storage_enabled:
            await self._run_storage(
                self.storage.set_item, self.config.storage_key, credentials.to_json()
            )

    def schedule_renewal(self, refresh_token: str, delay: float) -> None:
        """Cancel any armed timer and arm a new one firing after ``delay``."""
        self.cancel_timer()

        def fire() -> None:
            self._timer = None
            self._timer_delay = None
            self._on_renewal_due(refresh_token)

        self._timer = self.clock.call_later(delay, fire)
        self._timer_delay = delay
        logger.debug(f"Token renewal scheduled in {delay:.0f}s")

    def cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self._timer_delay = None

    async def clear(self) -> None:
        """Drop credentials, cancel the timer and clear durable storage."""
        self._credentials = None
        self.cancel_timer()
        if self.config.storage_enabled:
            await self._run_storage(self.storage.remove_item, self.config.storage_key)

    async def _run_storage(self, operation: Callable[..., Any], *args: Any) -> None:
        async with self._storage_lock:
            await asyncio.to_thread(operation, *args)


__all__ = ["TokenStore", "compute_renewal_delay"]
