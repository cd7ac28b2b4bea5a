# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
OAuth2 identity for api_conductor.

Performs password-grant login, refresh-token renewal and revocation against
an OAuth2 server, attaches bearer credentials to queued requests and emits
``login``/``logout`` notifications.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ..exceptions import (
    ApiConductorError,
    AuthenticationError,
    DataIntegrityError,
    LogoutError,
    NotLoggedInError,
    RenewalError,
    TransportError,
)
from ..notifier import IdentityEvent, Listener, Notifier
from ..protocols.clock import ClockProtocol
from ..protocols.storage import CredentialStorageProtocol
from ..protocols.transport import TransportProtocol, TransportResponse
from ..storage.memory import MemoryCredentialStorage
from ..timers import AsyncioClock
from ..transport.http import HttpxTransport
from ..types.credentials import Credentials, is_oauth_response
from ..types.queue import QueuedRequest
from .config import OAuthIdentityConfig, RenewalFailurePolicy
from .token_store import TokenStore

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class OAuthIdentity:
    """
    OAuth2 identity bound to one or more API builders.

    States:
        - Anonymous: no credentials held
        - Authenticated: credentials held, renewal timer possibly armed

    Persisted credentials are restored at construction when storage is
    enabled. Restoring never arms a renewal timer; call ``renew()`` to
    refresh restored credentials explicitly.

    Example:
        >>> identity = OAuthIdentity(
        ...     OAuthIdentityConfig(
        ...         host="https://auth.example.com",
        ...         login_path="/token",
        ...         logout_path="/revoke",
        ...     )
        ... )
        >>> await identity.login("user", "secret")
        >>> api = ApiBuilder(ApiConfig(host="https://api.example.com", identity=identity))
    """

    def __init__(
        self,
        config: OAuthIdentityConfig,
        transport: TransportProtocol | None = None,
        *,
        storage: CredentialStorageProtocol | None = None,
        clock: ClockProtocol | None = None,
    ) -> None:
        """
        Initialize the identity.

        Args:
            config: Identity configuration
            transport: Transport for identity calls; defaults to HttpxTransport
            storage: Durable credential storage; defaults to an in-memory one
            clock: Clock for the renewal timer; defaults to the asyncio loop
        """
        self.config = config
        self.transport: TransportProtocol = transport or HttpxTransport()
        self.notifier = Notifier()
        self.token_store = TokenStore(
            config,
            storage if storage is not None else MemoryCredentialStorage(),
            clock or AsyncioClock(),
            self._on_renewal_due,
        )

        self._renewal_tasks: set[asyncio.Task[None]] = set()
        self._renewal_retries = 0
        self._pending_logout: asyncio.Task[None] | None = None
        # Bumped on login and on logout; renewals started earlier are discarded
        self._generation = 0

        if self.token_store.restore() is not None:
            logger.info("Identity restored persisted credentials")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def credentials(self) -> Credentials | None:
        return self.token_store.credentials

    @property
    def is_authenticated(self) -> bool:
        return self.token_store.credentials is not None

    def add_listener(self, event: IdentityEvent, listener: Listener) -> None:
        self.notifier.subscribe(event, listener)

    def remove_listener(self, event: IdentityEvent, listener: Listener) -> None:
        self.notifier.unsubscribe(event, listener)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def login(self, username: str, password: str) -> None:
        """
        Log in with the OAuth2 password grant.

        Emits ``login`` once the server accepted the credentials, then
        installs the returned token set.

        Raises:
            AuthenticationError: If the server answers with a non-2xx status
            DataIntegrityError: If the token set has no ``expires_in``
            TransportError: If the call itself fails
        """
        # Reference: https://tools.ietf.org/html/rfc6749#section-4.3.2
        response = await self._post_form(
            self.config.login_path,
            {"grant_type": "password", "username": username, "password": password},
        )
        if not _is_success(response.status_code):
            raise AuthenticationError(
                "Authentication failed.", status_code=response.status_code
            )

        await self.notifier.emit(IdentityEvent.LOGIN)
        credentials = self._parse_credentials(response)
        self._generation += 1
        await self.token_store.install(credentials)
        self._renewal_retries = 0
        logger.info("Identity logged in")

    async def logout(self) -> None:
        """
        Revoke the refresh token and drop the credentials.

        Concurrent calls share a single revocation request.

        Raises:
            NotLoggedInError: If no credentials are held. Nothing changes.
            LogoutError: If the server answers with a non-2xx status. The
                credentials are kept.
            TransportError: If the call itself fails
        """
        if self._pending_logout is not None:
            await self._pending_logout
            return

        if not self.is_authenticated:
            raise NotLoggedInError("Identity: login data is not set yet.")

        self._pending_logout = asyncio.ensure_future(self._logout())
        try:
            await self._pending_logout
        finally:
            self._pending_logout = None

    async def authenticate_request(self, request: QueuedRequest) -> QueuedRequest:
        """
        Attach the ``Authorization`` header to an authenticated request.

        Requests that do not ask for authentication are returned unchanged.

        Raises:
            NotLoggedInError: If no credentials are held
        """
        credentials = self.token_store.credentials
        if credentials is None:
            raise NotLoggedInError("Identity: login data is not set yet.")

        if not request.is_authenticated:
            return request

        request.headers = {
            **(request.headers or {}),
            "Authorization": credentials.authorization,
        }
        return request

    async def renew(self) -> None:
        """
        Renew the held credentials now, using their refresh token.

        Raises:
            NotLoggedInError: If no credentials are held
            RenewalError: If there is no refresh token or the server refuses
        """
        credentials = self.token_store.credentials
        if credentials is None:
            raise NotLoggedInError("Identity: login data is not set yet.")
        if credentials.refresh_token is None:
            raise RenewalError("Credentials have no refresh token to renew with.")
        await self._renew_token(credentials.refresh_token)

    async def close(self) -> None:
        """Cancel the renewal timer and wait for any renewal in progress."""
        self.token_store.cancel_timer()
        for task in list(self._renewal_tasks):
            if not task.done():
                task.cancel()
        if self._renewal_tasks:
            await asyncio.gather(*self._renewal_tasks, return_exceptions=True)
        self._renewal_tasks.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _logout(self) -> None:
        credentials = self.token_store.credentials
        form: dict[str, str] = {"grant_type": "refresh_token"}
        if credentials is not None and credentials.refresh_token is not None:
            form["refresh_token"] = credentials.refresh_token

        response = await self._post_form(self.config.logout_path, form)
        if not _is_success(response.status_code):
            raise LogoutError("Failed to logout.", status_code=response.status_code)

        await self._invalidate()
        logger.info("Identity logged out")

    async def _invalidate(self) -> None:
        """Drop credentials locally, stop renewals and notify listeners."""
        self._generation += 1
        current = asyncio.current_task()
        for task in list(self._renewal_tasks):
            if task is not current and not task.done():
                task.cancel()
        await self.token_store.clear()
        self._renewal_retries = 0
        await self.notifier.emit(IdentityEvent.LOGOUT)

    async def _renew_token(self, refresh_token: str) -> None:
        # Reference: https://tools.ietf.org/html/rfc6749#section-6
        generation = self._generation
        response = await self._post_form(
            self.config.login_path,
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
        )
        if not _is_success(response.status_code):
            raise RenewalError("Failed to renew token.", status_code=response.status_code)

        credentials = self._parse_credentials(response)
        if generation != self._generation:
            logger.info("Discarding token renewal for credentials no longer held")
            return
        await self.token_store.install(credentials)
        logger.info("Identity token renewed")

    def _on_renewal_due(self, refresh_token: str) -> None:
        task = asyncio.create_task(self._run_scheduled_renewal(refresh_token))
        self._renewal_tasks.add(task)
        task.add_done_callback(self._renewal_tasks.discard)

    async def _run_scheduled_renewal(self, refresh_token: str) -> None:
        generation = self._generation
        try:
            await self._renew_token(refresh_token)
            self._renewal_retries = 0
        except asyncio.CancelledError:
            raise
        except ApiConductorError as e:
            if generation != self._generation:
                logger.debug(f"Ignoring failed renewal of dropped credentials: {e}")
                return
            logger.warning(f"Scheduled token renewal failed: {e}")
            await self._handle_renewal_failure(refresh_token)

    async def _handle_renewal_failure(self, refresh_token: str) -> None:
        policy = self.config.renewal_failure_policy

        if policy is RenewalFailurePolicy.RETRY:
            if self._renewal_retries < self.config.renewal_max_retries:
                self._renewal_retries += 1
                logger.info(
                    f"Retrying token renewal in {self.config.renewal_retry_delay}s "
                    f"(attempt {self._renewal_retries}/{self.config.renewal_max_retries})"
                )
                self.token_store.schedule_renewal(
                    refresh_token, self.config.renewal_retry_delay
                )
                return
            logger.warning("Token renewal retries exhausted, keeping stale credentials")
        elif policy is RenewalFailurePolicy.LOGOUT:
            if self.is_authenticated:
                logger.warning("Logging out locally after failed token renewal")
                await self._invalidate()
            return
        else:
            logger.warning("Keeping stale credentials after failed token renewal")

    async def _post_form(
        self, path: str, form: Mapping[str, str]
    ) -> TransportResponse:
        headers = {"Content-Type": FORM_CONTENT_TYPE, **self.config.headers}
        try:
            return await self.transport(
                f"{self.config.host}{path}",
                method="POST",
                headers=headers,
                body=urlencode(form),
            )
        except asyncio.CancelledError:
            raise
        except ApiConductorError:
            raise
        except Exception as e:
            raise TransportError(f"Identity request to {path} failed: {e}") from e

    @staticmethod
    def _parse_credentials(response: TransportResponse) -> Credentials:
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise DataIntegrityError(f"Token response is not valid JSON: {e}") from e

        if not is_oauth_response(payload):
            raise DataIntegrityError(
                "Token response is missing token_type or access_token"
            )
        try:
            return Credentials.model_validate(payload)
        except ValueError as e:
            raise DataIntegrityError(f"Token response is malformed: {e}") from e


__all__ = ["FORM_CONTENT_TYPE", "OAuthIdentity"]
