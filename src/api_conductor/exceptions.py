# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the api_conductor library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from ApiConductorError, making it easy to catch
every error raised by the scheduler or the identity with a single except
clause.
"""


class ApiConductorError(Exception):
    """Base exception for all api_conductor errors.

    Example:
        try:
            response = await api.get("/users")
        except ApiConductorError as e:
            logger.error(f"Request failed: {e}")
    """

    pass


class ConfigurationError(ApiConductorError):
    """Raised when configuration is invalid or incomplete.

    The most common cause is an authenticated request submitted through a
    builder that has no identity bound to it. This is fatal for the request
    and is never retried.
    """

    pass


class TransportError(ApiConductorError):
    """Raised when the transport call itself fails.

    Wraps network failures and body serialization failures. The original
    exception is available as ``__cause__``.
    """

    pass


class RequestDiscardedError(ApiConductorError):
    """Raised for queued requests dropped because the identity logged out.

    Requests still waiting in the queue when the bound identity emits
    ``logout`` can no longer be serviced, so their futures are rejected
    with this error instead of being left pending forever.
    """

    pass


class IdentityError(ApiConductorError):
    """Base exception for identity and credential lifecycle errors.

    Attributes:
        status_code: HTTP status returned by the identity server, when the
            error was caused by a response. None otherwise.
    """

    def __init__(self, message: str = "", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(IdentityError):
    """Raised when a password-grant login returns a non-2xx status."""

    pass


class LogoutError(IdentityError):
    """Raised when the logout call returns a non-2xx status.

    Credentials are left untouched; the caller must retry or investigate.
    """

    pass


class RenewalError(IdentityError):
    """Raised when a refresh-token renewal returns a non-2xx status.

    The previous credentials stay in place, so the stale-token window
    continues until the renewal failure policy decides otherwise.
    """

    pass


class DataIntegrityError(IdentityError):
    """Raised when credentials without ``expires_in`` are installed.

    Renewal scheduling is meaningless without an expiry, so installation is
    aborted and the prior state is left untouched.
    """

    pass


class UnauthorizedError(IdentityError):
    """Raised when an authenticated call receives HTTP 401.

    The bound identity is logged out as a side effect before this error is
    surfaced to the caller. The failed call is not retried.
    """

    pass


class NotLoggedInError(IdentityError):
    """Raised when an operation needs credentials but the identity has none."""

    pass


__all__ = [
    "ApiConductorError",
    "AuthenticationError",
    "ConfigurationError",
    "DataIntegrityError",
    "IdentityError",
    "LogoutError",
    "NotLoggedInError",
    "RenewalError",
    "RequestDiscardedError",
    "TransportError",
    "UnauthorizedError",
]
