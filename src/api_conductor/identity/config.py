# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Identity Configuration for api_conductor

This module provides the configuration for the OAuth identity, including
endpoint paths, token renewal timing, persistence and the renewal failure
policy.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

DEFAULT_RENEW_TOKEN_TIME = 120
"""Seconds before expiry at which the token is renewed by default."""

DEFAULT_STORAGE_KEY = "api_conductor.credentials"
"""Storage key under which credentials are persisted by default."""

RenewTokenTime = Union[float, Callable[[float], float]]


class RenewalFailurePolicy(Enum):
    """What the identity does when a scheduled token renewal fails.

    - KEEP: Keep the stale credentials and stop renewing. Requests continue
      with the old token until the server answers 401.
    - RETRY: Re-arm the renewal timer after ``renewal_retry_delay`` seconds,
      up to ``renewal_max_retries`` consecutive attempts, then behave as KEEP.
    - LOGOUT: Drop the credentials locally and emit ``logout`` without
      calling the logout endpoint.
    """

    KEEP = "keep"
    RETRY = "retry"
    LOGOUT = "logout"


@dataclass
class OAuthIdentityConfig:
    """
    Configuration for ``OAuthIdentity``.
    """

    # === Endpoints ===

    host: str
    """Identity server host, e.g. ``https://auth.example.com``."""

    login_path: str
    """Path for password-grant login and refresh-token renewal."""

    logout_path: str
    """Path for refresh-token revocation on logout."""

    headers: dict[str, str] = field(default_factory=dict)
    """Headers sent with every identity call. Override the form content type."""

    # === Token Renewal ===

    renew_token_time: RenewTokenTime | None = None
    """Renewal lead time in seconds, or a function of ``expires_in``.

    None uses ``DEFAULT_RENEW_TOKEN_TIME``.
    """

    token_renewal_enabled: bool = True
    """Arm a renewal timer when credentials carry a refresh token."""

    renewal_failure_policy: RenewalFailurePolicy = RenewalFailurePolicy.KEEP
    """Reaction to a failed scheduled renewal."""

    renewal_retry_delay: float = 30.0
    """Delay in seconds before retrying a failed renewal (RETRY policy)."""

    renewal_max_retries: int = 3
    """Maximum consecutive renewal retries (RETRY policy)."""

    # === Persistence ===

    storage_enabled: bool = True
    """Persist credentials to durable storage and restore them on startup."""

    storage_key: str = DEFAULT_STORAGE_KEY
    """Key under which credentials are stored."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.storage_key:
            raise ValueError("storage_key must not be empty")
        if self.renewal_retry_delay < 0:
            raise ValueError("renewal_retry_delay must not be negative")
        if self.renewal_max_retries < 0:
            raise ValueError("renewal_max_retries must not be negative")
        self.renewal_failure_policy = RenewalFailurePolicy(self.renewal_failure_policy)

    def renewal_lead_time(self, expires_in: float) -> float:
        """Resolve the configured lead time for a token lifetime."""
        if self.renew_token_time is None:
            return DEFAULT_RENEW_TOKEN_TIME
        if callable(self.renew_token_time):
            return self.renew_token_time(expires_in)
        return self.renew_token_time


__all__ = [
    "DEFAULT_RENEW_TOKEN_TIME",
    "DEFAULT_STORAGE_KEY",
    "OAuthIdentityConfig",
    "RenewTokenTime",
    "RenewalFailurePolicy",
]
