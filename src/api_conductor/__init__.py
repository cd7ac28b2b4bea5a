# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""api_conductor - Queued, authenticated HTTP requests for API clients.

This library mediates every outbound API call of an application: it bounds
the number of requests in flight, lets forced requests jump the queue, and
attaches and renews OAuth2 bearer credentials.

Key Features:
    - FIFO request queue with a concurrency limit
    - Forced requests that bypass the queue order and the limit
    - OAuth2 password-grant login, logout and proactive token renewal
    - Automatic logout and queue invalidation on HTTP 401
    - Pluggable transport, credential storage and clock
    - Shared or private scheduling scopes

Quick Start:
    >>> from api_conductor import ApiBuilder, ApiConfig, OAuthIdentity, OAuthIdentityConfig
    >>>
    >>> identity = OAuthIdentity(
    ...     OAuthIdentityConfig(
    ...         host="https://auth.example.com",
    ...         login_path="/token",
    ...         logout_path="/revoke",
    ...     )
    ... )
    >>> api = ApiBuilder(ApiConfig(host="https://api.example.com", identity=identity))
    >>> await identity.login("user", "secret")
    >>> response = await api.get("/me", is_authenticated=True)

Note: RedisCredentialStorage requires the 'redis' extra. Install with:
    pip install api-conductor[redis]

Version: 1.0.0
"""

__version__ = "1.0.0"

from typing import TYPE_CHECKING

from .builder import ApiBuilder
from .exceptions import (
    ApiConductorError,
    AuthenticationError,
    ConfigurationError,
    DataIntegrityError,
    IdentityError,
    LogoutError,
    NotLoggedInError,
    RenewalError,
    RequestDiscardedError,
    TransportError,
    UnauthorizedError,
)
from .identity import (
    OAuthIdentity,
    OAuthIdentityConfig,
    RenewalFailurePolicy,
    TokenStore,
)
from .notifier import IdentityEvent, Notifier
from .observability import PrometheusSchedulerMetrics, SchedulerMetrics
from .protocols import (
    ClockProtocol,
    CredentialStorageProtocol,
    IdentityProtocol,
    TimerHandle,
    TransportProtocol,
    TransportResponse,
)
from .scheduler import ApiConfig, RequestScheduler, SchedulingScope
from .storage import FileCredentialStorage, MemoryCredentialStorage
from .timers import AsyncioClock
from .transport import HttpxTransport
from .types import (
    BinaryBody,
    Credentials,
    HttpMethod,
    JsonBody,
    QueuedRequest,
    TextBody,
)

# Lazy import for optional redis storage
if TYPE_CHECKING:
    from .storage import RedisCredentialStorage

__all__ = [
    # Exceptions
    "ApiConductorError",
    # API surface
    "ApiBuilder",
    # Scheduler
    "ApiConfig",
    "AsyncioClock",
    "AuthenticationError",
    "BinaryBody",
    # Protocols
    "ClockProtocol",
    "ConfigurationError",
    "CredentialStorageProtocol",
    # Types
    "Credentials",
    "DataIntegrityError",
    # Storage
    "FileCredentialStorage",
    "HttpMethod",
    # Transport
    "HttpxTransport",
    "IdentityError",
    "IdentityEvent",
    "IdentityProtocol",
    "JsonBody",
    "LogoutError",
    "MemoryCredentialStorage",
    "NotLoggedInError",
    "Notifier",
    # Identity
    "OAuthIdentity",
    "OAuthIdentityConfig",
    # Observability
    "PrometheusSchedulerMetrics",
    "QueuedRequest",
    "RedisCredentialStorage",  # Lazy loaded - requires redis extra
    "RenewalError",
    "RenewalFailurePolicy",
    "RequestDiscardedError",
    "RequestScheduler",
    "SchedulerMetrics",
    "SchedulingScope",
    "TextBody",
    "TimerHandle",
    "TokenStore",
    "TransportError",
    "TransportProtocol",
    "TransportResponse",
    "UnauthorizedError",
]


def __getattr__(name: str) -> type:
    """Lazy import for optional redis storage."""
    if name == "RedisCredentialStorage":
        from .storage import RedisCredentialStorage

        return RedisCredentialStorage
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
