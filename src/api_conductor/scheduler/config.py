# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Scheduler Configuration for api_conductor

This module provides the configuration for a request scheduler: target host,
defaults merged into every request, the concurrency limit and the
collaborators bound to the scheduler.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..types.request import QueryParams

if TYPE_CHECKING:
    from ..observability.metrics import PrometheusSchedulerMetrics
    from ..protocols.identity import IdentityProtocol
    from .scope import SchedulingScope

REQUEST_QUEUE_LIMIT = 6
"""
Default maximum number of non-forced requests in flight.

Mirrors the usual browser per-host connection limit. Raise it when the
server tolerates more parallel requests.
"""


@dataclass
class ApiConfig:
    """
    Configuration for ``RequestScheduler`` and ``ApiBuilder``.
    """

    # === Target ===

    host: str
    """Scheme and host, e.g. ``https://api.example.com``."""

    path: str = ""
    """Path prefix inserted between the host and each request path."""

    # === Request Defaults ===

    default_headers: dict[str, str] = field(default_factory=dict)
    """Headers sent with every request; per-request headers override them."""

    default_query_params: QueryParams | None = None
    """Query parameters merged into every request; per-request ones win."""

    default_auth_required: bool = False
    """Value of ``is_authenticated`` when a call does not specify it."""

    # === Admission ===

    request_queue_limit: int = REQUEST_QUEUE_LIMIT
    """Maximum number of non-forced requests in flight."""

    scope: "SchedulingScope | None" = None
    """Queue and pending counter to use. None gives each scheduler its own.

    Pass the same scope to several schedulers to make them share one
    concurrency budget.
    """

    # === Collaborators ===

    identity: "IdentityProtocol | None" = None
    """Identity that authenticates requests and is logged out on 401."""

    metrics: "PrometheusSchedulerMetrics | None" = None
    """Optional Prometheus metrics fed by the scheduler."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.host:
            raise ValueError("host must not be empty")
        if self.request_queue_limit < 1:
            raise ValueError("request_queue_limit must be at least 1")


__all__ = ["REQUEST_QUEUE_LIMIT", "ApiConfig"]
