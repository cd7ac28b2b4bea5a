# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Scheduler metrics for api_conductor.

This module provides plain counters kept by every scheduler and optional
Prometheus metrics fed by the scheduler when configured.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from prometheus_client import CollectorRegistry, Counter, Gauge

logger = logging.getLogger(__name__)


@dataclass
class SchedulerMetrics:
    """
    Request lifecycle counters for one scheduler.

    Example:
        >>> metrics = SchedulerMetrics()
        >>> metrics.requests_enqueued += 1
        >>> metrics.to_dict()["requests_enqueued"]
        1
    """

    requests_enqueued: int = 0
    requests_dispatched: int = 0
    forced_dispatched: int = 0
    requests_succeeded: int = 0
    requests_failed: int = 0
    unauthorized_responses: int = 0
    requests_discarded: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


class PrometheusSchedulerMetrics:
    """
    Prometheus counters and gauges for request scheduling.

    Metrics:
        - api_conductor_requests_dispatched_total: Dispatched requests
        - api_conductor_requests_completed_total: Settled requests by outcome
        - api_conductor_requests_discarded_total: Requests dropped on logout
        - api_conductor_requests_in_flight: Requests currently in flight

    Usage:
        >>> registry = CollectorRegistry()
        >>> prom_metrics = PrometheusSchedulerMetrics(registry=registry)
        >>> api = ApiBuilder(ApiConfig(host=HOST, metrics=prom_metrics), transport)
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """
        Initialize Prometheus scheduler metrics.

        Args:
            registry: Optional CollectorRegistry. If None, uses the default registry.
        """
        kwargs: dict[str, Any] = {}
        if registry is not None:
            kwargs["registry"] = registry

        self.requests_dispatched = Counter(
            "api_conductor_requests_dispatched_total",
            "Total number of dispatched requests",
            ["method", "forced"],
            **kwargs,
        )
        self.requests_completed = Counter(
            "api_conductor_requests_completed_total",
            "Total number of settled requests",
            ["method", "outcome"],  # Values: success, error, unauthorized
            **kwargs,
        )
        self.requests_discarded = Counter(
            "api_conductor_requests_discarded_total",
            "Queued requests discarded after identity logout",
            **kwargs,
        )
        self.requests_in_flight = Gauge(
            "api_conductor_requests_in_flight",
            "Requests currently in flight",
            **kwargs,
        )

        logger.info("Prometheus scheduler metrics initialized")

    def observe_dispatch(self, method: str, forced: bool) -> None:
        self.requests_dispatched.labels(method=method, forced=str(forced).lower()).inc()
        self.requests_in_flight.inc()

    def observe_completion(self, method: str, outcome: str) -> None:
        self.requests_completed.labels(method=method, outcome=outcome).inc()
        self.requests_in_flight.dec()

    def observe_discard(self, count: int) -> None:
        if count:
            self.requests_discarded.inc(count)


__all__ = ["PrometheusSchedulerMetrics", "SchedulerMetrics"]
