# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for api_conductor.

Classes:
    SchedulerMetrics: Plain request lifecycle counters.
    PrometheusSchedulerMetrics: Prometheus counters and in-flight gauge.
"""

from .metrics import PrometheusSchedulerMetrics, SchedulerMetrics

__all__ = ["PrometheusSchedulerMetrics", "SchedulerMetrics"]
