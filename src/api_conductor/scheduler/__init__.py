# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request scheduling for api_conductor.

This module provides:
- ApiConfig: Configuration for a scheduler and its API builder
- SchedulingScope: Queue and in-flight counter, private or shared
- RequestScheduler: Admission and dispatch of queued requests
"""

from .config import REQUEST_QUEUE_LIMIT, ApiConfig
from .scheduler import UNAUTHORIZED_STATUS, RequestScheduler
from .scope import SchedulingScope

__all__ = [
    "REQUEST_QUEUE_LIMIT",
    "UNAUTHORIZED_STATUS",
    "ApiConfig",
    "RequestScheduler",
    "SchedulingScope",
]
