# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for api_conductor collaborators.

This module provides Protocol classes that define the interfaces for the
pluggable pieces the scheduler and the identity depend on.

Available protocols:
- TransportProtocol: Performs the HTTP call
- TransportResponse: Minimal response shape returned by a transport
- CredentialStorageProtocol: Durable key-value storage for credentials
- ClockProtocol: Schedules the token renewal callback
- TimerHandle: Cancellable handle returned by a clock
- IdentityProtocol: Identity mechanism bound to a scheduler
"""

from .clock import ClockProtocol, TimerHandle
from .identity import IdentityProtocol
from .storage import CredentialStorageProtocol
from .transport import TransportProtocol, TransportResponse

__all__ = [
    "ClockProtocol",
    "CredentialStorageProtocol",
    "IdentityProtocol",
    "TimerHandle",
    "TransportProtocol",
    "TransportResponse",
]
