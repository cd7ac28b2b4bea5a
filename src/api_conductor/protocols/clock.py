# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocols for the clock/timer capability used for token renewal."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback if it has not fired yet."""
        ...


@runtime_checkable
class ClockProtocol(Protocol):
    """
    Schedules one-shot callbacks.

    Injected into the identity so renewal can be tested without waiting on
    the wall clock.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""
        ...
