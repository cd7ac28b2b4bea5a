# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Default clock implementation backed by the running asyncio event loop."""

import asyncio
from collections.abc import Callable


class AsyncioClock:
    """
    Clock that schedules callbacks on the running event loop.

    Must be used from inside a running loop. The returned
    ``asyncio.TimerHandle`` satisfies ``TimerHandle``.
    """

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay), callback)


__all__ = ["AsyncioClock"]
