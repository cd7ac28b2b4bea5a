"""
Test doubles for the api_conductor test suite.

A scriptable fake transport and a manual clock so scheduling and token
renewal can be tested without network access or wall-clock waits.
"""

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

TEST_HOST = "https://example.com"
AUTH_HOST = "https://auth.example.com"
LOGIN_PATH = "/api/login"
LOGOUT_PATH = "/api/logout"

LOGIN_RESPONSE = {
    "scope": "offline_access",
    "token_type": "Bearer",
    "access_token": "ACCESS_TOKEN",
    "refresh_token": "REFRESH_TOKEN",
    # Seconds
    "expires_in": 28800,
}


# ============================================================================
# Fake transport
# ============================================================================


@dataclass
class TransportCall:
    """One call recorded by FakeTransport."""

    url: str
    method: str
    headers: dict[str, str]
    body: str | bytes | None


class FakeTransport:
    """
    Transport double that records calls and answers from a route table.

    Unrouted calls answer ``200 {"ok": true}``. With ``gated=True`` every
    call blocks until ``release()`` is called for it, which lets tests
    observe what is in flight.
    """

    def __init__(self, gated: bool = False) -> None:
        self.gated = gated
        self.calls: list[TransportCall] = []
        self._routes: dict[tuple[str, str], list[Any]] = {}
        self._gates: list[asyncio.Future[None]] = []

    def add_route(
        self,
        method: str,
        url: str,
        status: int = 200,
        json: Any = None,
        error: BaseException | None = None,
    ) -> None:
        """Queue an answer for ``method url``. The last answer is reused."""
        answer: Any = error if error is not None else httpx.Response(status, json=json)
        self._routes.setdefault((method, url), []).append(answer)

    def calls_to(self, url: str) -> list[TransportCall]:
        return [call for call in self.calls if call.url == url]

    @property
    def in_flight(self) -> int:
        return sum(1 for gate in self._gates if not gate.done())

    def release(self, index: int | None = None) -> None:
        """Let a gated call complete; the oldest pending one by default."""
        if index is None:
            index = next(i for i, gate in enumerate(self._gates) if not gate.done())
        self._gates[index].set_result(None)

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: str | bytes | None = None,
    ) -> httpx.Response:
        self.calls.append(TransportCall(url, method, dict(headers), body))

        if self.gated:
            gate: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            self._gates.append(gate)
            await gate

        answers = self._routes.get((method, url))
        if not answers:
            return httpx.Response(200, json={"ok": True})
        answer = answers.pop(0) if len(answers) > 1 else answers[0]
        if isinstance(answer, BaseException):
            raise answer
        return answer


# ============================================================================
# Manual clock
# ============================================================================


class ManualTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        assert not self.cancelled, "cancelled timer fired"
        self.fired = True
        self.callback()


class ManualClock:
    """Clock double; timers only fire when the test says so."""

    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def fire_next(self) -> None:
        self.active[0].fire()


async def settle(rounds: int = 10) -> None:
    """Let pending tasks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)

