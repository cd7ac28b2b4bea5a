# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Tests that the bundled implementations satisfy the collaborator protocols."""

import httpx
from fakes import AUTH_HOST, LOGIN_PATH, LOGOUT_PATH, FakeTransport, ManualClock

from api_conductor.identity import OAuthIdentity, OAuthIdentityConfig
from api_conductor.protocols import (
    ClockProtocol,
    CredentialStorageProtocol,
    IdentityProtocol,
    TransportProtocol,
    TransportResponse,
)
from api_conductor.storage import FileCredentialStorage, MemoryCredentialStorage
from api_conductor.timers import AsyncioClock
from api_conductor.transport import HttpxTransport


class TestProtocolConformance:
    def test_transports(self):
        assert isinstance(HttpxTransport(), TransportProtocol)
        assert isinstance(FakeTransport(), TransportProtocol)

    def test_httpx_response_is_transport_response(self):
        assert isinstance(httpx.Response(204), TransportResponse)

    def test_storages(self, tmp_path):
        assert isinstance(MemoryCredentialStorage(), CredentialStorageProtocol)
        assert isinstance(
            FileCredentialStorage(tmp_path / "creds.json"), CredentialStorageProtocol
        )

    def test_clocks(self):
        assert isinstance(AsyncioClock(), ClockProtocol)
        assert isinstance(ManualClock(), ClockProtocol)

    def test_identity(self):
        identity = OAuthIdentity(
            OAuthIdentityConfig(
                host=AUTH_HOST, login_path=LOGIN_PATH, logout_path=LOGOUT_PATH
            ),
            FakeTransport(),
            clock=ManualClock(),
        )

        assert isinstance(identity, IdentityProtocol)

    def test_non_conforming_object(self):
        assert not isinstance(object(), CredentialStorageProtocol)
