"""
Shared fixtures for the api_conductor test suite.
"""

import pytest
from fakes import (
    AUTH_HOST,
    LOGIN_PATH,
    LOGIN_RESPONSE,
    LOGOUT_PATH,
    FakeTransport,
    ManualClock,
)

from api_conductor.identity import OAuthIdentity, OAuthIdentityConfig
from api_conductor.storage import MemoryCredentialStorage


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def gated_transport():
    return FakeTransport(gated=True)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def storage():
    return MemoryCredentialStorage()


@pytest.fixture
def identity_config():
    return OAuthIdentityConfig(
        host=AUTH_HOST, login_path=LOGIN_PATH, logout_path=LOGOUT_PATH
    )


@pytest.fixture
def identity_transport():
    """Transport answering login and logout successfully."""
    fake = FakeTransport()
    fake.add_route("POST", f"{AUTH_HOST}{LOGIN_PATH}", json=LOGIN_RESPONSE)
    fake.add_route("POST", f"{AUTH_HOST}{LOGOUT_PATH}", status=200)
    return fake


@pytest.fixture
def identity(identity_config, identity_transport, storage, clock):
    return OAuthIdentity(
        identity_config, identity_transport, storage=storage, clock=clock
    )
