# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Tests for ApiBuilder, the per-verb API surface."""

import json

import pytest
from fakes import TEST_HOST

from api_conductor import ApiBuilder, ApiConfig
from api_conductor.exceptions import ConfigurationError


class UsersApi(ApiBuilder):
    async def get_user(self, user_id: int) -> dict:
        response = await self.get(f"/users/{user_id}", is_authenticated=True)
        return response.json()


class TestApiBuilder:
    @pytest.mark.asyncio
    async def test_verbs(self, transport):
        api = ApiBuilder(ApiConfig(host=TEST_HOST, path="/v1"), transport)

        await api.get("/items", query_params={"page": 1})
        await api.post("/items", body={"name": "x"})
        await api.put("/items/1", body="text")
        await api.patch("/items/1", body=b"\x01")
        await api.delete("/items/1")

        assert [(c.method, c.url) for c in transport.calls] == [
            ("GET", f"{TEST_HOST}/v1/items?page=1"),
            ("POST", f"{TEST_HOST}/v1/items"),
            ("PUT", f"{TEST_HOST}/v1/items/1"),
            ("PATCH", f"{TEST_HOST}/v1/items/1"),
            ("DELETE", f"{TEST_HOST}/v1/items/1"),
        ]
        assert json.loads(transport.calls[1].body) == {"name": "x"}
        assert transport.calls[2].body == "text"
        assert transport.calls[3].body == b"\x01"
        assert transport.calls[4].body is None

    @pytest.mark.asyncio
    async def test_returns_transport_response(self, transport):
        api = ApiBuilder(ApiConfig(host=TEST_HOST), transport)

        response = await api.get("/status")

        assert response.status_code == 200
        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_headers_passed_through(self, transport):
        api = ApiBuilder(
            ApiConfig(host=TEST_HOST, default_headers={"Accept": "application/json"}),
            transport,
        )

        await api.get("/items", headers={"X-Trace": "abc"})

        assert transport.calls[0].headers == {
            "Accept": "application/json",
            "X-Trace": "abc",
        }

    @pytest.mark.asyncio
    async def test_subclass_with_identity(self, transport, identity):
        transport.add_route("GET", f"{TEST_HOST}/users/42", json={"id": 42})
        api = UsersApi(ApiConfig(host=TEST_HOST, identity=identity), transport)
        await identity.login("user", "secret")

        assert await api.get_user(42) == {"id": 42}
        assert transport.calls[0].headers["Authorization"] == "Bearer ACCESS_TOKEN"

    @pytest.mark.asyncio
    async def test_default_auth_required(self, transport):
        api = ApiBuilder(
            ApiConfig(host=TEST_HOST, default_auth_required=True), transport
        )

        with pytest.raises(ConfigurationError):
            await api.get("/me")

        # Explicit flag overrides the default
        assert (await api.get("/public", is_authenticated=False)).status_code == 200

    @pytest.mark.asyncio
    async def test_forced_flag_reaches_scheduler(self, transport):
        api = ApiBuilder(ApiConfig(host=TEST_HOST), transport)

        await api.get("/urgent", is_forced=True)

        assert api.scheduler.metrics.forced_dispatched == 1
