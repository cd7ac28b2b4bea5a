"""Tests for the Credentials model."""

import pytest
from fakes import LOGIN_RESPONSE
from pydantic import ValidationError

from api_conductor.types import Credentials, is_oauth_response


class TestCredentials:
    def test_authorization_header(self):
        credentials = Credentials.model_validate(LOGIN_RESPONSE)

        assert credentials.authorization == "Bearer ACCESS_TOKEN"

    def test_optional_fields(self):
        credentials = Credentials(token_type="Bearer", access_token="A")

        assert credentials.expires_in is None
        assert credentials.refresh_token is None
        assert credentials.id_token is None

    def test_json_round_trip_keeps_extra_fields(self):
        original = Credentials.model_validate({**LOGIN_RESPONSE, "tenant": "acme"})

        restored = Credentials.from_json(original.to_json())

        assert restored == original
        assert restored.model_extra == {"tenant": "acme"}

    def test_to_json_omits_missing_values(self):
        raw = Credentials(token_type="Bearer", access_token="A").to_json()

        assert "refresh_token" not in raw

    def test_missing_access_token(self):
        with pytest.raises(ValidationError):
            Credentials.model_validate({"token_type": "Bearer"})


@pytest.mark.parametrize(
    "value,expected",
    [
        (LOGIN_RESPONSE, True),
        ({"token_type": "Bearer", "access_token": "A"}, True),
        ({"token_type": "Bearer"}, False),
        ({"access_token": "A", "token_type": None}, False),
        (["token_type", "access_token"], False),
        (None, False),
    ],
)
def test_is_oauth_response(value, expected):
    assert is_oauth_response(value) is expected
