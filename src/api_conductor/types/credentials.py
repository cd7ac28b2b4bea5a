# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
OAuth credential models.

Contains the token set returned by the identity server on login and
renewal, validated with Pydantic.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    """
    OAuth2 token set held by an identity.

    ``expires_in`` is optional here so that any server payload can be
    parsed; installing credentials without it is rejected by the token
    store. Unknown fields returned by the server are preserved.
    """

    model_config = ConfigDict(extra="allow")

    token_type: str
    access_token: str
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None
    id_token: str | None = None

    @property
    def authorization(self) -> str:
        """Value of the ``Authorization`` header for these credentials."""
        return f"{self.token_type} {self.access_token}"

    def to_json(self) -> str:
        """Serialize for durable storage."""
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def from_json(cls, raw: str) -> "Credentials":
        """Create Credentials from a stored JSON string."""
        return cls.model_validate_json(raw)


def is_oauth_response(value: Any) -> bool:
    """Check whether a decoded payload looks like an OAuth token response."""
    return (
        isinstance(value, Mapping)
        and value.get("token_type") is not None
        and value.get("access_token") is not None
    )


__all__ = ["Credentials", "is_oauth_response"]
