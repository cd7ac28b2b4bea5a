# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for durable credential storage."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialStorageProtocol(Protocol):
    """
    Key-value storage used by the identity to persist credentials.

    Values are JSON strings. Only one key is ever used per identity.
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value under the key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove the key if present."""
        ...

    def clear(self) -> None:
        """Remove every key owned by this storage."""
        ...
