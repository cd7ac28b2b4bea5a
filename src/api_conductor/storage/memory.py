# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
In-memory credential storage.

Perfect for testing, development and single-process applications where
credentials do not need to survive a restart.
"""


class MemoryCredentialStorage:
    """Dict-backed implementation of ``CredentialStorageProtocol``."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["MemoryCredentialStorage"]
