"""Tests for MemoryCredentialStorage."""

from api_conductor.storage import MemoryCredentialStorage


class TestMemoryCredentialStorage:
    def test_set_get_remove(self):
        storage = MemoryCredentialStorage()

        storage.set_item("key", "value")
        assert storage.get_item("key") == "value"

        storage.remove_item("key")
        assert storage.get_item("key") is None

    def test_missing_key(self):
        assert MemoryCredentialStorage().get_item("missing") is None

    def test_remove_missing_key_is_noop(self):
        storage = MemoryCredentialStorage()

        storage.remove_item("missing")

        assert len(storage) == 0

    def test_clear(self):
        storage = MemoryCredentialStorage()
        storage.set_item("a", "1")
        storage.set_item("b", "2")

        storage.clear()

        assert len(storage) == 0
