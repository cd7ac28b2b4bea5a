# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Redis credential storage.

Shares persisted credentials between processes. Requires the ``redis``
extra:

    pip install api-conductor[redis]
"""

import logging

from redis import Redis

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "api_conductor"


class RedisCredentialStorage:
    """
    Redis-backed implementation of ``CredentialStorageProtocol``.

    Keys are prefixed with ``namespace`` so ``clear()`` only removes keys
    owned by this storage. An optional ``key_ttl`` expires stored values.

    Args:
        client: A synchronous ``redis.Redis`` client
        namespace: Prefix for every key written by this storage
        key_ttl: Optional TTL in seconds applied on every write
    """

    def __init__(
        self,
        client: Redis,
        namespace: str = DEFAULT_NAMESPACE,
        key_ttl: int | None = None,
    ) -> None:
        if key_ttl is not None and key_ttl < 1:
            raise ValueError("key_ttl must be at least 1 second")
        self.client = client
        self.namespace = namespace
        self.key_ttl = key_ttl

    @classmethod
    def from_url(cls, url: str, **kwargs: object) -> "RedisCredentialStorage":
        """Create a storage connected to ``url``."""
        return cls(Redis.from_url(url, decode_responses=True), **kwargs)  # type: ignore[arg-type]

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def get_item(self, key: str) -> str | None:
        value = self.client.get(self._key(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def set_item(self, key: str, value: str) -> None:
        self.client.set(self._key(key), value, ex=self.key_ttl)

    def remove_item(self, key: str) -> None:
        self.client.delete(self._key(key))

    def clear(self) -> None:
        keys = list(self.client.scan_iter(match=f"{self.namespace}:*"))
        if keys:
            self.client.delete(*keys)
            logger.debug(f"Cleared {len(keys)} keys in namespace '{self.namespace}'")


__all__ = ["DEFAULT_NAMESPACE", "RedisCredentialStorage"]
