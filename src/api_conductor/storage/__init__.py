# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Durable storage implementations for identity credentials.

Available storages:
- MemoryCredentialStorage: In-process dict, the default
- FileCredentialStorage: JSON file on local disk
- RedisCredentialStorage: Redis key space shared between processes (requires redis extra)

Note: RedisCredentialStorage is lazily imported to avoid requiring the redis
package when only the other storages are used.
"""

from typing import TYPE_CHECKING, cast

from api_conductor.storage.file import FileCredentialStorage
from api_conductor.storage.memory import MemoryCredentialStorage

# Lazy import for optional redis storage
if TYPE_CHECKING:
    from api_conductor.storage.redis import RedisCredentialStorage

__all__ = [
    "FileCredentialStorage",
    "MemoryCredentialStorage",
    # Redis storage (lazy loaded)
    "RedisCredentialStorage",
]


def __getattr__(name: str) -> type:
    """Lazy import for optional redis storage."""
    if name == "RedisCredentialStorage":
        try:
            from api_conductor.storage import redis as redis_module

            return cast(type, redis_module.RedisCredentialStorage)
        except ImportError as e:  # pragma: no cover
            raise ImportError(  # pragma: no cover
                f"'{name}' requires the 'redis' extra. "
                "Install with: pip install api-conductor[redis]"
            ) from e
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
