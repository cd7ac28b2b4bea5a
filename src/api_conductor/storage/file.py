# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
JSON file credential storage.

Keeps every key in a single JSON object on disk so credentials survive
process restarts on a single machine.
"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileCredentialStorage:
    """
    File-backed implementation of ``CredentialStorageProtocol``.

    The whole file is rewritten on every change through a temporary file and
    ``os.replace`` so a crash never leaves a half-written file behind. A file
    that cannot be decoded is treated as empty and logged.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable credential file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed credential file {self.path}")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


__all__ = ["FileCredentialStorage"]
