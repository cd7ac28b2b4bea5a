# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Transport implementations."""

from .http import DEFAULT_TIMEOUT, HttpxTransport

__all__ = ["DEFAULT_TIMEOUT", "HttpxTransport"]
