# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request types for the api_conductor scheduler.

This module defines the HTTP method enum, the closed set of request body
variants and the query-string encoding used when building request URLs.

Body variants are decided once at the API-surface boundary (see
``coerce_body``), so the scheduler only ever sees one of ``TextBody``,
``BinaryBody`` or ``JsonBody`` and serializes it without inspecting the
payload's runtime type.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union
from urllib.parse import urlencode

from ..exceptions import TransportError

QueryValue = Union[str, int, float, Sequence[Union[str, int, float]]]
QueryParams = Mapping[str, QueryValue]


class HttpMethod(str, Enum):
    """HTTP methods accepted by the scheduler."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class RequestBody(ABC):
    """Base class for the request body variants."""

    @abstractmethod
    def serialize(self) -> str | bytes:
        """Return the payload exactly as it is handed to the transport."""


@dataclass(frozen=True)
class TextBody(RequestBody):
    """A UTF-8 string body, sent unchanged."""

    text: str

    def serialize(self) -> str:
        return self.text


@dataclass(frozen=True)
class BinaryBody(RequestBody):
    """A raw binary payload, sent unchanged."""

    data: bytes

    @property
    def is_binary(self) -> bool:
        return True

    def serialize(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class JsonBody(RequestBody):
    """Structured data serialized to compact JSON before transmission."""

    data: Any

    def serialize(self) -> str:
        try:
            return json.dumps(self.data, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise TransportError(f"Failed to serialize request body: {e}") from e


def coerce_body(value: Any) -> RequestBody | None:
    """
    Map an arbitrary caller-supplied body onto the closed set of variants.

    Args:
        value: None, a string, a bytes-like object, an existing
            ``RequestBody`` or any JSON-serializable structure.

    Returns:
        The matching body variant, or None when there is no body.
    """
    if value is None:
        return None
    if isinstance(value, RequestBody):
        return value
    if isinstance(value, str):
        return TextBody(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BinaryBody(bytes(value))
    return JsonBody(value)


def merge_query_params(*params: QueryParams | None) -> dict[str, QueryValue]:
    """Merge query parameter mappings left to right, later keys winning."""
    merged: dict[str, QueryValue] = {}
    for mapping in params:
        if mapping:
            merged.update(mapping)
    return merged


def encode_query_params(params: QueryParams | None) -> str:
    """
    Encode query parameters into a canonical query string.

    Keys are sorted so repeated encoding of the same mapping is stable, and
    sequence values are expanded into repeated keys (``a=1&a=2``). An empty
    or missing mapping encodes to an empty string.
    """
    if not params:
        return ""

    pairs: list[tuple[str, str]] = []
    for key in sorted(params):
        value = params[key]
        if isinstance(value, (list, tuple)):
            pairs.extend((key, str(item)) for item in value)
        else:
            pairs.append((key, str(value)))
    return urlencode(pairs)


__all__ = [
    "BinaryBody",
    "HttpMethod",
    "JsonBody",
    "QueryParams",
    "QueryValue",
    "RequestBody",
    "TextBody",
    "coerce_body",
    "encode_query_params",
    "merge_query_params",
]
