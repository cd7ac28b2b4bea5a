# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Core data types for api_conductor.

This module re-exports the request, queue and credential types used across
the scheduler and the identity.
"""

from .credentials import Credentials, is_oauth_response
from .queue import QueuedRequest
from .request import (
    BinaryBody,
    HttpMethod,
    JsonBody,
    QueryParams,
    QueryValue,
    RequestBody,
    TextBody,
    coerce_body,
    encode_query_params,
    merge_query_params,
)

__all__ = [
    "BinaryBody",
    "Credentials",
    "HttpMethod",
    "JsonBody",
    "QueryParams",
    "QueryValue",
    "QueuedRequest",
    "RequestBody",
    "TextBody",
    "coerce_body",
    "encode_query_params",
    "is_oauth_response",
    "merge_query_params",
]
