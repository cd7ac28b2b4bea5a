# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Identity management for api_conductor.

This module provides:
- OAuthIdentity: OAuth2 login, logout, request authentication and renewal
- OAuthIdentityConfig: Configuration for the identity
- RenewalFailurePolicy: Reaction to a failed scheduled renewal
- TokenStore: Credentials holder with persistence and the renewal timer
"""

from .config import (
    DEFAULT_RENEW_TOKEN_TIME,
    DEFAULT_STORAGE_KEY,
    OAuthIdentityConfig,
    RenewalFailurePolicy,
    RenewTokenTime,
)
from .oauth import FORM_CONTENT_TYPE, OAuthIdentity
from .token_store import TokenStore, compute_renewal_delay

__all__ = [
    "DEFAULT_RENEW_TOKEN_TIME",
    "DEFAULT_STORAGE_KEY",
    "FORM_CONTENT_TYPE",
    "OAuthIdentity",
    "OAuthIdentityConfig",
    "RenewTokenTime",
    "RenewalFailurePolicy",
    "TokenStore",
    "compute_renewal_delay",
]
