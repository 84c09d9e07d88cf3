# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authenticator import AUTHORIZATION_HEADER, RequestAuthenticator, extract_token
from .credential_store import CredentialStore
from .password_hashing import Argon2PasswordHasher, HashingPool
from .session_store import SessionStore, parse_token

__all__ = [
    "AUTHORIZATION_HEADER",
    "Argon2PasswordHasher",
    "CredentialStore",
    "HashingPool",
    "RequestAuthenticator",
    "SessionStore",
    "extract_token",
    "parse_token",
]
