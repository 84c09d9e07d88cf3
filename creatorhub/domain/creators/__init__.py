# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Creator, CreatorChanges, Session
from .exceptions import (
    CreatorAlreadyExistsError,
    CreatorNotFoundError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialsError,
    PasswordHashingError,
    StorageUploadError,
    StoreUnavailableError,
)
from .repositories import (
    CreatorRepository,
    ObjectStorage,
    PasswordHasher,
    SessionRepository,
    TransactionManager,
)

__all__ = [
    "Creator",
    "CreatorAlreadyExistsError",
    "CreatorChanges",
    "CreatorNotFoundError",
    "CreatorRepository",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingCredentialsError",
    "ObjectStorage",
    "PasswordHasher",
    "PasswordHashingError",
    "Session",
    "SessionRepository",
    "StorageUploadError",
    "StoreUnavailableError",
    "TransactionManager",
]
