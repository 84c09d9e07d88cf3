# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creatorhub.shared.errors.base import (
    AlreadyExistsError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)


class CreatorAlreadyExistsError(AlreadyExistsError):
    pass


class CreatorNotFoundError(NotFoundError):
    pass


class InvalidCredentialsError(UnauthorizedError):
    pass


class MissingCredentialsError(UnauthorizedError):
    pass


class InvalidTokenError(UnauthorizedError):
    pass


class PasswordHashingError(InternalError):
    pass


class StoreUnavailableError(InternalError):
    pass


class StorageUploadError(InternalError):
    pass
