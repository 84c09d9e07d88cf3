# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import BinaryIO
from uuid import UUID

from creatorhub.domain.creators.repositories import ObjectStorage

PROFILE_PICTURE_PURPOSE = "pfp"


def profile_picture_key(creator_id: UUID) -> str:
    return f"{PROFILE_PICTURE_PURPOSE}-{creator_id}"


class UploadPictureUseCase:
    """Store a profile picture for an authenticated creator.

    Content type and size are the storage backend's concern.
    """

    def __init__(self, *, storage: ObjectStorage) -> None:
        self._storage = storage

    def execute(self, creator_id: UUID, body: bytes | BinaryIO) -> str:
        return self._storage.put(
            profile_picture_key(creator_id), body, purpose=PROFILE_PICTURE_PURPOSE
        )
