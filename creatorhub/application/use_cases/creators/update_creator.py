# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO
from uuid import UUID

from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.domain.creators.entities import Creator

from .upload_picture import UploadPictureUseCase


@dataclass(slots=True)
class UpdateCreatorInput:
    current_password: str = field(repr=False)
    email: str | None = None
    new_password: str | None = field(default=None, repr=False)
    picture_ref: str | None = None
    picture: bytes | BinaryIO | None = field(default=None, repr=False)


class UpdateCreatorUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        upload_picture: UploadPictureUseCase,
    ) -> None:
        self._credentials = credentials
        self._upload_picture = upload_picture

    def execute(self, creator_id: UUID, data: UpdateCreatorInput) -> Creator:
        creator = self._credentials.get_by_id(creator_id)
        self._credentials.verify(creator, data.current_password)

        picture_ref = data.picture_ref
        if data.picture is not None:
            # Storage I/O stays outside any database transaction. The key is
            # fixed per creator, so an object left by a failed row write is
            # replaced by the next upload.
            picture_ref = self._upload_picture.execute(creator_id, data.picture)

        return self._credentials.apply_changes(
            creator,
            new_email=data.email,
            new_password=data.new_password,
            new_picture_ref=picture_ref,
        )
