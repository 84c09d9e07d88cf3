# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uuid import UUID

from creatorhub.domain.creators.entities import Creator, CreatorChanges
from creatorhub.domain.creators.exceptions import (
    CreatorNotFoundError,
    InvalidCredentialsError,
)
from creatorhub.domain.creators.repositories import CreatorRepository, PasswordHasher
from creatorhub.shared.logging import logger


class CredentialStore:
    """Creator accounts and the passwords that guard them.

    Name and email uniqueness is left to the repository's constraints, so two
    racing sign-ups resolve to one row and one ``CreatorAlreadyExistsError``.
    Deleting a creator never touches its sessions; callers revoke those first.
    """

    def __init__(
        self,
        *,
        creators: CreatorRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._creators = creators
        self._password_hasher = password_hasher

    def create(self, name: str, email: str, password: str) -> Creator:
        hashed = self._password_hasher.hash(password)
        creator = self._creators.add(name, email, hashed)
        logger.info(f"credentials.create: ok creator_id={creator.id}")
        return creator

    def get_by_id(self, creator_id: UUID) -> Creator:
        creator = self._creators.find_by_id(creator_id)
        if creator is None:
            raise CreatorNotFoundError(context={"creator_id": str(creator_id)})
        return creator

    def get_by_name(self, name: str) -> Creator:
        creator = self._creators.find_by_name(name)
        if creator is None:
            raise CreatorNotFoundError(context={"lookup": "name"})
        return creator

    def get_by_email(self, email: str) -> Creator:
        creator = self._creators.find_by_email(email)
        if creator is None:
            raise CreatorNotFoundError(context={"lookup": "email"})
        return creator

    def verify(self, creator: Creator, password: str) -> None:
        if not self._password_hasher.verify(password, creator.password_hash):
            logger.info(f"credentials.verify: mismatch creator_id={creator.id}")
            raise InvalidCredentialsError(context={"creator_id": str(creator.id)})

    def update(
        self,
        creator_id: UUID,
        current_password: str,
        *,
        new_email: str | None = None,
        new_password: str | None = None,
        new_picture_ref: str | None = None,
    ) -> Creator:
        creator = self.get_by_id(creator_id)
        self.verify(creator, current_password)
        return self.apply_changes(
            creator,
            new_email=new_email,
            new_password=new_password,
            new_picture_ref=new_picture_ref,
        )

    def apply_changes(
        self,
        creator: Creator,
        *,
        new_email: str | None = None,
        new_password: str | None = None,
        new_picture_ref: str | None = None,
    ) -> Creator:
        """Write supplied fields for a creator whose password was already verified."""

        changes = CreatorChanges(
            email=new_email,
            password_hash=(
                self._password_hasher.hash(new_password) if new_password is not None else None
            ),
            picture_ref=new_picture_ref,
        )
        if changes.is_empty():
            return creator

        updated = self._creators.update(creator.id, changes)
        if updated is None:
            raise CreatorNotFoundError(context={"creator_id": str(creator.id)})

        logger.info(
            f"credentials.update: ok creator_id={creator.id} "
            f"email={new_email is not None} password={new_password is not None} "
            f"picture={new_picture_ref is not None}"
        )
        return updated

    def delete_by_id(self, creator_id: UUID) -> None:
        if not self._creators.delete(creator_id):
            raise CreatorNotFoundError(context={"creator_id": str(creator_id)})
        logger.info(f"credentials.delete: ok creator_id={creator_id}")
