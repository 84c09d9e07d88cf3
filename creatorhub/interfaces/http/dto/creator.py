# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from creatorhub.domain.creators.entities import Creator, Session

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$")
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_PASSWORD_LENGTH = 8


def _validate_email(value: str) -> str:
    value = value.strip()
    if not _EMAIL_PATTERN.match(value):
        raise ValueError("Email address is malformed")
    return value


class SignUpRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=1024)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not _NAME_PATTERN.match(value):
            raise ValueError(
                "Name must start with a letter or digit and contain only "
                "letters, digits, '.', '_' or '-'"
            )
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _validate_email(value)


class SignInRequestDTO(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=64)
    email: str | None = Field(None, min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=1024)  # No length policy on login

    @model_validator(mode="after")
    def require_identity(self) -> "SignInRequestDTO":
        if self.name is None and self.email is None:
            raise ValueError("Either name or email is required")
        return self


class UpdateCreatorRequestDTO(BaseModel):
    email: str | None = Field(None, min_length=3, max_length=320)
    current_password: str = Field(alias="currentPassword", min_length=1, max_length=1024)
    new_password: str | None = Field(
        None, alias="newPassword", min_length=MIN_PASSWORD_LENGTH, max_length=1024
    )
    picture_ref: str | None = Field(None, alias="pictureRef", min_length=1, max_length=512)

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return _validate_email(value) if value is not None else None


class DeleteCreatorRequestDTO(BaseModel):
    password: str = Field(min_length=1, max_length=1024)


class TokenDTO(BaseModel):
    token: UUID


class CreatorDTO(BaseModel):
    id: UUID
    name: str
    email: str
    picture_ref: str | None = Field(serialization_alias="pictureRef")
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_entity(cls, creator: Creator) -> "CreatorDTO":
        return cls(
            id=creator.id,
            name=creator.name,
            email=creator.email,
            picture_ref=creator.picture_ref,
            created_at=creator.created_at,
        )


class SessionDTO(BaseModel):
    token_hint: str = Field(serialization_alias="tokenHint")
    created_at: datetime = Field(serialization_alias="createdAt")
    current: bool

    @classmethod
    def from_entity(cls, session: Session, *, current_token: UUID) -> "SessionDTO":
        return cls(
            token_hint=str(session.token)[:8],
            created_at=session.created_at,
            current=session.token == current_token,
        )


class SessionListDTO(BaseModel):
    sessions: list[SessionDTO]


class PictureRefDTO(BaseModel):
    picture_ref: str = Field(serialization_alias="pictureRef")
