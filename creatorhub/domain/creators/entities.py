# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, frozen=True)
class Creator:

    id: UUID
    name: str
    email: str
    password_hash: str = field(repr=False)
    picture_ref: str | None
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Session:
    """Bearer credential bound to one creator; lives until revoked."""

    token: UUID
    subject: UUID
    created_at: datetime


@dataclass(slots=True, frozen=True)
class CreatorChanges:
    """Fields to overwrite on update; ``None`` leaves the column untouched."""

    email: str | None = None
    password_hash: str | None = field(default=None, repr=False)
    picture_ref: str | None = None

    def is_empty(self) -> bool:
        return self.email is None and self.password_hash is None and self.picture_ref is None
