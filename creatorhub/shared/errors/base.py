# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    """Closed set of failure kinds visible at the HTTP boundary."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def status(self) -> HTTPStatus:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.ALREADY_EXISTS: HTTPStatus.CONFLICT,
    ErrorKind.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.INTERNAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


@dataclass(slots=True, eq=False)
class AppError(Exception):
    """Base application exception carrying exactly one ErrorKind.

    ``context`` is diagnostic only: it goes to the logs, never to the client.
    """

    kind: ErrorKind
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.kind.value)

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def status(self) -> HTTPStatus:
        return self.kind.status

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.kind.value}


class _KindError(AppError):
    default_kind: ClassVar[ErrorKind]

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(kind=self.default_kind, context=context)


class AlreadyExistsError(_KindError):
    default_kind = ErrorKind.ALREADY_EXISTS


class BadRequestError(_KindError):
    default_kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(_KindError):
    default_kind = ErrorKind.UNAUTHORIZED


class NotFoundError(_KindError):
    default_kind = ErrorKind.NOT_FOUND


class InternalError(_KindError):
    default_kind = ErrorKind.INTERNAL_ERROR


__all__ = [
    "AlreadyExistsError",
    "AppError",
    "BadRequestError",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
]
