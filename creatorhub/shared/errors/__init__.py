from .base import (
    AlreadyExistsError,
    AppError,
    BadRequestError,
    ErrorKind,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AlreadyExistsError",
    "AppError",
    "BadRequestError",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "handle_app_error",
    "register_error_handler",
]
