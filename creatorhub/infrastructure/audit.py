# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any
from uuid import UUID

from creatorhub.shared.logging import logger


class AuditAction(str, Enum):
    SIGN_UP = "sign_up"
    SIGN_IN_SUCCESS = "sign_in_success"
    SIGN_IN_FAILED = "sign_in_failed"
    SIGN_OUT = "sign_out"
    CREATOR_UPDATED = "creator_updated"
    CREATOR_DELETED = "creator_deleted"
    PICTURE_UPLOADED = "picture_uploaded"


_SENSITIVE_KEYS = {"password", "token", "secret", "key", "hash"}


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in details.items():
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value
    return sanitized


def audit_log(
    action: AuditAction,
    creator_id: UUID | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    safe_details = _sanitize_details(details) if details else {}

    message = (
        f"AUDIT: {action.value} | "
        f"creator_id={creator_id} | "
        f"ip={ip_address} | "
        f"success={success}"
    )
    if safe_details:
        message += f" | details={safe_details}"

    if success:
        logger.info(message)
    else:
        logger.warning(message)


__all__ = ["AuditAction", "audit_log"]
