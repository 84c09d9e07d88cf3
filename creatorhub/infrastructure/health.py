# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from creatorhub.domain.creators.exceptions import StoreUnavailableError
from creatorhub.infrastructure.db import Database
from creatorhub.shared.logging import logger


def check_database(database: Database) -> bool:
    try:
        return database.ping()
    except SQLAlchemyError as exc:
        logger.error(f"health: database unreachable error={type(exc).__name__}")
        raise StoreUnavailableError(context={"operation": "ping"}) from exc


__all__ = ["check_database"]
