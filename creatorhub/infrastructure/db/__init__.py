# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, Database, create_db_engine
from .models import Creator, CreatorSession

__all__ = ["Base", "Creator", "CreatorSession", "Database", "create_db_engine"]
