# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from argon2 import PasswordHasher as Argon2Hasher
from argon2 import Type
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from creatorhub.domain.creators.exceptions import PasswordHashingError
from creatorhub.domain.creators.repositories import PasswordHasher
from creatorhub.shared.config import HashingConfig
from creatorhub.shared.logging import logger

T = TypeVar("T")


class HashingPool:
    """Bounded worker pool for CPU and memory heavy password work.

    Request threads block on the returned future, but no more than
    ``max_workers`` hashes are computed at the same time.
    """

    def __init__(self, max_workers: int) -> None:
        self._max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="pw-hash"
        )

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def run(self, fn: Callable[..., T], /, *args: object) -> T:
        return self._executor.submit(fn, *args).result()

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


class Argon2PasswordHasher(PasswordHasher):
    def __init__(self, config: HashingConfig, pool: HashingPool) -> None:
        self._argon2 = Argon2Hasher(
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
            hash_len=config.hash_len,
            salt_len=config.salt_len,
            type=Type.ID,
        )
        self._pool = pool

    def hash(self, password: str) -> str:
        try:
            return self._pool.run(self._argon2.hash, password)
        except HashingError as exc:
            logger.error(f"password.hash: argon2 failure {type(exc).__name__}")
            raise PasswordHashingError(context={"operation": "hash"}) from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._pool.run(self._argon2.verify, hashed, password)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as exc:
            logger.error(f"password.verify: unusable stored hash {type(exc).__name__}")
            raise PasswordHashingError(context={"operation": "verify"}) from exc
