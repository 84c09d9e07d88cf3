# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Object storage adapters for uploaded files."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from creatorhub.domain.creators.exceptions import StorageUploadError
from creatorhub.domain.creators.repositories import ObjectStorage
from creatorhub.shared.config import StorageConfig
from creatorhub.shared.logging import logger

TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    EndpointConnectionError,
    ConnectionClosedError,
    ConnectTimeoutError,
    ReadTimeoutError,
)


def _read_body(body: bytes | BinaryIO) -> bytes:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    return body.read()


class LocalFileStorage(ObjectStorage):
    """Stores objects on the local filesystem within a configured root."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if not path.is_relative_to(self._root.resolve()):
            msg = "Attempted directory traversal outside storage root"
            raise ValueError(msg)
        return path

    def put(self, key: str, body: bytes | BinaryIO, *, purpose: str) -> str:
        try:
            file_path = self._resolve(key)
            data = _read_body(body)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(data)
        except (OSError, ValueError) as exc:
            logger.error(f"storage.local: put failed key={key} error={type(exc).__name__}")
            raise StorageUploadError(context={"key": key, "purpose": purpose}) from exc
        logger.debug(f"storage.local: put key={key} purpose={purpose} size={len(data)}")
        return key

    def read_bytes(self, key: str) -> bytes:
        return self._resolve(key).read_bytes()


class S3ObjectStorage(ObjectStorage):
    """S3-compatible storage (MinIO, AWS, COS).

    Transient connectivity failures are retried with exponential backoff;
    anything else, or retries running out, becomes ``StorageUploadError``.
    """

    def __init__(self, config: StorageConfig, *, client=None) -> None:
        self._bucket = config.bucket
        self._retrying = Retrying(
            stop=stop_after_attempt(config.max_retries + 1),
            wait=wait_exponential(multiplier=config.backoff_base, max=config.backoff_cap),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=True,
        )
        self._client = client or boto3.client(
            "s3",
            endpoint_url=config.endpoint,
            region_name=config.region,
            aws_access_key_id=config.access_key,
            aws_secret_access_key=config.secret_key,
            config=Config(s3={"addressing_style": "path"}, signature_version="s3v4"),
        )

    def put(self, key: str, body: bytes | BinaryIO, *, purpose: str) -> str:
        data = _read_body(body)
        try:
            for attempt in self._retrying.copy():
                with attempt:
                    logger.debug(
                        f"storage.s3: put attempt={attempt.retry_state.attempt_number} key={key}"
                    )
                    self._client.put_object(
                        Bucket=self._bucket,
                        Key=key,
                        Body=data,
                        Metadata={"purpose": purpose},
                    )
        except (BotoCoreError, ClientError) as exc:
            logger.error(f"storage.s3: put failed key={key} error={type(exc).__name__}")
            raise StorageUploadError(context={"key": key, "purpose": purpose}) from exc

        logger.info(f"storage.s3: put key={key} purpose={purpose} size={len(data)}")
        return key


def build_object_storage(config: StorageConfig) -> ObjectStorage:
    if config.backend == "local":
        return LocalFileStorage(config.local_dir)
    return S3ObjectStorage(config)


__all__ = [
    "LocalFileStorage",
    "S3ObjectStorage",
    "TRANSIENT_ERRORS",
    "build_object_storage",
]
