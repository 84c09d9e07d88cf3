# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)


def _parse_flag(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///creatorhub.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SECTION_CONFIG


class HashingConfig(BaseSettings):
    # argon2-cffi defaults (RFC 9106 low-memory profile)
    time_cost: int = Field(3, ge=1, alias="ARGON2_TIME_COST")
    memory_cost: int = Field(65536, ge=8, alias="ARGON2_MEMORY_COST")
    parallelism: int = Field(4, ge=1, alias="ARGON2_PARALLELISM")
    hash_len: int = Field(32, ge=16, alias="ARGON2_HASH_LEN")
    salt_len: int = Field(16, ge=8, alias="ARGON2_SALT_LEN")
    workers: int = Field(4, ge=1, alias="HASHING_WORKERS")

    model_config = _SECTION_CONFIG


class StorageConfig(BaseSettings):
    backend: str = Field("s3", alias="STORAGE_BACKEND")
    endpoint: str | None = Field(None, alias="S3_ENDPOINT")
    access_key: str | None = Field(None, alias="S3_ACCESS_KEY")
    secret_key: str | None = Field(None, alias="S3_SECRET_KEY")
    bucket: str = Field("creatorhub", alias="S3_BUCKET_NAME")
    region: str = Field("pp-back-01", alias="S3_REGION")
    local_dir: Path = Field(Path("instance/uploads"), alias="STORAGE_LOCAL_DIR")
    max_retries: int = Field(3, ge=0, alias="STORAGE_MAX_RETRIES")
    backoff_base: float = Field(0.5, ge=0.0, alias="STORAGE_BACKOFF_BASE")
    backoff_cap: float = Field(8.0, ge=0.0, alias="STORAGE_BACKOFF_CAP")

    model_config = _SECTION_CONFIG

    @field_validator("backend", mode="before")
    @classmethod
    def _normalize_backend(cls, value: str) -> str:
        backend = str(value).strip().lower()
        if backend not in ("s3", "local"):
            raise ValueError("STORAGE_BACKEND must be 's3' or 'local'")
        return backend


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _parse_flag(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _hashing_config_factory() -> HashingConfig:
    return HashingConfig()  # type: ignore[call-arg]


def _storage_config_factory() -> StorageConfig:
    return StorageConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    api_version: str = Field("v1", alias="API_VERSION")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8080, ge=1, le=65535, alias="PORT")
    account_deletion_enabled: bool = Field(True, alias="ACCOUNT_DELETION_ENABLED")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    hashing: HashingConfig = Field(default_factory=_hashing_config_factory)
    storage: StorageConfig = Field(default_factory=_storage_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("debug_logging", "account_deletion_enabled", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_flag(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        storage = self.storage
        if storage.backend == "s3" and not (
            storage.endpoint and storage.access_key and storage.secret_key
        ):
            print(
                "\n❌ CRITICAL CONFIGURATION ERROR: S3 storage selected in production\n"
                "   without S3_ENDPOINT, S3_ACCESS_KEY and S3_SECRET_KEY.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")
        if self.database.url.startswith("sqlite"):
            warnings.append("⚠️  SQLite database in production")

        if warnings:
            print("\n⚠️  PRODUCTION WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "HashingConfig",
    "SecurityConfig",
    "StorageConfig",
    "load_config",
]
