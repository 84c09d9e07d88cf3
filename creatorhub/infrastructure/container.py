# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from creatorhub.application.services.authenticator import RequestAuthenticator
from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.application.services.password_hashing import (
    Argon2PasswordHasher,
    HashingPool,
)
from creatorhub.application.services.session_store import SessionStore
from creatorhub.application.use_cases.creators import (
    DeleteCreatorUseCase,
    GetProfileUseCase,
    ListSessionsUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpUseCase,
    UpdateCreatorUseCase,
    UploadPictureUseCase,
)
from creatorhub.domain.creators.repositories import ObjectStorage, PasswordHasher
from creatorhub.infrastructure.db import Database
from creatorhub.infrastructure.repositories.creators.sqlalchemy_creator_repository import (
    SqlAlchemyCreatorRepository,
    SqlAlchemySessionRepository,
)
from creatorhub.infrastructure.storage import build_object_storage
from creatorhub.interfaces.http.controllers.creator_controller import CreatorController
from creatorhub.interfaces.http.controllers.misc_controller import MiscController
from creatorhub.interfaces.http.controllers.upload_controller import UploadController
from creatorhub.shared.config import AppConfig


class Container:
    """Wires one application instance. Nothing here is process-global."""

    def __init__(
        self,
        config: AppConfig,
        *,
        database: Database | None = None,
        storage: ObjectStorage | None = None,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        if database is not None:
            self.__dict__["database"] = database
        if storage is not None:
            self.__dict__["object_storage"] = storage
        if password_hasher is not None:
            self.__dict__["password_hasher"] = password_hasher

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def object_storage(self) -> ObjectStorage:
        return build_object_storage(self.config.storage)

    @cached_property
    def hashing_pool(self) -> HashingPool:
        return HashingPool(max_workers=self.config.hashing.workers)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return Argon2PasswordHasher(self.config.hashing, self.hashing_pool)

    @cached_property
    def creator_repository(self) -> SqlAlchemyCreatorRepository:
        return SqlAlchemyCreatorRepository(self.database)

    @cached_property
    def session_repository(self) -> SqlAlchemySessionRepository:
        return SqlAlchemySessionRepository(self.database)

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(
            creators=self.creator_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def session_store(self) -> SessionStore:
        return SessionStore(sessions=self.session_repository)

    @cached_property
    def authenticator(self) -> RequestAuthenticator:
        return RequestAuthenticator(sessions=self.session_store)

    # Use cases

    @cached_property
    def sign_up_use_case(self) -> SignUpUseCase:
        return SignUpUseCase(
            credentials=self.credential_store,
            sessions=self.session_store,
            transactions=self.database,
        )

    @cached_property
    def sign_in_use_case(self) -> SignInUseCase:
        return SignInUseCase(credentials=self.credential_store, sessions=self.session_store)

    @cached_property
    def sign_out_use_case(self) -> SignOutUseCase:
        return SignOutUseCase(sessions=self.session_store)

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(credentials=self.credential_store)

    @cached_property
    def list_sessions_use_case(self) -> ListSessionsUseCase:
        return ListSessionsUseCase(sessions=self.session_store)

    @cached_property
    def upload_picture_use_case(self) -> UploadPictureUseCase:
        return UploadPictureUseCase(storage=self.object_storage)

    @cached_property
    def update_creator_use_case(self) -> UpdateCreatorUseCase:
        return UpdateCreatorUseCase(
            credentials=self.credential_store,
            upload_picture=self.upload_picture_use_case,
        )

    @cached_property
    def delete_creator_use_case(self) -> DeleteCreatorUseCase:
        return DeleteCreatorUseCase(
            credentials=self.credential_store,
            sessions=self.session_store,
            transactions=self.database,
        )

    # Controllers

    @cached_property
    def creator_controller(self) -> CreatorController:
        return CreatorController(
            authenticator=self.authenticator,
            sign_up=self.sign_up_use_case,
            sign_in=self.sign_in_use_case,
            sign_out=self.sign_out_use_case,
            get_profile=self.get_profile_use_case,
            list_sessions=self.list_sessions_use_case,
            update_creator=self.update_creator_use_case,
            delete_creator=self.delete_creator_use_case,
            deletion_enabled=self.config.account_deletion_enabled,
        )

    @cached_property
    def upload_controller(self) -> UploadController:
        return UploadController(
            authenticator=self.authenticator,
            upload_picture=self.upload_picture_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database, api_version=self.config.api_version)

    def close(self) -> None:
        if "hashing_pool" in self.__dict__:
            self.hashing_pool.shutdown(wait=False)
        if "database" in self.__dict__:
            self.database.dispose()
