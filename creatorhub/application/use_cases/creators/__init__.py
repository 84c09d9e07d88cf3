# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .delete_creator import DeleteCreatorUseCase
from .get_profile import GetProfileUseCase, ListSessionsUseCase
from .sign_in import SignInUseCase
from .sign_out import SignOutUseCase
from .sign_up import SignUpUseCase
from .update_creator import UpdateCreatorInput, UpdateCreatorUseCase
from .upload_picture import (
    PROFILE_PICTURE_PURPOSE,
    UploadPictureUseCase,
    profile_picture_key,
)

__all__ = [
    "DeleteCreatorUseCase",
    "GetProfileUseCase",
    "ListSessionsUseCase",
    "PROFILE_PICTURE_PURPOSE",
    "SignInUseCase",
    "SignOutUseCase",
    "SignUpUseCase",
    "UpdateCreatorInput",
    "UpdateCreatorUseCase",
    "UploadPictureUseCase",
    "profile_picture_key",
]
