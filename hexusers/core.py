"""Business rules for users and their profiles."""

from __future__ import annotations

from .models import NotFoundError, ServiceError, User, UserProfile, ValidationError
from .ports import (
    UserPrimaryPort,
    UserProfilePrimaryPort,
    UserProfileSecondaryPort,
    UserSecondaryPort,
)

MAX_USERS = 5


class UserService(UserPrimaryPort):
    """Validates user requests before handing them to storage."""

    def __init__(self, secondary: UserSecondaryPort) -> None:
        self._secondary = secondary

    def create_user(self, user: User) -> User:
        if not user.name:
            raise ValidationError("user name is required")
        if not user.position:
            raise ValidationError("user position is required")
        try:
            existing = self._secondary.get_users()
        except ServiceError as exc:
            raise ValidationError(
                "number of users must be less than 5 Or GetUser is problem"
            ) from exc
        if len(existing) == MAX_USERS:
            raise ValidationError(
                "number of users must be less than 5 Or GetUser is problem"
            )
        return self._secondary.create_user(user)

    def get_users(self) -> list[User]:
        return self._secondary.get_users()

    def get_user_by_id(self, user_id: int) -> User:
        if user_id == 0:
            raise ValidationError("user ID is required")
        return self._secondary.get_user_by_id(user_id)

    def _ensure_exists(self, user_id: int) -> None:
        try:
            self._secondary.get_user_by_id(user_id)
        except ServiceError as exc:
            raise NotFoundError("user not found") from exc

    def update_user(self, user_id: int, user: User) -> User:
        if user_id == 0:
            raise ValidationError("user ID is required")
        self._ensure_exists(user_id)
        if user.name is not None and user.name == "":
            raise ValidationError("user name cannot be empty")
        if user.position is not None and user.position == "":
            raise ValidationError("user position cannot be empty")
        return self._secondary.update_user(user_id, user)

    def delete_user(self, user_id: int) -> None:
        if user_id == 0:
            raise ValidationError("user ID is required")
        self._ensure_exists(user_id)
        self._secondary.delete_user(user_id)


class UserProfileService(UserProfilePrimaryPort):
    """Validates profile requests before handing them to storage."""

    def __init__(self, secondary: UserProfileSecondaryPort) -> None:
        self._secondary = secondary

    def create_user_profile(self, profile: UserProfile) -> UserProfile:
        if not profile.user_id:
            raise ValidationError("user ID is required")
        if not profile.skilled_language:
            raise ValidationError("skilled programming language is required")
        return self._secondary.create_user_profile(profile)

    def get_user_profile_by_user_name(self, user_name: str) -> UserProfile:
        if not user_name.strip():
            raise ValidationError("user name is required")
        return self._secondary.get_user_profile_by_user_name(user_name)

    def update_user_profile(self, profile_id: int, profile: UserProfile) -> UserProfile:
        if profile_id == 0:
            raise ValidationError("profile ID is required")
        if profile.skilled_language is not None and profile.skilled_language == "":
            raise ValidationError("skilled programming language cannot be empty")
        return self._secondary.update_user_profile(profile_id, profile)

    def delete_user_profile(self, profile_id: int) -> None:
        if profile_id == 0:
            raise ValidationError("profile ID is required")
        self._secondary.delete_user_profile(profile_id)

    def search_user_by_name(self, name: str) -> list[UserProfile]:
        if not name.strip():
            raise ValidationError("search name cannot be empty")
        return self._secondary.search_user_by_name(name)

    def get_all_user_profiles(self) -> list[UserProfile]:
        return self._secondary.get_all_user_profiles()