"""Interfaces between the HTTP layer, the business rules and storage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import User, UserProfile


class UserPrimaryPort(ABC):
    """Operations on users offered to the HTTP layer."""

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Create a user and return it with its id."""

    @abstractmethod
    def get_users(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def get_user_by_id(self, user_id: int) -> User:
        """Return the user with the given id."""

    @abstractmethod
    def update_user(self, user_id: int, user: User) -> User:
        """Apply the non-empty fields of ``user`` and return the result."""

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Delete the user with the given id."""


class UserSecondaryPort(ABC):
    """Storage of users."""

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Store a user and return it with its id."""

    @abstractmethod
    def get_users(self) -> list[User]:
        """Return every stored user."""

    @abstractmethod
    def get_user_by_id(self, user_id: int) -> User:
        """Return the stored user with the given id."""

    @abstractmethod
    def update_user(self, user_id: int, user: User) -> User:
        """Overwrite the fields of the stored user that ``user`` sets."""

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Remove the stored user with the given id."""


class UserProfilePrimaryPort(ABC):
    """Operations on profiles offered to the HTTP layer."""

    @abstractmethod
    def create_user_profile(self, profile: UserProfile) -> UserProfile:
        """Create a profile and return it with its id."""

    @abstractmethod
    def get_user_profile_by_user_name(self, user_name: str) -> UserProfile:
        """Return the profile of the user with the given name."""

    @abstractmethod
    def update_user_profile(self, profile_id: int, profile: UserProfile) -> UserProfile:
        """Apply the set fields of ``profile`` and return the result."""

    @abstractmethod
    def delete_user_profile(self, profile_id: int) -> None:
        """Delete the profile with the given id."""

    @abstractmethod
    def search_user_by_name(self, name: str) -> list[UserProfile]:
        """Return profiles of users whose name contains ``name``."""

    @abstractmethod
    def get_all_user_profiles(self) -> list[UserProfile]:
        """Return every profile."""


class UserProfileSecondaryPort(ABC):
    """Storage of profiles."""

    @abstractmethod
    def create_user_profile(self, profile: UserProfile) -> UserProfile:
        """Store a profile for an existing user."""

    @abstractmethod
    def get_user_profile_by_user_name(self, user_name: str) -> UserProfile:
        """Return the stored profile of the named user."""

    @abstractmethod
    def update_user_profile(self, profile_id: int, profile: UserProfile) -> UserProfile:
        """Overwrite the fields of the stored profile that ``profile`` sets."""

    @abstractmethod
    def delete_user_profile(self, profile_id: int) -> None:
        """Remove the stored profile with the given id."""

    @abstractmethod
    def search_user_by_name(self, name: str) -> list[UserProfile]:
        """Return stored profiles of users whose name contains ``name``."""

    @abstractmethod
    def get_all_user_profiles(self) -> list[UserProfile]:
        """Return every stored profile."""