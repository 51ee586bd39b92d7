"""Domain records and the errors raised by the user service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for every error reported by the user service."""


class NotFoundError(ServiceError):
    """A requested record does not exist."""


class ValidationError(ServiceError):
    """Input breaks a business rule."""


class StorageError(ServiceError):
    """The database refused or failed an operation."""


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _id_field(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field {key!r} must be a non-negative integer")
    return value


def _text_field(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass(frozen=True)
class User:
    """A user; any field may be absent, as in a partial update."""

    id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "position": self.position}

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        """Build a user from decoded JSON; unknown keys are ignored."""
        data = _require_mapping(data)
        return cls(
            id=_id_field(data, "id"),
            name=_text_field(data, "name"),
            position=_text_field(data, "position"),
        )


@dataclass(frozen=True)
class UserProfile:
    """A user's profile: main language and up to three projects."""

    id: Optional[int] = None
    user_id: Optional[int] = None
    skilled_language: Optional[str] = None
    project1: Optional[str] = None
    project2: Optional[str] = None
    project3: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "skilled_language": self.skilled_language,
            "project1": self.project1,
            "project2": self.project2,
            "project3": self.project3,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "UserProfile":
        """Build a profile from decoded JSON; unknown keys are ignored."""
        data = _require_mapping(data)
        return cls(
            id=_id_field(data, "id"),
            user_id=_id_field(data, "user_id"),
            skilled_language=_text_field(data, "skilled_language"),
            project1=_text_field(data, "project1"),
            project2=_text_field(data, "project2"),
            project3=_text_field(data, "project3"),
        )