"""HTTP-facing handlers that turn service results into JSON replies."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Callable, TypeVar, Union

from .models import ServiceError, User, UserProfile
from .ports import UserPrimaryPort, UserProfilePrimaryPort

Body = Union[bytes, str]
_T = TypeVar("_T")

_ID_PATTERN = re.compile(r"[0-9]+")
_MAX_ID = 2**32 - 1
_NO_DATA = object()


@dataclass(frozen=True)
class Reply:
    """An HTTP status code together with the JSON object to send."""

    status: int
    body: dict[str, Any] = field(default_factory=dict)


def _error(status: HTTPStatus, message: str) -> Reply:
    return Reply(int(status), {"error": message})


def _ok(message: str, data: Any = _NO_DATA, status: HTTPStatus = HTTPStatus.OK) -> Reply:
    body: dict[str, Any] = {"message": message}
    if data is not _NO_DATA:
        body["data"] = data
    return Reply(int(status), body)


def _parse_id(raw_id: str) -> int:
    """Parse an unsigned 32-bit decimal id; raise ValueError otherwise."""
    if not _ID_PATTERN.fullmatch(raw_id or ""):
        raise ValueError(f"invalid id {raw_id!r}")
    value = int(raw_id)
    if value > _MAX_ID:
        raise ValueError(f"id {raw_id!r} out of range")
    return value


def _decode(body: Body, build: Callable[[Any], _T]) -> _T:
    """Decode a JSON request body into a record; raise ValueError if it is unusable."""
    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
        return build(json.loads(text))
    except (UnicodeDecodeError, TypeError) as exc:
        raise ValueError("invalid request body") from exc


class UserHandlers:
    """Request handlers for the user routes."""

    def __init__(self, service: UserPrimaryPort) -> None:
        self._service = service

    def create_user(self, body: Body) -> Reply:
        try:
            user = _decode(body, User.from_dict)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid request body")
        try:
            created = self._service.create_user(user)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok("User created successfully", created.to_dict(), HTTPStatus.CREATED)

    def get_users(self) -> Reply:
        try:
            users = self._service.get_users()
        except ServiceError:
            return _error(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to fetch users")
        return _ok("Users retrieved successfully", [u.to_dict() for u in users])

    def get_user_by_id(self, raw_id: str) -> Reply:
        try:
            user_id = _parse_id(raw_id)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid user ID")
        try:
            user = self._service.get_user_by_id(user_id)
        except ServiceError as exc:
            return _error(HTTPStatus.NOT_FOUND, str(exc))
        return _ok("User retrieved successfully", user.to_dict())

    def update_user(self, raw_id: str, body: Body) -> Reply:
        try:
            user_id = _parse_id(raw_id)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid user ID")
        try:
            user = _decode(body, User.from_dict)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid request body")
        try:
            updated = self._service.update_user(user_id, user)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok("User updated successfully", updated.to_dict())

    def delete_user(self, raw_id: str) -> Reply:
        try:
            user_id = _parse_id(raw_id)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid user ID")
        try:
            self._service.delete_user(user_id)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok("User deleted successfully")


class UserProfileHandlers:
    """Request handlers for the profile and search routes."""

    def __init__(self, service: UserProfilePrimaryPort) -> None:
        self._service = service

    def create_user_profile(self, body: Body) -> Reply:
        try:
            profile = _decode(body, UserProfile.from_dict)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid request body")
        try:
            created = self._service.create_user_profile(profile)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok(
            "User profile created successfully", created.to_dict(), HTTPStatus.CREATED
        )

    def get_all_user_profiles(self) -> Reply:
        try:
            profiles = self._service.get_all_user_profiles()
        except ServiceError:
            return _error(
                HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to fetch user profiles"
            )
        return _ok(
            "User profiles retrieved successfully", [p.to_dict() for p in profiles]
        )

    def get_user_profile_by_user_name(self, user_name: str) -> Reply:
        if not user_name:
            return _error(HTTPStatus.BAD_REQUEST, "User name is required")
        try:
            profile = self._service.get_user_profile_by_user_name(user_name)
        except ServiceError as exc:
            return _error(HTTPStatus.NOT_FOUND, str(exc))
        return _ok("User profile retrieved successfully", profile.to_dict())

    def update_user_profile(self, raw_id: str, body: Body) -> Reply:
        try:
            profile_id = _parse_id(raw_id)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid profile ID")
        try:
            profile = _decode(body, UserProfile.from_dict)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid request body")
        try:
            updated = self._service.update_user_profile(profile_id, profile)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok("User profile updated successfully", updated.to_dict())

    def delete_user_profile(self, raw_id: str) -> Reply:
        try:
            profile_id = _parse_id(raw_id)
        except ValueError:
            return _error(HTTPStatus.BAD_REQUEST, "Invalid profile ID")
        try:
            self._service.delete_user_profile(profile_id)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok("User profile deleted successfully")

    def search_user_by_name(self, name: str) -> Reply:
        if not name:
            return _error(HTTPStatus.BAD_REQUEST, "Name query parameter is required")
        try:
            profiles = self._service.search_user_by_name(name)
        except ServiceError as exc:
            return _error(HTTPStatus.BAD_REQUEST, str(exc))
        return _ok("Search completed successfully", [p.to_dict() for p in profiles])