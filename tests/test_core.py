from dataclasses import replace

import pytest

from hexusers.core import UserProfileService, UserService
from hexusers.models import (
    NotFoundError,
    StorageError,
    User,
    UserProfile,
    ValidationError,
)
from hexusers.ports import UserProfileSecondaryPort, UserSecondaryPort


class FakeUsers(UserSecondaryPort):
    def __init__(self):
        self.users = {}
        self.next_id = 1
        self.listing_fails = False

    def create_user(self, user):
        stored = replace(user, id=self.next_id)
        self.users[stored.id] = stored
        self.next_id += 1
        return stored

    def get_users(self):
        if self.listing_fails:
            raise StorageError("disk on fire")
        return list(self.users.values())

    def get_user_by_id(self, user_id):
        try:
            return self.users[user_id]
        except KeyError:
            raise NotFoundError("record not found") from None

    def update_user(self, user_id, user):
        current = self.get_user_by_id(user_id)
        merged = replace(
            current,
            name=user.name if user.name is not None else current.name,
            position=user.position if user.position is not None else current.position,
        )
        self.users[user_id] = merged
        return merged

    def delete_user(self, user_id):
        self.get_user_by_id(user_id)
        del self.users[user_id]


class RecordingProfiles(UserProfileSecondaryPort):
    def __init__(self):
        self.calls = []
        self.known_ids = {4}

    def create_user_profile(self, profile):
        self.calls.append(("create", profile))
        return replace(profile, id=42)

    def get_user_profile_by_user_name(self, user_name):
        self.calls.append(("by_name", user_name))
        return UserProfile(id=1, user_id=1, skilled_language="Go")

    def update_user_profile(self, profile_id, profile):
        self.calls.append(("update", profile_id, profile))
        return replace(profile, id=profile_id)

    def delete_user_profile(self, profile_id):
        self.calls.append(("delete", profile_id))
        if profile_id not in self.known_ids:
            raise NotFoundError("record not found")
        self.known_ids.discard(profile_id)

    def search_user_by_name(self, name):
        self.calls.append(("search", name))
        return []

    def get_all_user_profiles(self):
        self.calls.append(("all",))
        return []


@pytest.fixture
def users():
    return FakeUsers()


@pytest.fixture
def service(users):
    return UserService(users)


@pytest.fixture
def profiles():
    return RecordingProfiles()


@pytest.fixture
def profile_service(profiles):
    return UserProfileService(profiles)


def test_create_user_stores_and_returns(service, users):
    created = service.create_user(User(name="Alice", position="Dev"))
    assert created.name == "Alice"
    assert users.users[created.id] == created


@pytest.mark.parametrize(
    "user, message",
    [
        (User(position="Dev"), "user name is required"),
        (User(name="", position="Dev"), "user name is required"),
        (User(name="Alice"), "user position is required"),
        (User(name="Alice", position=""), "user position is required"),
    ],
)
def test_create_user_requires_fields(service, user, message):
    with pytest.raises(ValidationError, match=message):
        service.create_user(user)


def test_create_user_limit_of_five(service, users):
    for n in range(5):
        service.create_user(User(name=f"user{n}", position="Dev"))
    with pytest.raises(ValidationError, match="number of users must be less than 5"):
        service.create_user(User(name="sixth", position="Dev"))
    assert len(users.users) == 5


def test_create_user_listing_failure(service, users):
    users.listing_fails = True
    with pytest.raises(ValidationError, match="GetUser is problem"):
        service.create_user(User(name="Alice", position="Dev"))


def test_get_users_delegates(service):
    created = service.create_user(User(name="Alice", position="Dev"))
    assert service.get_users() == [created]


def test_get_user_by_id_zero(service):
    with pytest.raises(ValidationError, match="user ID is required"):
        service.get_user_by_id(0)


def test_get_user_by_id_passes_through_not_found(service):
    with pytest.raises(NotFoundError, match="record not found"):
        service.get_user_by_id(99)


def test_update_user_partial(service):
    created = service.create_user(User(name="Alice", position="Dev"))
    updated = service.update_user(created.id, User(position="Lead"))
    assert updated == User(id=created.id, name="Alice", position="Lead")


def test_update_user_missing(service):
    with pytest.raises(NotFoundError, match="user not found"):
        service.update_user(7, User(name="x"))


def test_update_user_zero_id(service):
    with pytest.raises(ValidationError, match="user ID is required"):
        service.update_user(0, User(name="x"))


@pytest.mark.parametrize(
    "patch, message",
    [
        (User(name=""), "user name cannot be empty"),
        (User(position=""), "user position cannot be empty"),
    ],
)
def test_update_user_rejects_empty(service, patch, message):
    created = service.create_user(User(name="Alice", position="Dev"))
    with pytest.raises(ValidationError, match=message):
        service.update_user(created.id, patch)


def test_delete_user(service):
    created = service.create_user(User(name="Alice", position="Dev"))
    service.delete_user(created.id)
    assert service.get_users() == []
    with pytest.raises(NotFoundError, match="record not found"):
        service.get_user_by_id(created.id)


def test_delete_user_missing(service):
    with pytest.raises(NotFoundError, match="user not found"):
        service.delete_user(3)


def test_delete_user_zero(service):
    with pytest.raises(ValidationError, match="user ID is required"):
        service.delete_user(0)


def test_create_profile_delegates(profile_service, profiles):
    profile = UserProfile(user_id=3, skilled_language="Go")
    result = profile_service.create_user_profile(profile)
    assert result.skilled_language == "Go"
    assert profiles.calls == [("create", profile)]


@pytest.mark.parametrize(
    "profile, message",
    [
        (UserProfile(skilled_language="Go"), "user ID is required"),
        (UserProfile(user_id=0, skilled_language="Go"), "user ID is required"),
        (UserProfile(user_id=1), "skilled programming language is required"),
        (
            UserProfile(user_id=1, skilled_language=""),
            "skilled programming language is required",
        ),
    ],
)
def test_create_profile_validation(profile_service, profiles, profile, message):
    with pytest.raises(ValidationError, match=message):
        profile_service.create_user_profile(profile)
    assert profiles.calls == []


def test_profile_by_blank_name(profile_service):
    with pytest.raises(ValidationError, match="user name is required"):
        profile_service.get_user_profile_by_user_name("  \t")


def test_profile_by_name_delegates(profile_service, profiles):
    result = profile_service.get_user_profile_by_user_name("Alice")
    assert result == UserProfile(id=1, user_id=1, skilled_language="Go")
    assert profiles.calls == [("by_name", "Alice")]


def test_update_profile_zero(profile_service):
    with pytest.raises(ValidationError, match="profile ID is required"):
        profile_service.update_user_profile(0, UserProfile())


def test_update_profile_empty_language(profile_service):
    with pytest.raises(
        ValidationError, match="skilled programming language cannot be empty"
    ):
        profile_service.update_user_profile(2, UserProfile(skilled_language=""))


def test_update_profile_delegates(profile_service, profiles):
    patch = UserProfile(project1="web")
    result = profile_service.update_user_profile(2, patch)
    assert result.project1 == "web"
    assert profiles.calls == [("update", 2, patch)]


def test_delete_profile_zero(profile_service):
    with pytest.raises(ValidationError, match="profile ID is required"):
        profile_service.delete_user_profile(0)


def test_delete_profile_delegates(profile_service, profiles):
    profile_service.delete_user_profile(4)
    with pytest.raises(NotFoundError, match="record not found"):
        profile_service.delete_user_profile(4)
    assert profiles.calls == [("delete", 4), ("delete", 4)]
    assert profiles.known_ids == set()


def test_search_blank(profile_service):
    with pytest.raises(ValidationError, match="search name cannot be empty"):
        profile_service.search_user_by_name("   ")


def test_search_and_list_delegate(profile_service, profiles):
    assert profile_service.search_user_by_name("al") == []
    assert profile_service.get_all_user_profiles() == []
    assert profiles.calls == [("search", "al"), ("all",)]