"""SQLite storage for users and profiles."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from typing import Optional

from .models import NotFoundError, StorageError, User, UserProfile, ValidationError
from .ports import UserProfileSecondaryPort, UserSecondaryPort

logger = logging.getLogger(__name__)

RECORD_NOT_FOUND = "record not found"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE,
        position TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_profiles (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        skilled_language TEXT NOT NULL,
        project1 TEXT,
        project2 TEXT,
        project3 TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_user_profiles_user_id ON user_profiles (user_id)",
)

_PROFILE_COLUMNS = "id, user_id, skilled_language, project1, project2, project3"


def open_database(path: str) -> sqlite3.Connection:
    """Open (or create) the SQLite database at ``path``."""
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def migrate(conn: sqlite3.Connection) -> None:
    """Create the tables and indexes if they do not exist yet."""
    with conn:
        for statement in _SCHEMA:
            conn.execute(statement)


def _user_from_row(row: sqlite3.Row) -> User:
    return User(id=row["id"], name=row["name"], position=row["position"])


def _profile_from_row(row: sqlite3.Row) -> UserProfile:
    return UserProfile(
        id=row["id"],
        user_id=row["user_id"],
        skilled_language=row["skilled_language"],
        project1=row["project1"],
        project2=row["project2"],
        project3=row["project3"],
    )


class _Repository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc

    def _query_one(self, sql: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        rows = self._query(sql, params)
        return rows[0] if rows else None

    def _write(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc


class SqliteUserRepository(_Repository, UserSecondaryPort):
    """Users kept in the ``users`` table."""

    def create_user(self, user: User) -> User:
        cursor = self._write(
            "INSERT INTO users (id, name, position) VALUES (?, ?, ?)",
            (user.id, user.name, user.position),
        )
        return replace(user, id=cursor.lastrowid)

    def get_users(self) -> list[User]:
        rows = self._query("SELECT id, name, position FROM users ORDER BY id")
        return [_user_from_row(row) for row in rows]

    def get_user_by_id(self, user_id: int) -> User:
        row = self._query_one(
            "SELECT id, name, position FROM users WHERE id = ? ORDER BY id LIMIT 1",
            (user_id,),
        )
        if row is None:
            raise NotFoundError(RECORD_NOT_FOUND)
        return _user_from_row(row)

    def update_user(self, user_id: int, user: User) -> User:
        current = self.get_user_by_id(user_id)
        merged = replace(
            current,
            name=user.name if user.name is not None else current.name,
            position=user.position if user.position is not None else current.position,
        )
        self._write(
            "UPDATE users SET name = ?, position = ? WHERE id = ?",
            (merged.name, merged.position, merged.id),
        )
        return merged

    def delete_user(self, user_id: int) -> None:
        current = self.get_user_by_id(user_id)
        self._write("DELETE FROM users WHERE id = ?", (current.id,))


class SqliteUserProfileRepository(_Repository, UserProfileSecondaryPort):
    """Profiles kept in the ``user_profiles`` table."""

    def _find_profile(self, profile_id: int) -> UserProfile:
        row = self._query_one(
            f"SELECT {_PROFILE_COLUMNS} FROM user_profiles "
            "WHERE id = ? ORDER BY id LIMIT 1",
            (profile_id,),
        )
        if row is None:
            raise NotFoundError(RECORD_NOT_FOUND)
        return _profile_from_row(row)

    def create_user_profile(self, profile: UserProfile) -> UserProfile:
        if profile.user_id is None:
            raise ValidationError("user ID is required")
        user_row = self._query_one(
            "SELECT id, name, position FROM users WHERE id = ? ORDER BY id LIMIT 1",
            (profile.user_id,),
        )
        if user_row is None:
            raise NotFoundError(f"user with ID '{profile.user_id}' not found")
        user = _user_from_row(user_row)
        logger.debug(
            "User found: ID=%s, Name=%s, Position=%s", user.id, user.name, user.position
        )
        try:
            with self._conn:
                cursor = self._conn.execute(
                    f"INSERT INTO user_profiles ({_PROFILE_COLUMNS}) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    (
                        profile.id,
                        profile.user_id,
                        profile.skilled_language,
                        profile.project1,
                        profile.project2,
                        profile.project3,
                    ),
                )
        except sqlite3.Error as exc:
            raise StorageError(f"error creating profile: {exc}") from exc
        created = replace(profile, id=cursor.lastrowid)
        logger.debug("Profile created: ID=%s, UserID=%s", created.id, created.user_id)
        return created

    def get_user_profile_by_user_name(self, user_name: str) -> UserProfile:
        user_row = self._query_one(
            "SELECT id FROM users WHERE name = ? ORDER BY id LIMIT 1", (user_name,)
        )
        if user_row is None:
            raise NotFoundError(f"user with name '{user_name}' not found")
        row = self._query_one(
            f"SELECT {_PROFILE_COLUMNS} FROM user_profiles "
            "WHERE user_id = ? ORDER BY id LIMIT 1",
            (user_row["id"],),
        )
        if row is None:
            raise NotFoundError(RECORD_NOT_FOUND)
        return _profile_from_row(row)

    def update_user_profile(self, profile_id: int, profile: UserProfile) -> UserProfile:
        current = self._find_profile(profile_id)
        changes = {
            name: getattr(profile, name)
            for name in ("skilled_language", "project1", "project2", "project3")
            if getattr(profile, name) is not None
        }
        merged = replace(current, **changes)
        self._write(
            "UPDATE user_profiles SET user_id = ?, skilled_language = ?, "
            "project1 = ?, project2 = ?, project3 = ? WHERE id = ?",
            (
                merged.user_id,
                merged.skilled_language,
                merged.project1,
                merged.project2,
                merged.project3,
                merged.id,
            ),
        )
        return merged

    def delete_user_profile(self, profile_id: int) -> None:
        current = self._find_profile(profile_id)
        self._write("DELETE FROM user_profiles WHERE id = ?", (current.id,))

    def search_user_by_name(self, name: str) -> list[UserProfile]:
        rows = self._query(
            "SELECT user_profiles.* FROM user_profiles "
            "JOIN users ON user_profiles.user_id = users.id "
            "WHERE users.name LIKE ? ORDER BY user_profiles.id",
            (f"%{name}%",),
        )
        return [_profile_from_row(row) for row in rows]

    def get_all_user_profiles(self) -> list[UserProfile]:
        rows = self._query(f"SELECT {_PROFILE_COLUMNS} FROM user_profiles ORDER BY id")
        return [_profile_from_row(row) for row in rows]