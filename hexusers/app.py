"""The Flask application and the command that serves it."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import threading
from os import PathLike
from typing import Callable, Optional, Sequence, Union

from flask import Flask, jsonify, request

from .core import UserProfileService, UserService
from .handlers import Reply, UserHandlers, UserProfileHandlers
from .repository import (
    SqliteUserProfileRepository,
    SqliteUserRepository,
    migrate,
    open_database,
)

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "orders.db"
DEFAULT_PORT = 8000


def create_app(db_path: Union[str, PathLike] = DEFAULT_DB_PATH) -> Flask:
    """Open the database at ``db_path``, migrate it and wire up every route."""
    conn = open_database(str(db_path))
    migrate(conn)

    users = UserHandlers(UserService(SqliteUserRepository(conn)))
    profiles = UserProfileHandlers(
        UserProfileService(SqliteUserProfileRepository(conn))
    )
    lock = threading.Lock()

    app = Flask(__name__)
    app.extensions["hexusers.db"] = conn

    def respond(call: Callable[[], Reply]):
        with lock:
            reply = call()
        return jsonify(reply.body), reply.status

    def body() -> bytes:
        return request.get_data()

    @app.post("/users")
    def create_user():
        return respond(lambda: users.create_user(body()))

    @app.get("/users")
    def get_users():
        return respond(users.get_users)

    @app.get("/users/<raw_id>")
    def get_user_by_id(raw_id: str):
        return respond(lambda: users.get_user_by_id(raw_id))

    @app.patch("/users/<raw_id>")
    def update_user(raw_id: str):
        return respond(lambda: users.update_user(raw_id, body()))

    @app.delete("/users/<raw_id>")
    def delete_user(raw_id: str):
        return respond(lambda: users.delete_user(raw_id))

    @app.post("/profiles")
    def create_user_profile():
        return respond(lambda: profiles.create_user_profile(body()))

    @app.get("/profiles")
    def get_all_user_profiles():
        return respond(profiles.get_all_user_profiles)

    @app.get("/profiles/user/<user_name>")
    def get_user_profile_by_user_name(user_name: str):
        return respond(lambda: profiles.get_user_profile_by_user_name(user_name))

    @app.patch("/profiles/<raw_id>")
    def update_user_profile(raw_id: str):
        return respond(lambda: profiles.update_user_profile(raw_id, body()))

    @app.delete("/profiles/<raw_id>")
    def delete_user_profile(raw_id: str):
        return respond(lambda: profiles.delete_user_profile(raw_id))

    @app.get("/search/<name>")
    def search_user_by_name(name: str):
        return respond(lambda: profiles.search_user_by_name(name))

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the user API until interrupted."""
    parser = argparse.ArgumentParser(
        prog="hexusers", description="Serve the users and profiles HTTP API."
    )
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        app = create_app(args.db)
    except sqlite3.Error as exc:
        raise SystemExit(f"failed to connect database: {exc}") from exc

    logger.info("Server starting on :%d", args.port)
    app.run(host=args.host, port=args.port)
    return 0