# hexusers

A small JSON-over-HTTP service that keeps users and their programming
profiles in a SQLite database. The code is split into ports (abstract
interfaces in `hexusers.ports`), a core holding the business rules
(`hexusers.core`), SQLite storage (`hexusers.repository`), request handlers
(`hexusers.handlers`) and the Flask application (`hexusers.app`).

## Installing

```
pip install .
```

## Running

```
hexusers
```

This opens (and creates, when needed) `orders.db` in the current directory,
creates the tables if they are missing, and serves on `0.0.0.0:8000`.

Options:

- `--db PATH` – the SQLite database file (default `orders.db`)
- `--host ADDRESS` – the address to listen on (default `0.0.0.0`)
- `--port PORT` – the port to listen on (default `8000`)

If the database cannot be opened, the command exits with
`failed to connect database: ...`.

## Endpoints

Users:

| Method | Path          | Does                                   |
|--------|---------------|----------------------------------------|
| POST   | `/users`      | create a user (`name`, `position`)     |
| GET    | `/users`      | list all users                         |
| GET    | `/users/<id>` | fetch one user                         |
| PATCH  | `/users/<id>` | change the fields that are given       |
| DELETE | `/users/<id>` | remove a user                          |

Profiles:

| Method | Path                        | Does                                        |
|--------|-----------------------------|---------------------------------------------|
| POST   | `/profiles`                 | create a profile (`user_id`, `skilled_language`, `project1`..`project3`) |
| GET    | `/profiles`                 | list all profiles                           |
| GET    | `/profiles/user/<userName>` | the first profile of the user with that name |
| PATCH  | `/profiles/<id>`            | change the fields that are given            |
| DELETE | `/profiles/<id>`            | remove a profile                            |
| GET    | `/search/<name>`            | profiles of users whose name contains `name` (SQL `LIKE`) |

Ids in paths must be unsigned decimal numbers that fit in 32 bits; anything
else gets `400` with `Invalid user ID` or `Invalid profile ID`.

Successful replies look like `{"message": ..., "data": ...}` (delete replies
carry only `message`); failures look like `{"error": ...}` with a 400, 404 or
500 status. Creation replies use status 201.

Rules enforced by the core:

- a user needs a non-empty name and position, and names are unique;
- a new user is refused once five users exist;
- a profile needs an existing user and a non-empty skilled language;
- an update may not set a name, position or skilled language to an empty
  string; fields left out of an update keep their stored values.

## Using it from Python

```python
from hexusers.app import create_app

app = create_app("users.db")
client = app.test_client()
reply = client.post("/users", json={"name": "alice", "position": "engineer"})
print(reply.status_code, reply.get_json())
```

The pieces can also be assembled by hand:

```python
from hexusers.repository import open_database, migrate, SqliteUserRepository
from hexusers.core import UserService
from hexusers.models import User

conn = open_database(":memory:")
migrate(conn)
users = UserService(SqliteUserRepository(conn))
created = users.create_user(User(name="bob", position="tester"))
print(created.to_dict())
```

Service and storage errors are raised as subclasses of
`hexusers.models.ServiceError`: `ValidationError`, `NotFoundError` and
`StorageError`.

## What it does not do

There is no authentication or access control, and `hexusers` serves through
Flask's built-in server, which is meant for development rather than
production traffic. Deleting a user leaves that user's profiles in place.

## Tests

```
pip install .[test]
pytest
```