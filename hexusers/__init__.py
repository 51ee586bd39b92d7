"""JSON HTTP service for users and their profiles, stored in SQLite."""

__version__ = "0.1.0"