"""Tests for the SQLite bootstrap helpers."""

import os

from asgard_api.app.core.db import MIGRATIONS, get_cursor, get_database_path, init_db, ping


def test_init_db_is_idempotent(database_path):
    init_db(database_path)

    with get_cursor(database_path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
        tables = {
            row["name"]
            for row in cursor.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }

    assert versions == [version for version, _ in MIGRATIONS]
    assert {"users", "products", "orders"} <= tables


def test_foreign_keys_enabled(database_path):
    with get_cursor(database_path) as cursor:
        assert cursor.execute("PRAGMA foreign_keys").fetchone()[0] == 1


def test_ping(database_path):
    assert ping(database_path) is True


def test_relative_path_resolves_to_project_root():
    path = get_database_path("relative.db")

    assert os.path.isabs(path)
    assert os.path.basename(path) == "relative.db"
    assert os.path.isdir(os.path.join(os.path.dirname(path), "asgard_api"))
