"""
Translation of native storage failures into ``RepoError``.

``map_storage_error`` is the single place where adapters turn a raw
exception into the repository taxonomy.  It is pure and takes the
store‑specific "unique violation" test as a parameter, so each adapter
shares the same mapping regardless of the resource it serves.
"""

import sqlite3
from typing import Callable

from .base import Conflict, NotFound, RepoError, Unexpected


class RowNotFound(LookupError):
    """Raised by an adapter when a statement returned or touched no row."""


def is_sqlite_unique_violation(exc: BaseException) -> bool:
    """Return ``True`` if ``exc`` is SQLite's UNIQUE constraint failure.

    Python 3.11+ exposes the extended result code name on the
    exception; older interpreters only carry it in the message.
    """
    if not isinstance(exc, sqlite3.IntegrityError):
        return False
    error_name = getattr(exc, "sqlite_errorname", None)
    if error_name is not None:
        return error_name == "SQLITE_CONSTRAINT_UNIQUE"
    return str(exc).startswith("UNIQUE constraint failed")


def map_storage_error(
    exc: BaseException,
    is_unique_violation: Callable[[BaseException], bool] = is_sqlite_unique_violation,
) -> RepoError:
    """Map ``exc`` to ``NotFound``, ``Conflict`` or ``Unexpected``."""
    if isinstance(exc, RepoError):
        return exc
    if isinstance(exc, RowNotFound):
        return NotFound()
    if is_unique_violation(exc):
        return Conflict()
    return Unexpected(str(exc) or exc.__class__.__name__)
