"""Catalog errors and translation of engine constraint failures."""

import re

from sqlalchemy.exc import IntegrityError

# SQLSTATE codes of the integrity constraint violation class
SQLSTATE_NOT_NULL = "23502"
SQLSTATE_FOREIGN_KEY = "23503"
SQLSTATE_UNIQUE = "23505"

_SQLITE_COLUMN_PATTERN = re.compile(r"constraint failed: (?P<table>\w+)\.(?P<column>\w+)")


class CatalogError(Exception):
    """Base class for song catalog errors."""


class IntegrityViolation(CatalogError):
    """A write was rejected by a database constraint."""

    def __init__(self, message: str, table: str | None = None, column: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.table = table
        self.column = column


class ReferentialIntegrityError(IntegrityViolation):
    """A reference points to an album that does not exist."""


class UniquenessViolation(IntegrityViolation):
    """A row with the same key already exists."""


class NotNullViolation(IntegrityViolation):
    """A mandatory field was omitted."""


class MigrationPreconditionError(CatalogError):
    """A migration cannot be applied to the current data."""

    def __init__(self, message: str, table: str, row_count: int) -> None:
        super().__init__(message)
        self.table = table
        self.row_count = row_count


def _sqlstate(orig: BaseException | None) -> str | None:
    # psycopg exposes sqlstate, psycopg2 pgcode
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if isinstance(code, str):
            return code
    return None


def translate_integrity_error(error: IntegrityError) -> IntegrityViolation:
    """Map a SQLAlchemy IntegrityError to the matching catalog error.

    Args:
        error: The error raised by the engine

    Returns:
        The catalog error describing the violated constraint
    """
    message = str(error.orig) if error.orig is not None else str(error)
    table = column = None

    match = _SQLITE_COLUMN_PATTERN.search(message)
    if match:
        table, column = match.group("table"), match.group("column")

    diag = getattr(error.orig, "diag", None)
    if diag is not None:
        table = getattr(diag, "table_name", None) or table
        column = getattr(diag, "column_name", None) or column

    code = _sqlstate(error.orig)
    if code == SQLSTATE_FOREIGN_KEY or "FOREIGN KEY constraint failed" in message:
        return ReferentialIntegrityError(message, table, column)
    if code == SQLSTATE_UNIQUE or "UNIQUE constraint failed" in message:
        return UniquenessViolation(message, table, column)
    if code == SQLSTATE_NOT_NULL or "NOT NULL constraint failed" in message:
        return NotNullViolation(message, table, column)
    return IntegrityViolation(message, table, column)
