"""
Data access for the four vault record kinds.

Every method issues exactly one statement through the Database, so each call
is atomic and serialized with every other call. Update and delete of an id
that does not exist affect nothing and are not errors.
"""

from typing import Dict, List, Optional

from .db import Database
from .schema import CalendarEvent, Document, PasswordEntry, column_names
from ..util.logging import logger


class RecordDAO:
    """Shared CRUD for tables keyed by a caller-assigned ``id``."""

    table = None
    record_type = None
    order_by = "id ASC"

    def __init__(self, db: Database):
        self.db = db
        self.columns = column_names(self.record_type)
        self._select = f"SELECT {', '.join(self.columns)} FROM {self.table}"

    def _from_row(self, row):
        return self.record_type(**{column: row[column] for column in self.columns})

    def _values(self, record) -> tuple:
        if not isinstance(record, self.record_type):
            raise TypeError(f"expected {self.record_type.__name__}, got {type(record).__name__}")
        return tuple(getattr(record, column) for column in self.columns)

    def _fetch(self, where: str = "", params: tuple = ()) -> list:
        sql = self._select
        if where:
            sql += f" WHERE {where}"
        sql += f" ORDER BY {self.order_by}"
        return [self._from_row(row) for row in self.db.query(sql, params)]

    def list(self) -> list:
        """All records of this kind in listing order."""
        return self._fetch()

    def get(self, record_id: str):
        rows = self.db.query(f"{self._select} WHERE id = ?", (record_id,))
        return self._from_row(rows[0]) if rows else None

    def add(self, record) -> None:
        """Insert a new record. Raises ConflictError if the id is taken."""
        values = self._values(record)
        placeholders = ", ".join("?" for _ in self.columns)
        self.db.execute(
            f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
            values,
        )
        logger.log_store_operation(self.table, "add", record.id)

    def update(self, record) -> int:
        """Overwrite every non-id field of the matching row."""
        values = self._values(record)
        assignments = ", ".join(f"{column} = ?" for column in self.columns[1:])
        affected = self.db.execute(
            f"UPDATE {self.table} SET {assignments} WHERE id = ?",
            values[1:] + (values[0],),
        )
        if affected:
            logger.log_store_operation(self.table, "update", record.id)
        else:
            logger.log_store_operation(self.table, "update", record.id, status="noop")
        return affected

    def delete(self, record_id: str) -> int:
        affected = self.db.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
        logger.log_store_operation(self.table, "delete", record_id,
                                   status="success" if affected else "noop")
        return affected

    def count(self) -> int:
        rows = self.db.query(f"SELECT COUNT(*) FROM {self.table}")
        return rows[0][0] if rows else 0


class PasswordDAO(RecordDAO):
    table = "passwords"
    record_type = PasswordEntry
    order_by = "updated_at DESC, id ASC"

    def search(self, term: str) -> List[PasswordEntry]:
        """Entries whose title, username or website contains ``term``, ignoring case."""
        # SQLite lower() only folds ASCII, so match in Python
        needle = term.lower()
        return [
            entry for entry in self.list()
            if needle in entry.title.lower()
            or needle in entry.username.lower()
            or needle in (entry.website or "").lower()
        ]


class EventDAO(RecordDAO):
    table = "events"
    record_type = CalendarEvent
    order_by = "start_date ASC, id ASC"

    def between(self, start: str, end: str) -> List[CalendarEvent]:
        """Events overlapping the inclusive window [start, end].

        Bounds are compared as plain strings, so they must use the same
        ISO-8601 layout as the stored dates.
        """
        return self._fetch("start_date <= ? AND end_date >= ?", (end, start))


class DocumentDAO(RecordDAO):
    table = "documents"
    record_type = Document
    order_by = "updated_at DESC, id ASC"


class SettingsDAO:
    """Key/value settings with upsert writes."""

    table = "settings"

    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        rows = self.db.query("SELECT value FROM settings WHERE key = ?", (key,))
        return rows[0]["value"] if rows else None

    def set(self, key: str, value: str) -> None:
        self.db.execute(
            "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
            (key, value),
        )
        logger.log_store_operation(self.table, "set", key)

    def count(self) -> int:
        rows = self.db.query("SELECT COUNT(*) FROM settings")
        return rows[0][0] if rows else 0


class Store:
    """The vault store: one Database plus a DAO per record kind.

    Construct one at startup and pass it to whatever needs it.
    """

    def __init__(self, data_dir=None, db: Database = None):
        self.db = db if db is not None else Database(data_dir)
        self.passwords = PasswordDAO(self.db)
        self.events = EventDAO(self.db)
        self.documents = DocumentDAO(self.db)
        self.settings = SettingsDAO(self.db)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def db_path(self):
        return self.db.db_path

    def counts(self) -> Dict[str, int]:
        return {
            "passwords": self.passwords.count(),
            "events": self.events.count(),
            "documents": self.documents.count(),
            "settings": self.settings.count(),
        }

    def health_check(self) -> bool:
        return self.db.health_check()

    def close(self):
        self.db.close()
