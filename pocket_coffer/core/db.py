"""
SQLite connection ownership for the vault.

One Database object holds the single connection for the process and a lock
that every statement runs under. Callers never see the raw handle outside a
``connection()`` block.
"""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional

from .config import get_data_dir, get_db_path
from .exceptions import ConflictError, QueryError, StartupError, VaultError
from ..util.logging import logger

TABLES = ('passwords', 'events', 'documents', 'settings')

SCHEMA_STATEMENTS = (
    '''
    CREATE TABLE IF NOT EXISTS passwords (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        username TEXT NOT NULL,
        password TEXT NOT NULL,
        website TEXT,
        notes TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    ''',
    '''
    CREATE TABLE IF NOT EXISTS events (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        start_date TEXT NOT NULL,
        end_date TEXT NOT NULL,
        location TEXT,
        color TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    ''',
    '''
    CREATE TABLE IF NOT EXISTS documents (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    ''',
    '''
    CREATE TABLE IF NOT EXISTS settings (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    )
    ''',
)


def _is_key_conflict(error: sqlite3.IntegrityError) -> bool:
    name = getattr(error, "sqlite_errorname", "")
    if name in ("SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE"):
        return True
    return "UNIQUE constraint failed" in str(error)


class Database:
    """Owns the vault database file and serializes all access to it."""

    def __init__(self, data_dir=None):
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create data directory {self.data_dir}: {e}")
            raise StartupError(f"cannot create data directory {self.data_dir}: {e}") from e

        self.db_path = get_db_path(self.data_dir)
        logger.info(f"Database path: {self.db_path}")

        try:
            self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
                str(self.db_path), check_same_thread=False
            )
        except sqlite3.Error as e:
            logger.error(f"Cannot open database {self.db_path}: {e}")
            raise StartupError(f"cannot open database {self.db_path}: {e}") from e
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()

        try:
            self.init_tables()
        except (VaultError, sqlite3.Error) as e:
            self.close()
            raise StartupError(f"cannot initialize database {self.db_path}: {e}") from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Hold the exclusive lock for the duration of the block."""
        with self._lock:
            if self._conn is None:
                raise QueryError("database is closed")
            yield self._conn

    def init_tables(self):
        """Create all tables if they do not exist. Safe to call repeatedly."""
        with self.connection() as conn:
            try:
                for statement in SCHEMA_STATEMENTS:
                    conn.execute(statement)
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise QueryError(f"schema creation failed: {e}") from e
        logger.info("Database tables initialized")

    def execute(self, sql: str, params: tuple = ()) -> int:
        """Run one write statement and commit it. Returns the affected row count."""
        with self.connection() as conn:
            try:
                cursor = conn.execute(sql, params)
                conn.commit()
                return cursor.rowcount
            except sqlite3.IntegrityError as e:
                conn.rollback()
                if _is_key_conflict(e):
                    raise ConflictError(f"record already exists: {e}") from e
                logger.error(f"Constraint violation: {e}")
                raise QueryError(f"constraint violation: {e}") from e
            except sqlite3.Error as e:
                conn.rollback()
                logger.error(f"Database error: {e}")
                raise QueryError(f"database error: {e}") from e

    def query(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        """Run one read statement and return every row."""
        with self.connection() as conn:
            try:
                return conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                logger.error(f"Database error: {e}")
                raise QueryError(f"database error: {e}") from e

    def health_check(self) -> bool:
        """True when the connection answers and every vault table exists."""
        try:
            rows = self.query("SELECT name FROM sqlite_master WHERE type='table'")
        except VaultError:
            return False
        table_names = {row[0] for row in rows}
        return all(table in table_names for table in TABLES)

    def close(self):
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Database connection closed")
