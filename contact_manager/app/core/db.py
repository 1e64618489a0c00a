"""
SQLite backed contact store and simple migration system.

``ContactStore`` is the only piece of code that talks to the database.
It is constructed explicitly by ``create_app`` and opened/closed by the
application lifespan; services receive it as a constructor argument.
It exposes a small, collection style interface (insert, find, update,
delete) over the ``contacts`` table.  To switch to another database
you would replace this class and keep its method signatures.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.

Email uniqueness is *not* enforced here.  The validation rules check
for an existing email before every write, which leaves a window in
which two concurrent writers can both pass the check.
"""

import logging
import os
import sqlite3
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .errors import StoreError
from ..schemas.contact import Contact


logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Ordered list of (version, sql).  Append new migrations with an
# incremented version number; never edit an applied one.
MIGRATIONS: List[tuple] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS contacts (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    (
        2,
        """
        -- Lookups by email happen on every create and update.
        CREATE INDEX IF NOT EXISTS idx_contacts_email ON contacts(email);
        """,
    ),
]

WRITABLE_FIELDS = ("name", "email", "phone")


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged; relative
    paths are resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class ContactStore:
    """Persisted collection of contacts.

    Parameters
    ----------
    database_url : str
        SQLite file path or ``:memory:``.
    """

    def __init__(self, database_url: str) -> None:
        self.database_path = resolve_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect to the database and apply pending migrations."""
        if self._conn is not None:
            return
        try:
            # A single connection serves every request; the ASGI server
            # may call us from a worker thread.
            conn = sqlite3.connect(self.database_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            self._conn = conn
            self._migrate()
        except sqlite3.Error as exc:
            self.close()
            raise StoreError(f"Cannot open contact store at {self.database_path}") from exc
        logger.info("Contact store opened at %s", self.database_path)

    def close(self) -> None:
        """Close the connection.  Safe to call more than once."""
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Contact store closed")

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and translate driver errors."""
        if self._conn is None:
            raise StoreError("Contact store is not open")
        try:
            cursor = self._conn.cursor()
            yield cursor
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            raise StoreError(str(exc)) from exc

    def _migrate(self) -> None:
        with self._cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
                    logger.debug("Applied migration %s", version)

    def insert(self, fields: Dict[str, str]) -> Contact:
        """Insert a new contact and return it with its generated id."""
        contact_id = uuid.uuid4().hex
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO contacts (id, name, email, phone) VALUES (?, ?, ?, ?)",
                (contact_id, fields["name"], fields["email"], fields["phone"]),
            )
        return Contact(id=contact_id, name=fields["name"], email=fields["email"], phone=fields["phone"])

    def find(self) -> List[Contact]:
        """Return all contacts in insertion order."""
        with self._cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, name, email, phone FROM contacts ORDER BY rowid"
            ).fetchall()
        return [self._row_to_contact(row) for row in rows]

    def find_by_id(self, contact_id: str) -> Optional[Contact]:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, email, phone FROM contacts WHERE id = ?",
                (contact_id,),
            ).fetchone()
        return self._row_to_contact(row) if row else None

    def find_one(self, email: str) -> Optional[Contact]:
        """Return the first contact registered with ``email``, if any."""
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, email, phone FROM contacts WHERE email = ? ORDER BY rowid LIMIT 1",
                (email,),
            ).fetchone()
        return self._row_to_contact(row) if row else None

    def update(self, contact_id: str, fields: Dict[str, str]) -> bool:
        """Overwrite name, email and phone of ``contact_id``.

        The id column is never written.  Returns ``True`` if a record
        matched.
        """
        with self._cursor() as cursor:
            cursor.execute(
                """
                UPDATE contacts
                SET name = ?, email = ?, phone = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (*(fields[k] for k in WRITABLE_FIELDS), contact_id),
            )
            return cursor.rowcount > 0

    def delete(self, contact_id: str) -> int:
        """Delete ``contact_id`` and return the number of removed rows."""
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
            return cursor.rowcount

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> Contact:
        return Contact(id=row["id"], name=row["name"], email=row["email"], phone=row["phone"])
