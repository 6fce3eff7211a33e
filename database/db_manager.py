import logging
import os
import sqlite3
from utils.constants import DB_FILE

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Key-value storage backed by a single SQLite table.

    A manager built with ``unavailable()`` has no backing store: reads return
    None and writes are dropped, so callers keep working in memory only.
    """

    def __init__(self, db_path: str | None = None, available: bool = True):
        self.db_path = db_path or DB_FILE
        self.available = available
        self._conn: sqlite3.Connection | None = None

    @classmethod
    def unavailable(cls) -> "DatabaseManager":
        return cls(available=False)

    def get_connection(self) -> sqlite3.Connection:
        if not self.available:
            raise RuntimeError("Storage is not available.")
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def initialize(self):
        """Create schema. Safe to call repeatedly."""
        if not self.available:
            return
        conn = self.get_connection()
        self._create_schema(conn)
        conn.commit()

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS storage (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def get_item(self, key: str) -> str | None:
        if not self.available:
            return None
        row = self.get_connection().execute(
            "SELECT value FROM storage WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else None

    def set_item(self, key: str, value: str):
        if not self.available:
            return
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO storage(key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()

    def remove_item(self, key: str):
        if not self.available:
            return
        conn = self.get_connection()
        conn.execute("DELETE FROM storage WHERE key = ?", (key,))
        conn.commit()

    def keys(self) -> list[str]:
        if not self.available:
            return []
        rows = self.get_connection().execute(
            "SELECT key FROM storage ORDER BY key"
        ).fetchall()
        return [r["key"] for r in rows]

    @staticmethod
    def open(db_folder: str | None = None) -> "DatabaseManager":
        """Startup factory: opens kakeibo.db in db_folder (or CWD).

        Falls back to an unavailable manager when the file cannot be opened.
        """
        db_path = os.path.join(db_folder, DB_FILE) if db_folder else DB_FILE
        db = DatabaseManager(db_path)
        try:
            db.initialize()
        except sqlite3.Error as exc:
            logger.warning("Storage at %s unavailable, changes will not persist: %s", db_path, exc)
            db.close()
            return DatabaseManager.unavailable()
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
