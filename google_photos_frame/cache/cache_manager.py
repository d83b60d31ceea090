"""Temporary cache operations for Google Photos Frame."""

import json
import logging
import sqlite3
import time
from typing import Any, Optional, Tuple

from google_photos_frame.exceptions import CacheError

logger = logging.getLogger(__name__)


class CacheManager:
    """Key/value store backed by a SQLite table, with optional expiry.

    Values are stored as JSON, so anything json.dumps accepts can be cached.
    Several named caches can share one database file.
    """

    def __init__(self, db_path: str = "frame_cache.db", name: str = "cache", ttl: Optional[int] = None):
        """Initialize cache manager.

        Args:
            db_path: Path to SQLite database file
            name: Name of the cache, used as the table name
            ttl: Seconds an item stays valid, None to keep items forever
        """
        if not name.isidentifier():
            raise ValueError(f"Invalid cache name: {name!r}")

        self.db_path = db_path
        self.name = name
        self.ttl = ttl
        self.conn = None
        self.cursor = None

    def _execute(self, sql: str, params: Tuple[Any, ...] = None) -> None:
        """Execute SQL, connecting and creating the cache table on first use.

        Args:
            sql: SQL query to execute
            params: Query parameters
        """
        if not self.conn or not self.cursor:
            self.connect()

        if params:
            self.cursor.execute(sql, params)
        else:
            self.cursor.execute(sql)

    def connect(self) -> None:
        """Connect to the database and make sure the cache table exists."""
        try:
            self.conn = sqlite3.connect(self.db_path)
            self.cursor = self.conn.cursor()
            self.cursor.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self.name} (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    expires_at REAL
                )
                """
            )
            self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Failed to connect to cache database: {e}") from e

    def close(self) -> None:
        """Close the database connection."""
        if self.conn:
            self.conn.close()
        self.conn = None
        self.cursor = None

    def get_item(self, key: str) -> Any:
        """Get a cached value.

        Args:
            key: Key of the item, usually a user ID

        Returns:
            The cached value, or None if missing or expired
        """
        try:
            self._execute(f"SELECT value, expires_at FROM {self.name} WHERE key = ?", (key,))
            row = self.cursor.fetchone()
        except sqlite3.Error as e:
            raise CacheError(f"Failed to read {self.name} cache: {e}") from e

        if not row:
            return None

        value, expires_at = row
        if expires_at is not None and expires_at <= time.time():
            logger.debug("Cache %s item %s expired", self.name, key)
            self.remove_item(key)
            return None

        return json.loads(value)

    def set_item(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous value for the key."""
        expires_at = time.time() + self.ttl if self.ttl else None
        try:
            self._execute(
                f"INSERT OR REPLACE INTO {self.name} (key, value, expires_at) VALUES (?, ?, ?)",
                (key, json.dumps(value), expires_at),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Failed to write {self.name} cache: {e}") from e

    def remove_item(self, key: str) -> None:
        """Remove a value if present."""
        try:
            self._execute(f"DELETE FROM {self.name} WHERE key = ?", (key,))
            self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Failed to remove item from {self.name} cache: {e}") from e

    def clear(self) -> None:
        """Remove every value of this cache."""
        try:
            self._execute(f"DELETE FROM {self.name}")
            self.conn.commit()
        except sqlite3.Error as e:
            raise CacheError(f"Failed to clear {self.name} cache: {e}") from e
