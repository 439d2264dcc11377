"""PostgreSQL storage implementation."""

import json
import logging
import os

import psycopg2
from psycopg2.extras import RealDictCursor

from core.config import STORAGE_KEY
from core.interfaces import StateStore

logger = logging.getLogger(__name__)


class PostgresStorage(StateStore):
    """Keeps the session blob as a JSONB row in a key/value table."""

    def __init__(self, db_url: str = None, key: str = STORAGE_KEY):
        self.db_url = db_url or os.environ.get(
            'DATABASE_URL',
            'postgresql://localhost:5432/kelime'
        )
        self.key = key
        self._conn = None
        self._initialized = False

    @property
    def conn(self):
        """Lazy connection initialization."""
        if self._conn is None or self._conn.closed:
            self._conn = psycopg2.connect(self.db_url)
            if not self._initialized:
                self._init_db()
                self._initialized = True
        return self._conn

    def _init_db(self):
        """Create the table if it doesn't exist."""
        with self._conn.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS kv_state (
                    key VARCHAR(255) PRIMARY KEY,
                    value JSONB NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
        self._conn.commit()

    def close(self):
        """Close the database connection."""
        if self._conn and not self._conn.closed:
            self._conn.close()

    def load(self) -> str | None:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT value FROM kv_state WHERE key = %s",
                    (self.key,)
                )
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.warning(f"Error loading state: {e}")
            self.conn.rollback()
            return None
        if row is None:
            return None
        # psycopg2 decodes JSONB columns into Python objects
        value = row['value']
        return value if isinstance(value, str) else json.dumps(value)

    def save(self, blob: str) -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO kv_state (key, value, updated_at)
                    VALUES (%s, %s, CURRENT_TIMESTAMP)
                    ON CONFLICT (key)
                    DO UPDATE SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP
                """, (self.key, blob))
            self.conn.commit()
        except psycopg2.Error as e:
            logger.warning(f"Error saving state: {e}")
            self.conn.rollback()
            raise

    def clear(self) -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute("DELETE FROM kv_state WHERE key = %s", (self.key,))
            self.conn.commit()
        except psycopg2.Error as e:
            logger.warning(f"Error clearing state: {e}")
            self.conn.rollback()
            raise
