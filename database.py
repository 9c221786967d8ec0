import sqlite3
import json
from typing import Any, Dict, Optional

from logs import log_message, log_error


class KeyValueStore:
    """JSON key/value persistence used for stats and daily progress."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def get_json(self, key: str) -> Optional[Any]:
        """Missing, unreadable and unparsable entries all come back as None."""
        try:
            raw = self.get(key)
        except (sqlite3.Error, OSError) as e:
            log_error("STORE", f"Error reading {key}", e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            log_message("STORE", f"⚠️ Corrupt entry {key} ignored: {e}")
            return None

    def set_json(self, key: str, value: Any) -> bool:
        try:
            self.set(key, json.dumps(value))
            return True
        except (sqlite3.Error, OSError, TypeError, ValueError) as e:
            log_error("STORE", f"Error writing {key}", e)
            return False


class SqliteStore(KeyValueStore):
    def __init__(self, db_path: str):
        self.db_path = db_path
        with self.get_connection() as conn:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
            )

    def get_connection(self):
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def get(self, key: str) -> Optional[str]:
        with self.get_connection() as conn:
            cur = conn.cursor()
            cur.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cur.fetchone()
            return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        with self.get_connection() as conn:
            conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )


class MemoryStore(KeyValueStore):
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
