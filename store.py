import sqlite3


def init_db(db_path: str = "nextstep.db") -> None:
    """Initialize the SQLite key-value table."""
    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE IF NOT EXISTS kv_store (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.commit()
    conn.close()


def get_item(key: str, db_path: str = "nextstep.db") -> str | None:
    """Return the stored value for key, or None if it was never set."""
    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = cursor.fetchone()
    finally:
        conn.close()
    return row[0] if row else None


def set_item(key: str, value: str, db_path: str = "nextstep.db") -> None:
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(
            "INSERT OR REPLACE INTO kv_store (key, value, updated_at) "
            "VALUES (?, ?, CURRENT_TIMESTAMP)",
            (key, value),
        )
        conn.commit()
    finally:
        conn.close()


def remove_item(key: str, db_path: str = "nextstep.db") -> None:
    conn = sqlite3.connect(db_path)
    try:
        conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        conn.commit()
    finally:
        conn.close()
