"""
store/db.py

What this file does:
- Defines the SQLite schema for the user's state DB.
- Provides connect() and init_db() helpers.

How it fits:
- vocab/custom.py keeps the hand-entered known words in custom_vocab.
- meta holds schema_version so later migrations can detect old files.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

SCHEMA_VERSION = 1

DDL = """
CREATE TABLE IF NOT EXISTS meta (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS custom_vocab (
  word TEXT PRIMARY KEY,
  added_at TEXT NOT NULL
);
"""


def connect(db_path: str | Path = ":memory:") -> sqlite3.Connection:
    db_path = str(db_path)
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    conn.executescript(DDL)
    conn.execute(
        "INSERT OR REPLACE INTO meta(key, value) VALUES(?, ?)",
        ("schema_version", str(SCHEMA_VERSION)),
    )
    conn.commit()


def read_meta(conn: sqlite3.Connection) -> dict[str, str]:
    rows = conn.execute("SELECT key, value FROM meta").fetchall()
    return {r["key"]: r["value"] for r in rows}
