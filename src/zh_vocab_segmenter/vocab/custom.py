"""
vocab/custom.py

What this file does:
- Parses free-form "words I already know" input.
- Stores those words in the state DB (custom_vocab table).

How it fits:
- The stored words join the selected lesson words in the blocklist
  (vocab/lessons.py), which is also the supplementary half of the
  Dictionary used for segmentation.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from datetime import datetime, timezone
from typing import Iterable, List, Union

log = logging.getLogger(__name__)

_SEP_RE = re.compile(r"[\n,、\s]+")


def parse_vocab_input(text: str) -> List[str]:
    return [w.strip() for w in _SEP_RE.split(text or "") if w.strip()]


def read_custom_words(conn: sqlite3.Connection) -> List[str]:
    """Stored words, without creating the table when the DB predates it."""
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name='custom_vocab'"
    ).fetchone()
    if row is None:
        return []
    return sorted(r[0] for r in conn.execute("SELECT word FROM custom_vocab"))


class CustomVocabStore:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def add(self, words: Union[str, Iterable[str]]) -> int:
        """Add words (raw text or an iterable); returns how many were new."""
        if isinstance(words, str):
            words = parse_vocab_input(words)
        now = datetime.now(timezone.utc).isoformat()

        added = 0
        for w in words:
            w = w.strip()
            if not w:
                continue
            cur = self.conn.execute(
                "INSERT OR IGNORE INTO custom_vocab(word, added_at) VALUES(?, ?)",
                (w, now),
            )
            added += cur.rowcount
        self.conn.commit()
        log.debug("custom vocab: %d new word(s)", added)
        return added

    def words(self) -> List[str]:
        rows = self.conn.execute("SELECT word FROM custom_vocab").fetchall()
        return sorted(r["word"] for r in rows)

    def clear(self) -> int:
        cur = self.conn.execute("DELETE FROM custom_vocab")
        self.conn.commit()
        log.info("cleared %d custom word(s)", cur.rowcount)
        return cur.rowcount

    def __contains__(self, word: object) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM custom_vocab WHERE word = ?", (word,)
        ).fetchone()
        return row is not None

    def __len__(self) -> int:
        return int(self.conn.execute("SELECT COUNT(*) AS n FROM custom_vocab").fetchone()["n"])
