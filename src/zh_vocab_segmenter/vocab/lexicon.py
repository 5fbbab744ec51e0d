"""
vocab/lexicon.py

Purpose
-------
Load a graded vocabulary (word -> level) and turn it, together with the
learner's known words, into a segment.Dictionary.

Supported sources
-----------------
- JSON object {"吃飯": "1", ...} (TBCL-style export)
- SQLite table in the HSK layout: chinese_words(simplified, level, ...)
  Optional columns are auto-detected; only simplified + level are required.

Script conversion
-----------------
convert="s2tw" (or any OpenCC config) rewrites every word at load time, so a
simplified word list can be matched against Taiwan-style traditional text.
Plain "s2t" gives OpenCC standard forms (吃饭 -> 喫飯), which TBCL text does
not use; prefer "s2tw" or "s2twp" for Taiwan material. Lookups stay
exact; nothing is converted at segmentation time.
"""

from __future__ import annotations

import json
import logging
import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Set, Union

from opencc import OpenCC

from ..segment.dictionary import MAX_WORD_LENGTH, Dictionary

log = logging.getLogger(__name__)

_UNKNOWN_LEVEL = 10**9


@dataclass(frozen=True)
class GradedEntry:
    word: str
    level: str
    pinyin: Optional[str] = None
    meanings: Optional[str] = None


def _level_key(level: Union[str, int, None]) -> int:
    try:
        return int(level)
    except (TypeError, ValueError):
        return _UNKNOWN_LEVEL


def _keep_lower(out: Dict[str, str], word: str, level: str) -> None:
    # duplicates (or conversion collisions) keep the easier level
    prev = out.get(word)
    if prev is None or _level_key(level) < _level_key(prev):
        out[word] = level


def convert_words(graded: Mapping[str, str], config: str) -> Dict[str, str]:
    cc = OpenCC(config)
    out: Dict[str, str] = {}
    for word, level in graded.items():
        _keep_lower(out, cc.convert(word), level)
    return out


def load_graded_json(path: str | Path, convert: Optional[str] = None) -> Dict[str, str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"graded vocabulary not found: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid graded vocabulary in {path}: expected a JSON object word -> level.")

    graded: Dict[str, str] = {}
    for word, level in payload.items():
        w = str(word).strip()
        if w:
            _keep_lower(graded, w, str(level).strip())

    log.info("loaded %d graded words from %s", len(graded), path)
    return convert_words(graded, convert) if convert else graded


def _table_columns(conn: sqlite3.Connection, table: str) -> Set[str]:
    rows = conn.execute(f"PRAGMA table_info({table})").fetchall()
    return {r[1] for r in rows}


def load_graded_entries_sqlite(
    db_path: str | Path,
    table: str = "chinese_words",
    max_level: Optional[int] = None,
) -> Dict[str, GradedEntry]:
    if not os.path.exists(db_path):
        raise FileNotFoundError(f"graded vocabulary DB not found: {db_path}")

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    try:
        cols = _table_columns(conn, table)
        if not {"simplified", "level"} <= cols:
            raise ValueError(f"Table '{table}' in {db_path} needs columns simplified, level. Found: {sorted(cols)}")

        wanted = ["simplified", "level"]
        if "pinyin" in cols:
            wanted.append("pinyin")
        if "meanings" in cols:
            wanted.append("meanings")

        sql = f"""
        SELECT {", ".join(wanted)}
        FROM {table}
        WHERE simplified IS NOT NULL AND TRIM(simplified) != ''
        """
        params = []
        if max_level is not None:
            sql += " AND level <= ?"
            params.append(max_level)
        rows = conn.execute(sql, params).fetchall()
    finally:
        conn.close()

    entries: Dict[str, GradedEntry] = {}
    for r in rows:
        w = r["simplified"].strip()
        lvl = str(r["level"]) if r["level"] is not None else "0"
        cand = GradedEntry(
            w,
            lvl,
            pinyin=r["pinyin"] if "pinyin" in r.keys() else None,
            meanings=r["meanings"] if "meanings" in r.keys() else None,
        )
        prev = entries.get(w)
        if prev is None or _level_key(cand.level) < _level_key(prev.level):
            entries[w] = cand

    log.info("loaded %d graded words from %s:%s", len(entries), db_path, table)
    return entries


def load_graded_sqlite(
    db_path: str | Path,
    table: str = "chinese_words",
    max_level: Optional[int] = None,
    convert: Optional[str] = None,
) -> Dict[str, str]:
    entries = load_graded_entries_sqlite(db_path, table=table, max_level=max_level)
    graded = {w: e.level for w, e in entries.items()}
    return convert_words(graded, convert) if convert else graded


def load_graded(path: str | Path, convert: Optional[str] = None, **kwargs) -> Dict[str, str]:
    """Dispatch on file suffix: .json, or .db / .sqlite / .sqlite3."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return load_graded_json(path, convert=convert)
    if suffix in {".db", ".sqlite", ".sqlite3"}:
        return load_graded_sqlite(path, convert=convert, **kwargs)
    raise ValueError(f"Unsupported graded vocabulary format: {path}")


def build_dictionary(
    graded: Optional[Mapping[str, str]] = None,
    *supplementary: Iterable[str],
    max_word_length: int = MAX_WORD_LENGTH,
) -> Dictionary:
    known: Set[str] = set()
    for words in supplementary:
        known.update(words)
    return Dictionary(graded, known, max_word_length=max_word_length)
