"""
utils/io.py

What this file does:
- Reads input text files, and word lists kept in one column of a CSV
  (exported from a spreadsheet or flashcard app).

How it fits:
- Only the CLI touches files through here; the segmenter works on strings.
"""

from __future__ import annotations

import csv
from pathlib import Path


def read_text(path: str | Path) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"input file not found: {path}")
    return path.read_text(encoding="utf-8-sig")


def read_word_column(path: str | Path, column: str) -> list[str]:
    """
    Words from `column`, first occurrence order. Repeated words are kept
    once; blank cells are skipped.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"word list not found: {path}")

    with path.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames or column not in reader.fieldnames:
            raise ValueError(f"Column '{column}' not found in {path}. Available: {reader.fieldnames or []}")
        words = ((row.get(column) or "").strip() for row in reader)
        return list(dict.fromkeys(w for w in words if w))
