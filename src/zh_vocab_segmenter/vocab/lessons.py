"""
vocab/lessons.py

What this file does:
- Builds the per-lesson word list from a textbook vocabulary spreadsheet
  (CSV with a word column and a lesson column such as "B2L10").
- Loads that list back and tracks which lessons the learner has covered.

How it fits:
- LessonSelection.words() + the custom words form the blocklist: words the
  learner already knows. The blocklist is both the supplementary half of
  the Dictionary and the filter applied in vocab/analysis.py.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set

import pandas as pd

log = logging.getLogger(__name__)

BOOK_ORDER = ("B1", "B2", "B3", "B4", "B5", "B6")

_BOOK_RE = re.compile(r"^(B\d+)")
_NUM_RE = re.compile(r"(\d+)")


def book_of(lesson: str) -> str | None:
    m = _BOOK_RE.match(lesson)
    return m.group(1) if m else None


def _natural_key(s: str):
    return [int(p) if p.isdigit() else p for p in _NUM_RE.split(s)]


def sort_lessons(lessons: Iterable[str]) -> List[str]:
    return sorted(lessons, key=_natural_key)


# -------------------------
# Spreadsheet -> lesson word lists
# -------------------------

def build_lesson_vocab(
    csv_path: str | Path,
    word_column: str = "生詞",
    lesson_column: str = "課數",
) -> Dict[str, List[str]]:
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"vocabulary sheet not found: {csv_path}")

    df = pd.read_csv(csv_path, encoding="utf-8-sig")
    for col in (word_column, lesson_column):
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found. Available: {list(df.columns)}")

    df = df.dropna(subset=[word_column]).copy()
    df[word_column] = df[word_column].astype(str).str.strip()
    df[lesson_column] = df[lesson_column].astype(str).str.strip()
    df = df[df[word_column] != ""]

    lessons: Dict[str, List[str]] = {}
    for lesson, word in zip(df[lesson_column], df[word_column]):
        words = lessons.setdefault(lesson, [])
        if word not in words:
            words.append(word)

    log.info("built %d lessons from %s", len(lessons), csv_path)
    return lessons


def write_lesson_vocab(lessons: Mapping[str, List[str]], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(lessons, ensure_ascii=False, indent=2), encoding="utf-8")


def load_lesson_vocab(path: str | Path) -> Dict[str, List[str]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"lesson vocabulary not found: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid lesson vocabulary in {path}: expected a JSON object lesson -> [words].")
    return {str(k): [str(w) for w in v] for k, v in payload.items()}


# -------------------------
# Lesson selection
# -------------------------

class LessonSelection:
    """
    Which lessons count as "already taught".

    Starts with everything selected. Lessons whose key has no book prefix
    are still selectable individually but ignored by the book-level helpers.
    """

    def __init__(self, lessons: Mapping[str, List[str]]) -> None:
        self.lessons = dict(lessons)
        self.selected: Set[str] = set(self.lessons)

    def lessons_in(self, book: str) -> List[str]:
        return sort_lessons(k for k in self.lessons if book_of(k) == book)

    def select(self, lesson: str) -> None:
        if lesson not in self.lessons:
            raise ValueError(f"unknown lesson: {lesson}")
        self.selected.add(lesson)

    def deselect(self, lesson: str) -> None:
        self.selected.discard(lesson)

    def select_all(self) -> None:
        self.selected = set(self.lessons)

    def clear(self) -> None:
        self.selected.clear()

    def select_up_to(self, book: str) -> None:
        """Select every lesson in books up to and including `book`; deselect later books."""
        if book not in BOOK_ORDER:
            return
        target = BOOK_ORDER.index(book)
        for lesson in self.lessons:
            b = book_of(lesson)
            if b not in BOOK_ORDER:
                continue
            if BOOK_ORDER.index(b) <= target:
                self.selected.add(lesson)
            else:
                self.selected.discard(lesson)

    def toggle_book(self, book: str) -> None:
        in_book = self.lessons_in(book)
        if in_book and all(k in self.selected for k in in_book):
            self.selected.difference_update(in_book)
        else:
            self.selected.update(in_book)

    def book_state(self, book: str) -> str:
        """Returns "all", "some" or "none"; an empty book is "none"."""
        in_book = self.lessons_in(book)
        n = sum(1 for k in in_book if k in self.selected)
        if in_book and n == len(in_book):
            return "all"
        return "some" if n else "none"

    def words(self) -> FrozenSet[str]:
        out: Set[str] = set()
        for lesson in self.selected:
            out.update(self.lessons.get(lesson, ()))
        return frozenset(out)


def build_blocklist(selection: LessonSelection | None, custom_words: Iterable[str] = ()) -> FrozenSet[str]:
    words = set(selection.words()) if selection is not None else set()
    words.update(custom_words)
    return frozenset(words)
