"""
vocab/analysis.py

What this file does:
- Runs segmentation over a text and keeps only the new vocabulary:
  punctuation, whitespace and Latin/digit runs are dropped, blocklisted
  (already known) words are dropped, duplicates keep their first position.
- Attaches a level to each word by a fresh graded lookup ("0" = ungraded).
- Supports manual re-splitting of a result and export to JSON / text.

How it fits:
- use_advanced=True uses segment.segmenter.segment() with the graded
  vocabulary + blocklist as the Dictionary.
- use_advanced=False falls back to jieba, as a baseline to compare against.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

import jieba

from ..segment.dictionary import Dictionary
from ..segment.segmenter import OptionsLike, segment

UNKNOWN_LEVEL = "0"

_SKIP_RE = re.compile(r"[。，、；：！？「」『』（）《》…—\sA-Za-z0-9_]+")


@dataclass(frozen=True)
class VocabItem:
    word: str
    level: str = UNKNOWN_LEVEL

    @property
    def graded(self) -> bool:
        return self.level != UNKNOWN_LEVEL


def is_skippable(token: str) -> bool:
    return not token.strip() or bool(_SKIP_RE.fullmatch(token))


def level_of(word: str, graded: Mapping[str, str]) -> str:
    return str(graded.get(word) or UNKNOWN_LEVEL)


def segment_baseline(text: str) -> List[str]:
    return [t for t in jieba.cut(text, cut_all=False) if t]


def analyze_text(
    text: str,
    graded: Mapping[str, str],
    blocklist: Iterable[str] = (),
    options: OptionsLike = None,
    use_advanced: bool = True,
    dictionary: Optional[Dictionary] = None,
) -> List[VocabItem]:
    """
    Returns the new-vocabulary items of `text`, in first-seen order.

    Pass a prebuilt `dictionary` to reuse it across calls; otherwise one is
    built from graded + blocklist.
    """
    blocked = frozenset(blocklist)
    if use_advanced:
        if dictionary is None:
            dictionary = Dictionary(graded, blocked)
        tokens = segment(text, dictionary, options)
    else:
        tokens = segment_baseline(text)

    items: List[VocabItem] = []
    seen = set()
    for t in tokens:
        if is_skippable(t) or t in blocked or t in seen:
            continue
        seen.add(t)
        items.append(VocabItem(t, level_of(t, graded)))
    return items


def split_item(
    items: List[VocabItem],
    index: int,
    replacement: str,
    graded: Mapping[str, str],
    allow_mismatch: bool = False,
) -> List[VocabItem]:
    """
    Replace items[index] with the whitespace-separated words of `replacement`.

    Returns a new list. An empty replacement leaves the items unchanged.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"no result at index {index} (have {len(items)})")

    parts = replacement.split()
    if not parts:
        return list(items)

    original = items[index].word
    if "".join(parts) != original and not allow_mismatch:
        raise ValueError(f"split '{''.join(parts)}' does not match original word '{original}'")

    new_items = [VocabItem(w, level_of(w, graded)) for w in parts]
    return items[:index] + new_items + items[index + 1 :]


def format_items(items: Iterable[VocabItem]) -> str:
    return "\n".join(f"{i}. {it.word} (Level {it.level})" for i, it in enumerate(items, 1))


def items_to_json(items: Iterable[VocabItem]) -> str:
    return json.dumps([asdict(it) for it in items], ensure_ascii=False, indent=2)


def export_items(items: Iterable[VocabItem], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(items_to_json(items), encoding="utf-8")


def summarize(text: str, items: List[VocabItem]) -> Dict[str, int]:
    return {"chars": len(text), "new_words": len(items)}
