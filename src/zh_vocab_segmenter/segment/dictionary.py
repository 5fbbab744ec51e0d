"""
segment/dictionary.py

What this file does:
- Merges the graded vocabulary (word -> level) and the supplementary known
  words (membership only) into one read-only lookup surface.
- Holds two tries so the matchers can find the longest known word that
  starts at (prefix trie) or ends at (suffix trie) a cursor.

How it fits:
- Built once by the caller (see vocab/lexicon.py) and passed by reference
  into every segment() call.
- Never mutated after __init__; with_supplementary() returns a new instance.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union

MAX_WORD_LENGTH = 6

Level = Union[str, int]


class TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: Dict[str, "TrieNode"] = {}
        self.terminal = False


def _insert(root: TrieNode, chars: Iterable[str]) -> None:
    node = root
    for ch in chars:
        node = node.children.setdefault(ch, TrieNode())
    node.terminal = True


class Dictionary:
    """
    Known-word lookup used by the matchers and the re-segmenter.

    Levels are kept as strings ("1", "2", ...) so graded lists loaded from
    JSON and from SQLite compare the same way downstream.
    """

    def __init__(
        self,
        graded: Optional[Mapping[str, Level]] = None,
        supplementary: Optional[Iterable[str]] = None,
        max_word_length: int = MAX_WORD_LENGTH,
    ) -> None:
        if int(max_word_length) < 1:
            raise ValueError(f"max_word_length must be >= 1, got {max_word_length}")
        self.max_word_length = int(max_word_length)

        levels: Dict[str, str] = {}
        for word, level in (graded or {}).items():
            if word:
                levels[word] = str(level)
        self._levels = MappingProxyType(levels)
        self._supplementary = frozenset(w for w in (supplementary or ()) if w)

        self._prefix = TrieNode()
        self._suffix = TrieNode()
        for w in self._words():
            _insert(self._prefix, w)
            _insert(self._suffix, reversed(w))

    def _words(self) -> Iterator[str]:
        yield from self._levels
        for w in self._supplementary:
            if w not in self._levels:
                yield w

    # -------------------------
    # Lookups
    # -------------------------

    def __contains__(self, word: object) -> bool:
        return word in self._levels or word in self._supplementary

    def __len__(self) -> int:
        return sum(1 for _ in self._words())

    def is_known(self, word: str) -> bool:
        return word in self

    def level(self, word: str) -> Optional[str]:
        """Graded level of `word`, or None for supplementary/unknown words."""
        return self._levels.get(word)

    @property
    def graded(self) -> Mapping[str, str]:
        return self._levels

    @property
    def supplementary(self) -> frozenset:
        return self._supplementary

    def with_supplementary(self, words: Iterable[str]) -> "Dictionary":
        return Dictionary(
            self._levels,
            self._supplementary.union(words),
            max_word_length=self.max_word_length,
        )

    # -------------------------
    # Longest-match primitives
    # -------------------------

    def longest_prefix(self, text: str, start: int, max_len: int, min_len: int = 1) -> int:
        """
        Length of the longest known word text[start:start+n] with
        min_len <= n <= max_len, or 0 when there is none.
        """
        node = self._prefix
        best = 0
        limit = min(len(text), start + max_len)
        i = start
        while i < limit:
            node = node.children.get(text[i])
            if node is None:
                break
            i += 1
            if node.terminal and i - start >= min_len:
                best = i - start
        return best

    def longest_suffix(self, text: str, end: int, max_len: int, min_len: int = 1) -> int:
        """Mirror of longest_prefix for words ending at `end` (exclusive)."""
        node = self._suffix
        best = 0
        limit = max(0, end - max_len)
        i = end
        while i > limit:
            node = node.children.get(text[i - 1])
            if node is None:
                break
            i -= 1
            if node.terminal and end - i >= min_len:
                best = end - i
        return best
