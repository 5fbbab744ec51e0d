"""
segment/matcher.py

Greedy maximum matching against a Dictionary, in both scan directions.

- match_forward: cursor starts at 0, takes the longest known word that
  starts at the cursor (up to max_len chars), else a single character.
- match_backward: cursor starts at the end, takes the longest known word
  that ends at the cursor, building the result right to left.

Both passes consume at least one character per step, so the worst case is
one token per character.
"""

from __future__ import annotations

from typing import List, Optional

from .dictionary import Dictionary


def _resolve_max_len(dictionary: Dictionary, max_len: Optional[int]) -> int:
    if max_len is None:
        return dictionary.max_word_length
    if max_len < 1:
        raise ValueError(f"max_len must be >= 1, got {max_len}")
    return max_len


def match_forward(text: str, dictionary: Dictionary, max_len: Optional[int] = None) -> List[str]:
    max_len = _resolve_max_len(dictionary, max_len)
    tokens: List[str] = []
    i = 0
    while i < len(text):
        n = dictionary.longest_prefix(text, i, max_len)
        if n == 0:
            n = 1
        tokens.append(text[i : i + n])
        i += n
    return tokens


def match_backward(text: str, dictionary: Dictionary, max_len: Optional[int] = None) -> List[str]:
    max_len = _resolve_max_len(dictionary, max_len)
    tokens: List[str] = []
    j = len(text)
    while j > 0:
        n = dictionary.longest_suffix(text, j, max_len)
        if n == 0:
            n = 1
        tokens.append(text[j - n : j])
        j -= n
    tokens.reverse()
    return tokens
