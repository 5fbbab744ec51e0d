"""
segment/selector.py

Picks between the forward and backward matcher outputs:
1) fewer tokens wins
2) equal counts: lower share of single-character tokens wins
3) still tied: forward wins
"""

from __future__ import annotations

from typing import List, Sequence


def single_char_ratio(tokens: Sequence[str]) -> float:
    if not tokens:
        return 0.0
    return sum(1 for t in tokens if len(t) == 1) / len(tokens)


def choose(forward: List[str], backward: List[str]) -> List[str]:
    if len(forward) != len(backward):
        return forward if len(forward) < len(backward) else backward

    if single_char_ratio(backward) < single_char_ratio(forward):
        return backward
    return forward
