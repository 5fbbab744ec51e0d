"""
segment/resegment.py

Grammar-rule pass over matcher output.

Any token longer than one character that is not itself a known word is
re-split with smart_split(). Runs of function words are always exploded
into single characters; other leftovers are kept whole so downstream token
boundaries stay stable.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .dictionary import Dictionary
from .function_words import FUNCTION_WORDS, all_function_words, is_function_word


def smart_split(
    token: str,
    dictionary: Dictionary,
    function_words: frozenset = FUNCTION_WORDS,
    max_len: Optional[int] = None,
) -> List[str]:
    if all_function_words(token, function_words):
        return list(token)

    max_len = dictionary.max_word_length if max_len is None else max_len
    out: List[str] = []
    i = 0
    while i < len(token):
        ch = token[i]
        if is_function_word(ch, function_words):
            out.append(ch)
            i += 1
            continue

        n = dictionary.longest_prefix(token, i, max_len, min_len=2)
        if n:
            out.append(token[i : i + n])
            i += n
            continue

        rest = token[i:]
        if not all_function_words(rest, function_words):
            out.append(rest)
            break
        out.append(ch)
        i += 1

    return out


def apply_grammar_rules(
    tokens: Sequence[str],
    dictionary: Dictionary,
    function_words: frozenset = FUNCTION_WORDS,
) -> List[str]:
    out: List[str] = []
    for t in tokens:
        if len(t) > 1 and t not in dictionary:
            out.extend(smart_split(t, dictionary, function_words))
        else:
            out.append(t)
    return out
