"""
segment/function_words.py

Single characters that prefer to stand alone as tokens (conjunctions,
prepositions, particles, adverbs, pronouns, numerals, measure words).

Traditional forms come first in each group; simplified counterparts are
appended so graded lists in either script behave the same.
"""

from __future__ import annotations

_GROUPS = {
    "conjunction": "而且或與及和同並但卻則故" + "与并却则",
    "preposition": "在於自從到向往給為被把對跟替" + "于从给为对",
    "particle": "的得地了著過嗎呢吧啊呀哪啦" + "着过吗",
    "adverb": "不也都又再還才就只很太更最挺" + "还",
    "pronoun": "我你他她它們這那誰何哪某" + "们这谁",
    "numeral": "一二三四五六七八九十百千萬" + "万",
    "measure": "個位名條張本把件隻支枝根片" + "个条张只",
}

FUNCTION_WORDS: frozenset = frozenset(ch for chars in _GROUPS.values() for ch in chars)


def is_function_word(ch: str, function_words: frozenset = FUNCTION_WORDS) -> bool:
    return ch in function_words


def all_function_words(span: str, function_words: frozenset = FUNCTION_WORDS) -> bool:
    return all(ch in function_words for ch in span)
