"""
segment/normalize.py

What this file does:
- normalize(): keeps CJK Unified Ideographs (U+4E00..U+9FFF) and a fixed
  allow-list of full-width punctuation; everything else is dropped.
- split_into_sentences(): splits on terminal punctuation and keeps each
  delimiter as its own span, so "".join(spans) == text.

How it fits:
- normalize() always runs before matching; the matchers never see
  whitespace, Latin letters or digits.
"""

from __future__ import annotations

import re
from typing import List

PUNCTUATION = "。，、；：！？「」『』（）《》"
SENTENCE_ENDINGS = "。！？；"

_DROP_RE = re.compile(r"[^\u4e00-\u9fff" + re.escape(PUNCTUATION) + r"]+")
_SENTENCE_END_RE = re.compile(r"([" + re.escape(SENTENCE_ENDINGS) + r"])")
_PUNCT_SPAN_RE = re.compile(r"[" + re.escape(PUNCTUATION) + r"]+")


def normalize(text: str) -> str:
    return _DROP_RE.sub("", text or "")


def split_into_sentences(text: str) -> List[str]:
    # re.split with a capture group yields empty strings around adjacent
    # delimiters; callers skip them.
    return _SENTENCE_END_RE.split(text)


def is_punctuation_span(span: str) -> bool:
    return bool(_PUNCT_SPAN_RE.fullmatch(span))
