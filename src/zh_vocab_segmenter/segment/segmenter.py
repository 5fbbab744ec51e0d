"""
segment/segmenter.py

End-to-end segmentation:
  normalize -> (optional) sentence split -> forward/backward matching
  -> candidate selection -> (optional) grammar-rule pass

segment() is a pure function of (text, dictionary, options). Nothing is
cached between calls, so one Dictionary can be shared across threads or
worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Union

from .dictionary import Dictionary
from .function_words import FUNCTION_WORDS
from .matcher import match_backward, match_forward
from .normalize import is_punctuation_span, normalize, split_into_sentences
from .resegment import apply_grammar_rules
from .selector import choose

# camelCase names used by the browser tool's option objects
_OPTION_ALIASES = {
    "useBidirectional": "use_bidirectional",
    "useGrammarRules": "use_grammar_rules",
    "splitBySentence": "split_by_sentence",
    "splitSentence": "split_by_sentence",
}


@dataclass(frozen=True)
class SegmentOptions:
    use_bidirectional: bool = True
    use_grammar_rules: bool = True
    split_by_sentence: bool = False

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "SegmentOptions":
        """Unknown keys are ignored; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (mapping or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = bool(value)
        return cls(**kwargs)


OptionsLike = Union[SegmentOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> SegmentOptions:
    if isinstance(options, SegmentOptions):
        return options
    return SegmentOptions.from_mapping(options)


def segment_sentence(
    unit: str,
    dictionary: Dictionary,
    options: OptionsLike = None,
    function_words: frozenset = FUNCTION_WORDS,
) -> List[str]:
    opts = _coerce_options(options)

    if opts.use_bidirectional:
        tokens = choose(match_forward(unit, dictionary), match_backward(unit, dictionary))
    else:
        tokens = match_forward(unit, dictionary)

    if opts.use_grammar_rules:
        tokens = apply_grammar_rules(tokens, dictionary, function_words)
    return tokens


def segment(
    text: str,
    dictionary: Dictionary,
    options: OptionsLike = None,
    function_words: frozenset = FUNCTION_WORDS,
) -> List[str]:
    opts = _coerce_options(options)
    clean = normalize(text)
    if not clean:
        return []

    if not opts.split_by_sentence:
        return segment_sentence(clean, dictionary, opts, function_words)

    tokens: List[str] = []
    for span in split_into_sentences(clean):
        if not span:
            continue
        if is_punctuation_span(span):
            # not segmented, but kept so the output still rebuilds the text
            tokens.extend(span)
            continue
        tokens.extend(segment_sentence(span, dictionary, opts, function_words))
    return tokens
