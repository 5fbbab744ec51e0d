"""
cli.py

Command line entry point.

Usage:
  zh-vocab segment "我不吃飯" --graded data/tbcl_data.json
  zh-vocab analyze -f lesson.txt --graded data/tbcl_data.json \
      --lessons data/vocab_by_lesson.json --select-up-to B2
  zh-vocab vocab add "老師、學生"
  zh-vocab vocab list
  zh-vocab lessons build data/B1-B6L1生詞表.csv data/vocab_by_lesson.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .segment.segmenter import SegmentOptions, segment
from .store.db import connect, init_db
from .utils.io import read_text, read_word_column
from .vocab.analysis import analyze_text, export_items, format_items, items_to_json, summarize
from .vocab.custom import CustomVocabStore, read_custom_words
from .vocab.lessons import (
    BOOK_ORDER,
    LessonSelection,
    build_blocklist,
    build_lesson_vocab,
    load_lesson_vocab,
    write_lesson_vocab,
)
from .vocab.lexicon import build_dictionary, load_graded

log = logging.getLogger(__name__)

DEFAULT_STATE_DB = Path("data/state.db")


def _input_text(args: argparse.Namespace) -> str:
    if args.file:
        return read_text(args.file)
    if args.text:
        return args.text
    raise ValueError("no input: pass TEXT or -f FILE")


def _options(args: argparse.Namespace) -> SegmentOptions:
    return SegmentOptions(
        use_bidirectional=not args.no_bidirectional,
        use_grammar_rules=not args.no_grammar_rules,
        split_by_sentence=args.split_sentences,
    )


def _graded(args: argparse.Namespace) -> Dict[str, str]:
    if args.graded is None:
        return {}
    return load_graded(args.graded, convert=args.convert)


def _blocklist(args: argparse.Namespace) -> frozenset:
    selection: Optional[LessonSelection] = None
    if args.lessons is not None:
        selection = LessonSelection(load_lesson_vocab(args.lessons))
        if args.lesson:
            selection.clear()
            for lesson in args.lesson:
                selection.select(lesson)
        if args.select_up_to:
            selection.select_up_to(args.select_up_to)
        log.info("lessons selected: %d / %d", len(selection.selected), len(selection.lessons))

    custom: List[str] = []
    if args.state_db is not None and Path(args.state_db).exists():
        conn = connect(args.state_db)
        try:
            custom = read_custom_words(conn)
        finally:
            conn.close()
    return build_blocklist(selection, custom)


# -------------------------
# Commands
# -------------------------

def cmd_segment(args: argparse.Namespace) -> int:
    dictionary = build_dictionary(_graded(args), _blocklist(args))
    tokens = segment(_input_text(args), dictionary, _options(args))
    print(" ".join(tokens))
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    text = _input_text(args)
    graded = _graded(args)
    items = analyze_text(
        text,
        graded,
        _blocklist(args),
        options=_options(args),
        use_advanced=not args.baseline,
    )

    if args.export:
        export_items(items, args.export)
        log.info("exported %d item(s) to %s", len(items), args.export)

    if args.json:
        print(items_to_json(items))
    else:
        if items:
            print(format_items(items))
        else:
            print("No new vocabulary found.")
        stats = summarize(text, items)
        print(f"chars: {stats['chars']}  new words: {stats['new_words']}", file=sys.stderr)
    return 0


def cmd_vocab(args: argparse.Namespace) -> int:
    conn = connect(args.state_db)
    try:
        init_db(conn)
        store = CustomVocabStore(conn)
        if args.vocab_cmd == "add":
            if args.file and args.column:
                words = read_word_column(args.file, args.column)
            else:
                words = _input_text(args)
            n = store.add(words)
            print(f"✅ added {n} known word(s) ({len(store)} total)")
        elif args.vocab_cmd == "list":
            for w in store.words():
                print(w)
        elif args.vocab_cmd == "clear":
            n = store.clear()
            print(f"✅ cleared {n} known word(s)")
    finally:
        conn.close()
    return 0


def cmd_lessons(args: argparse.Namespace) -> int:
    lessons = build_lesson_vocab(
        args.csv,
        word_column=args.word_column,
        lesson_column=args.lesson_column,
    )
    write_lesson_vocab(lessons, args.out)
    print(f"✅ wrote {len(lessons)} lesson(s) to {args.out}")
    return 0


# -------------------------
# Parser
# -------------------------

def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", nargs="?", help="Text to process")
    p.add_argument("-f", "--file", help="Read text from a UTF-8 file instead")


def _add_segment_args(p: argparse.ArgumentParser) -> None:
    _add_input_args(p)
    p.add_argument("--graded", type=Path, help="Graded vocabulary (.json word->level, or HSK-style .db)")
    p.add_argument("--convert", help="OpenCC config applied to the graded list (e.g. s2tw for Taiwan text)")
    p.add_argument("--lessons", type=Path, help="Per-lesson vocabulary JSON (lesson -> [words])")
    p.add_argument("--lesson", action="append", help="Only count these lessons as known (repeatable)")
    p.add_argument("--select-up-to", choices=BOOK_ORDER, help="Count every lesson up to this book as known")
    p.add_argument("--state-db", type=Path, default=DEFAULT_STATE_DB, help="State DB with custom known words")
    p.add_argument("--no-bidirectional", action="store_true", help="Forward matching only")
    p.add_argument("--no-grammar-rules", action="store_true", help="Skip the grammar-rule re-split pass")
    p.add_argument("--split-sentences", action="store_true", help="Segment each sentence separately")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="zh-vocab", description="Dictionary-based Chinese segmentation for vocabulary lists.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("segment", help="Print the token sequence of a text")
    _add_segment_args(p)
    p.set_defaults(func=cmd_segment)

    p = sub.add_parser("analyze", help="List the new vocabulary of a text")
    _add_segment_args(p)
    p.add_argument("--baseline", action="store_true", help="Use jieba instead of the dictionary segmenter")
    p.add_argument("--json", action="store_true", help="Print JSON instead of a numbered list")
    p.add_argument("--export", type=Path, help="Also write the JSON result to this path")
    p.set_defaults(func=cmd_analyze)

    p = sub.add_parser("vocab", help="Manage hand-entered known words")
    p.add_argument("--state-db", type=Path, default=DEFAULT_STATE_DB)
    vsub = p.add_subparsers(dest="vocab_cmd", required=True)
    pa = vsub.add_parser("add", help="Add words (separated by newlines, commas, 、 or spaces)")
    _add_input_args(pa)
    pa.add_argument("--column", help="With -f on a CSV: read words from this column")
    vsub.add_parser("list", help="Print the stored words")
    vsub.add_parser("clear", help="Delete every stored word")
    p.set_defaults(func=cmd_vocab)

    p = sub.add_parser("lessons", help="Lesson vocabulary tools")
    lsub = p.add_subparsers(dest="lessons_cmd", required=True)
    pb = lsub.add_parser("build", help="Build lesson JSON from a vocabulary spreadsheet (CSV)")
    pb.add_argument("csv", type=Path)
    pb.add_argument("out", type=Path)
    pb.add_argument("--word-column", default="生詞")
    pb.add_argument("--lesson-column", default="課數")
    p.set_defaults(func=cmd_lessons)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
