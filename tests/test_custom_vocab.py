"""Tests for the hand-entered known-word store."""

import sqlite3

from zh_vocab_segmenter.store.db import SCHEMA_VERSION, read_meta
from zh_vocab_segmenter.vocab.custom import CustomVocabStore, parse_vocab_input, read_custom_words


class TestParseInput:
    def test_separators(self):
        assert parse_vocab_input("老師、學生,電腦\n  電影 書") == ["老師", "學生", "電腦", "電影", "書"]

    def test_empty(self):
        assert parse_vocab_input("") == []
        assert parse_vocab_input(" ,、\n") == []


class TestStore:
    def test_schema_version(self, db):
        assert read_meta(db)["schema_version"] == str(SCHEMA_VERSION)

    def test_add_counts_only_new_words(self, db):
        store = CustomVocabStore(db)
        assert store.add("老師、學生") == 2
        assert store.add(["學生", "電腦", " "]) == 1
        assert len(store) == 3
        assert "電腦" in store
        assert "電影" not in store

    def test_words_sorted(self, db):
        store = CustomVocabStore(db)
        store.add("b a c")
        assert store.words() == ["a", "b", "c"]

    def test_clear(self, db):
        store = CustomVocabStore(db)
        store.add("老師 學生")
        assert store.clear() == 2
        assert store.words() == []


class TestReadCustomWords:
    def test_reads_stored_words(self, db):
        CustomVocabStore(db).add("老師 學生")
        assert read_custom_words(db) == ["學生", "老師"]

    def test_missing_table_is_left_alone(self):
        conn = sqlite3.connect(":memory:")
        try:
            assert read_custom_words(conn) == []
            tables = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
            assert tables == []
        finally:
            conn.close()
