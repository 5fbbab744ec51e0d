"""Tests for reading input files and word lists."""

import pytest

from zh_vocab_segmenter.utils.io import read_text, read_word_column


class TestReadWordColumn:
    def test_skips_blanks_and_repeats(self, tmp_path):
        path = tmp_path / "known.csv"
        path.write_text("word,note\n電腦,a\n,b\n 電影 ,c\n電腦,d\n", encoding="utf-8")
        assert read_word_column(path, "word") == ["電腦", "電影"]

    def test_byte_order_mark(self, tmp_path):
        path = tmp_path / "known.csv"
        path.write_bytes("word\n老師\n".encode("utf-8-sig"))
        assert read_word_column(path, "word") == ["老師"]

    def test_missing_column(self, tmp_path):
        path = tmp_path / "known.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            read_word_column(path, "word")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "known.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            read_word_column(path, "word")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_word_column(tmp_path / "nope.csv", "word")


class TestReadText:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("我不吃飯", encoding="utf-8")
        assert read_text(path) == "我不吃飯"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "nope.txt")
