"""Shared fixtures for zh_vocab_segmenter tests."""

import json

import pytest

from zh_vocab_segmenter.segment.dictionary import Dictionary
from zh_vocab_segmenter.store.db import connect, init_db

GRADED = {"吃飯": "1", "看書": "1", "一定": "1"}

LESSONS = {
    "B1L1": ["你好", "老師"],
    "B1L2": ["學生", "吃飯"],
    "B2L1": ["圖書館"],
    "B2L10": ["電影"],
    "B3L1": ["經濟"],
}


@pytest.fixture
def graded():
    return dict(GRADED)


@pytest.fixture
def dictionary(graded):
    """Dictionary used by the worked examples: 吃飯, 看書, 一定."""
    return Dictionary(graded)


@pytest.fixture
def db():
    """In-memory state database with schema initialized."""
    conn = connect(":memory:")
    init_db(conn)
    yield conn
    conn.close()


@pytest.fixture
def graded_json(tmp_path, graded):
    path = tmp_path / "tbcl_data.json"
    path.write_text(json.dumps(graded, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def lessons_json(tmp_path):
    path = tmp_path / "vocab_by_lesson.json"
    path.write_text(json.dumps(LESSONS, ensure_ascii=False), encoding="utf-8")
    return path
