"""Tests for the zh-vocab command line."""

import json
import sqlite3

from zh_vocab_segmenter.cli import main


class TestSegmentCommand:
    def test_prints_tokens(self, tmp_path, graded_json, capsys):
        rc = main(["segment", "我不吃飯", "--graded", str(graded_json), "--state-db", str(tmp_path / "s.db")])
        assert rc == 0
        assert capsys.readouterr().out.strip() == "我 不 吃飯"

    def test_reads_file(self, tmp_path, graded_json, capsys):
        src = tmp_path / "in.txt"
        src.write_text("一定看書", encoding="utf-8")
        rc = main(["segment", "-f", str(src), "--graded", str(graded_json), "--state-db", str(tmp_path / "s.db")])
        assert rc == 0
        assert capsys.readouterr().out.strip() == "一定 看書"

    def test_missing_input_is_an_error(self, tmp_path, capsys):
        rc = main(["segment", "--state-db", str(tmp_path / "s.db")])
        assert rc == 2
        assert "no input" in capsys.readouterr().err

    def test_missing_graded_file(self, tmp_path, capsys):
        rc = main(["segment", "我", "--graded", str(tmp_path / "nope.json"), "--state-db", str(tmp_path / "s.db")])
        assert rc == 2


class TestAnalyzeCommand:
    def test_json_output_respects_lessons_and_custom_words(self, tmp_path, graded_json, lessons_json, capsys):
        state = str(tmp_path / "state.db")
        assert main(["vocab", "--state-db", state, "add", "一定"]) == 0
        capsys.readouterr()

        rc = main([
            "analyze", "老師一定看書吃飯",
            "--graded", str(graded_json),
            "--lessons", str(lessons_json),
            "--lesson", "B1L1",
            "--state-db", state,
            "--json",
        ])
        assert rc == 0
        items = json.loads(capsys.readouterr().out)
        assert items == [{"word": "看書", "level": "1"}, {"word": "吃飯", "level": "1"}]

    def test_select_up_to(self, tmp_path, graded_json, lessons_json, capsys):
        rc = main([
            "analyze", "吃飯看書",
            "--graded", str(graded_json),
            "--lessons", str(lessons_json),
            "--select-up-to", "B1",
            "--state-db", str(tmp_path / "s.db"),
        ])
        assert rc == 0
        assert capsys.readouterr().out.strip() == "1. 看書 (Level 1)"

    def test_export(self, tmp_path, graded_json, capsys):
        out = tmp_path / "analysis.json"
        rc = main(["analyze", "看書", "--graded", str(graded_json), "--state-db", str(tmp_path / "s.db"), "--export", str(out)])
        assert rc == 0
        assert json.loads(out.read_text(encoding="utf-8")) == [{"word": "看書", "level": "1"}]

    def test_nothing_new(self, tmp_path, capsys):
        rc = main(["analyze", "hello", "--state-db", str(tmp_path / "s.db")])
        assert rc == 0
        assert "No new vocabulary" in capsys.readouterr().out


class TestVocabCommand:
    def test_add_list_clear(self, tmp_path, capsys):
        state = str(tmp_path / "state.db")
        assert main(["vocab", "--state-db", state, "add", "老師、學生"]) == 0
        assert main(["vocab", "--state-db", state, "list"]) == 0
        out = capsys.readouterr().out
        assert "學生\n老師" in out
        assert main(["vocab", "--state-db", state, "clear"]) == 0
        assert main(["vocab", "--state-db", state, "list"]) == 0
        assert capsys.readouterr().out.strip().endswith("cleared 2 known word(s)")

    def test_add_from_csv_column(self, tmp_path, capsys):
        state = str(tmp_path / "state.db")
        sheet = tmp_path / "known.csv"
        sheet.write_text("word,note\n電腦,x\n電影,y\n", encoding="utf-8")
        assert main(["vocab", "--state-db", state, "add", "-f", str(sheet), "--column", "word"]) == 0
        assert "added 2" in capsys.readouterr().out


class TestLessonsCommand:
    def test_build(self, tmp_path, capsys):
        sheet = tmp_path / "sheet.csv"
        sheet.write_text("課數,生詞\nB1L1,你好\nB1L2,學生\n", encoding="utf-8")
        out = tmp_path / "vocab_by_lesson.json"
        assert main(["lessons", "build", str(sheet), str(out)]) == 0
        assert json.loads(out.read_text(encoding="utf-8")) == {"B1L1": ["你好"], "B1L2": ["學生"]}


class TestReadOnlyCommands:
    def test_analyze_does_not_write_state_db(self, tmp_path, graded_json, capsys):
        state = tmp_path / "state.db"
        conn = sqlite3.connect(str(state))
        conn.execute("CREATE TABLE custom_vocab (word TEXT PRIMARY KEY, added_at TEXT NOT NULL)")
        conn.execute("INSERT INTO custom_vocab VALUES ('看書', 'now')")
        conn.commit()
        conn.close()

        rc = main(["analyze", "看書吃飯", "--graded", str(graded_json), "--state-db", str(state), "--json"])
        assert rc == 0
        assert json.loads(capsys.readouterr().out) == [{"word": "吃飯", "level": "1"}]

        conn = sqlite3.connect(str(state))
        tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        conn.close()
        assert tables == {"custom_vocab"}

    def test_unknown_lesson_message(self, tmp_path, lessons_json, capsys):
        rc = main(["segment", "吃飯", "--lessons", str(lessons_json), "--lesson", "B9L1", "--state-db", str(tmp_path / "s.db")])
        assert rc == 2
        assert capsys.readouterr().err.strip() == "error: unknown lesson: B9L1"
