import os

from filefinder.cli import main, run_search
from filefinder.results import found_message


def _make_tree(root):
    (root / "x").mkdir()
    (root / "x" / "log.txt").write_text("Error: disk full\n")
    (root / "log.txt").write_text("all fine\n")


def test_run_search_by_name(tmp_path):
    _make_tree(tmp_path)
    rows = run_search("log.txt", "", tmp_path)
    assert [row.relative_path for row in rows] == ["log.txt", os.path.join("x", "log.txt")]


def test_run_search_with_text(tmp_path):
    _make_tree(tmp_path)
    rows = run_search("log.txt", "DISK", tmp_path)
    assert [row.path for row in rows] == [str(tmp_path / "x" / "log.txt")]


def test_run_search_nothing_found(tmp_path):
    _make_tree(tmp_path)
    assert run_search("absent.txt", "", tmp_path) == []


def test_main_prints_rows_and_summary(tmp_path, capsys):
    _make_tree(tmp_path)
    code = main(["log.txt", "--directory", str(tmp_path)])
    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines[-1] == found_message(2)
    assert lines[0].split("\t")[0] == "log.txt"