"""Tests for the command line entry point."""

import json
from pathlib import Path

from decl_index.src.decl_index.main import main


def test_sample_runs_clean(capsys) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "UserService$StringUtils" in out
    assert "-addUser(String,int):User" in out


def test_json_for_directory(tmp_path: Path, capsys) -> None:
    (tmp_path / "A.java").write_text("class A { int x; }", encoding="utf-8")
    assert main([str(tmp_path), "--json", "--package", "p"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["files"][0]["classes"][0]["qualifiedName"].startswith("p/")


def test_failed_file_sets_exit_status(tmp_path: Path, capsys) -> None:
    (tmp_path / "Bad.java").write_text("class Bad {", encoding="utf-8")
    assert main([str(tmp_path)]) == 1
    assert "syntax_error" in capsys.readouterr().out


def test_log_file_receives_output(tmp_path: Path) -> None:
    (tmp_path / "A.java").write_text("class A {}", encoding="utf-8")
    log_file = tmp_path / "run.log"
    assert main([str(tmp_path / "A.java"), "--log-file", str(log_file)]) == 0
    assert "Indexing" in log_file.read_text(encoding="utf-8")
