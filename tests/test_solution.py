"""Smoke tests for the command-line entry point in ``solution.py``."""
from __future__ import annotations

import pytest

import solution


def test_main_requires_input_argument():
    with pytest.raises(SystemExit):
        solution.main([])


def test_main_prints_sum(tmp_path, example_rows, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(example_rows), encoding="utf-8")

    assert solution.main([str(path)]) == 0
    assert "Sum of part numbers: 4361" in capsys.readouterr().out


def test_main_custom_blank(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("467  114\n   *    \n", encoding="utf-8")

    assert solution.main([str(path), "--blank", " "]) == 0
    assert "Sum of part numbers: 467" in capsys.readouterr().out


def test_main_reports_malformed_row(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("..*\n99999999999\n", encoding="utf-8")

    assert solution.main([str(path)]) == 2
    assert "exceeds maximum token value" in capsys.readouterr().err


def test_main_max_value_flag(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("500*\n", encoding="utf-8")

    assert solution.main([str(path), "--max-value", "100"]) == 2
    assert "row 0, column 0" in capsys.readouterr().err


def test_main_rejects_multi_character_blank(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1*\n", encoding="utf-8")

    assert solution.main([str(path), "--blank", ".."]) == 2
    assert "single character" in capsys.readouterr().err
