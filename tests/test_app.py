"""Tests for the command-line entry point."""

from pathlib import Path

import pytest

from passant.app import main


class TestTitles:
    def test_prints_one_title_per_game(
        self, pgn_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["titles", str(pgn_file)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "2024.01.15 Game 1: White1 vs. Black1 1-0",
            "2024.01.16 Game 2: White2 vs. Black2 0-1",
            "2024.01.17 Game 3: White3 vs. Black3 1/2-1/2",
        ]

    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["titles", str(tmp_path / "nope.pgn")]) == 1
        assert capsys.readouterr().err.startswith("passant: ")


class TestRender:
    def test_renders_each_game(
        self, tmp_path: Path, sample_pgn: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "sample.pgn"
        path.write_text(sample_pgn, encoding="utf-8")

        assert main(["render", str(path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith('[Event "Casual Game"]\n')
        assert "1. e4 {King's pawn} 1... e5 2. Nf3 Nc6" in out

    def test_strict_mode_reports_parse_errors(
        self, tmp_path: Path, broken_pgn: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "broken.pgn"
        path.write_text(broken_pgn, encoding="utf-8")

        assert main(["render", str(path)]) == 1
        assert "3 moves in a single turn" in capsys.readouterr().err

    def test_skip_records(
        self, tmp_path: Path, broken_pgn: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "broken.pgn"
        path.write_text(broken_pgn, encoding="utf-8")

        assert main(["--skip-records", "render", str(path)]) == 0
        assert capsys.readouterr().out == ""

    def test_lenient_keeps_good_turns(
        self, tmp_path: Path, broken_pgn: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "broken.pgn"
        path.write_text(broken_pgn, encoding="utf-8")

        assert main(["--lenient", "render", str(path)]) == 0
        assert capsys.readouterr().out.rstrip().endswith("\n\n1. d4")


class TestRequireTags:
    def test_missing_tags_fail_the_run(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bare.pgn"
        path.write_text('[Event "A"]\n\n1. e4 e5\n', encoding="utf-8")

        assert main(["--require-tags", "titles", str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("passant: ")
        assert "Missing required tags" in err

    def test_complete_records_pass(
        self, pgn_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--require-tags", "titles", str(pgn_file)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 3
