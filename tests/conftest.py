"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_GAME = """[Event "Casual Game"]
[Site "Berlin GER"]
[Date "2024.01.01"]
[Round "?"]
[White "Smith, J"]
[Black "Doe, A"]
[Result "1-0"]

1. e4 {King's pawn} e5 2. Nf3 Nc6 3. Bb5 a6 {Morphy defence}
4. Ba4 Nf6 5. O-O Be7 1-0
"""

MULTI_GAME = """% exported by a test
[Event "Game 1"]
[Site "Site 1"]
[Date "2024.01.15"]
[Round "1"]
[White "White1"]
[Black "Black1"]
[Result "1-0"]

1. e4 e5 1-0

[Event "Game 2"]
[Site "Site 2"]
[Date "2024.01.16"]
[Round "2"]
[White "White2"]
[Black "Black2"]
[Result "0-1"]

1. d4 d5 0-1



[Event "Game 3"]
[Site "Site 3"]
[Date "2024.01.17"]
[Round "3"]
[White "White3"]
[Black "Black3"]
[Result "1/2-1/2"]

1. c4 c5 1/2-1/2"""

BROKEN_GAME = """[Event "Broken"]
[Site "?"]
[Date "2024.02.02"]
[Round "?"]
[White "Player"]
[Black "Other"]
[Result "*"]

1. e4 e5 Nf3 2. d4 *
"""


@pytest.fixture
def sample_pgn() -> str:
    """Valid PGN with one commented game."""
    return SAMPLE_GAME


@pytest.fixture
def multi_game_pgn() -> str:
    """Three games, a % line, extra blank lines and no final newline."""
    return MULTI_GAME


@pytest.fixture
def broken_pgn() -> str:
    """A game whose first turn holds three moves."""
    return BROKEN_GAME


@pytest.fixture
def pgn_file(tmp_path: Path, multi_game_pgn: str) -> Path:
    path = tmp_path / "games.pgn"
    path.write_text(multi_game_pgn, encoding="utf-8")
    return path
