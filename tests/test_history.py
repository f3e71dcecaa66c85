"""Tests for the rules-free MoveHistory host."""

import pytest

from passant.history import MoveHistory
from passant.notation.models import Ply, TagPair


class TestMoves:
    def test_move_records_and_returns_ply(self) -> None:
        board = MoveHistory()
        ply = board.move("e4")
        assert ply == Ply("e4")
        assert board.history == [ply]
        assert len(board) == 1

    def test_returned_ply_comment_is_writable(self) -> None:
        board = MoveHistory()
        board.move("e4").comment = "best by test"
        assert board.history[0].comment == "best by test"

    def test_empty_move_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Empty move"):
            MoveHistory().move("")

    def test_undo_and_clear(self) -> None:
        board = MoveHistory()
        board.move("e4")
        board.move("e5")
        assert board.undo() == Ply("e5")
        assert board.move_texts == ["e4"]
        board.clear()
        assert board.undo() is None

    def test_repr(self) -> None:
        board = MoveHistory()
        board.move("e4")
        board.move("c5")
        assert repr(board) == "MoveHistory('e4 c5')"


class TestPgnSupport:
    def test_default_tags_are_the_required_roster(self) -> None:
        board = MoveHistory()
        assert [tag.key for tag in board.tag_pairs] == [
            "Event",
            "Site",
            "Date",
            "Round",
            "White",
            "Black",
            "Result",
        ]
        assert board.pgn_result == "*"

    def test_result_setter_replaces_by_key(self) -> None:
        board = MoveHistory([TagPair("Result", "*"), TagPair("Event", "x")])
        board.pgn_result = "1-0"
        assert board.tag_pairs == (TagPair("Result", "1-0"), TagPair("Event", "x"))

    def test_to_pgn(self) -> None:
        board = MoveHistory([TagPair("Event", "Club"), TagPair("Result", "0-1")])
        board.move("f3")
        board.move("e5")
        board.move("g4")
        board.move("Qh4#").comment = "Fool's mate"
        assert board.to_pgn() == (
            '[Event "Club"]\n[Result "0-1"]\n\n1. f3 e5 2. g4 Qh4# {Fool\'s mate}'
        )

    def test_movetext_turns(self) -> None:
        board = MoveHistory()
        for move in ("e4", "e5", "Nf3"):
            board.move(move)
        turns = board.movetext_turns()
        assert [len(turn.plies) for turn in turns] == [2, 1]
