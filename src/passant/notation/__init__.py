"""Notation package: PGN record reading, movetext parsing and serialization."""

from passant.notation.game import Game, replay_games
from passant.notation.models import Ply, TagPair, Turn
from passant.notation.movetext import MovetextParser, parse_movetext
from passant.notation.reader import PgnFile, Record, loads, read_games, read_records
from passant.notation.tags import REQUIRED_TAGS, required_tag_pairs, tag_value
from passant.notation.writer import (
    PgnSupport,
    group_turns,
    render_movetext,
    render_pgn,
    turn_to_pgn,
)

__all__ = [
    # Models
    "Ply",
    "TagPair",
    "Turn",
    # Tags
    "REQUIRED_TAGS",
    "required_tag_pairs",
    "tag_value",
    # Reading
    "Game",
    "MovetextParser",
    "PgnFile",
    "Record",
    "loads",
    "parse_movetext",
    "read_games",
    "read_records",
    "replay_games",
    # Writing
    "PgnSupport",
    "group_turns",
    "render_movetext",
    "render_pgn",
    "turn_to_pgn",
]
