"""PGN serialization: turn grouping, movetext wrapping and full records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from passant.notation.models import Ply, TagPair, Turn
from passant.notation.tags import replace_tag_value, required_tag_pairs, tag_value

LINE_WIDTH = 80


def group_turns(history: Sequence[Ply]) -> list[Turn]:
    """Pair a flat ply history into numbered turns (even index = White)."""
    turns: list[Turn] = []
    for start in range(0, len(history), 2):
        black = history[start + 1] if start + 1 < len(history) else None
        turns.append(Turn(start // 2 + 1, white=history[start], black=black))
    return turns


def turn_to_pgn(turn: Turn) -> str:
    """Render one turn followed by a single space.

    A commented White ply interrupts the turn, so Black's reply gets its own
    ``<n>...`` marker.
    """
    number = turn.number
    if turn.white is None:
        if turn.black is None:
            return ""
        return f"{number}... {turn.black.to_pgn()} "

    text = f"{number}. {turn.white.to_pgn()} "
    if turn.black is not None:
        if turn.white.comment is not None:
            text += f"{number}... {turn.black.to_pgn()} "
        else:
            text += f"{turn.black.to_pgn()} "
    return text


def wrap_turns(pieces: Iterable[str], width: int = LINE_WIDTH) -> str:
    """Greedily pack turn strings into lines shorter than *width*.

    A turn is never split; one that is too long on its own gets its own line.
    """
    lines: list[str] = []
    row = ""
    for piece in pieces:
        if len(row + piece) < width:
            row += piece
            continue
        if row:
            lines.append(row.rstrip())
        row = piece
    if row:
        lines.append(row.rstrip())
    return "\n".join(lines)


def render_movetext(history: Sequence[Ply], width: int = LINE_WIDTH) -> str:
    return wrap_turns((turn_to_pgn(turn) for turn in group_turns(history)), width)


def render_tag_pairs(tag_pairs: Iterable[TagPair]) -> str:
    return "\n".join(tag.to_pgn() for tag in tag_pairs)


def render_pgn(tag_pairs: Iterable[TagPair], history: Sequence[Ply]) -> str:
    """Full record: tag pairs, a blank line, then the wrapped movetext."""
    return f"{render_tag_pairs(tag_pairs)}\n\n{render_movetext(history)}"


class PgnSupport:
    """PGN export for boards that keep a ``history`` list of plies.

    Hosts must provide ``history`` and may provide ``_tag_pairs``; the
    required roster is used until tags are assigned.
    """

    __slots__ = ()

    history: list[Ply]

    @property
    def tag_pairs(self) -> tuple[TagPair, ...]:
        tags = getattr(self, "_tag_pairs", None)
        if tags is None:
            tags = required_tag_pairs()
            self._tag_pairs = tags
        return tags

    @tag_pairs.setter
    def tag_pairs(self, pairs: Iterable[TagPair]) -> None:
        self._tag_pairs = tuple(pairs)

    @property
    def pgn_result(self) -> str | None:
        return tag_value(self.tag_pairs, "Result")

    @pgn_result.setter
    def pgn_result(self, result: str) -> None:
        self.tag_pairs = replace_tag_value(self.tag_pairs, "Result", result)

    def movetext_turns(self) -> list[Turn]:
        return group_turns(self.history)

    def movetext(self, width: int = LINE_WIDTH) -> str:
        return render_movetext(self.history, width)

    def to_pgn(self) -> str:
        return render_pgn(self.tag_pairs, self.history)
