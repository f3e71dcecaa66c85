"""MoveHistory - a rules-free host that records plies as they are played."""

from __future__ import annotations

from collections.abc import Iterable

from passant.notation.models import Ply, TagPair
from passant.notation.writer import PgnSupport


class MoveHistory(PgnSupport):
    """Board stand-in that accepts every move without validation.

    Hosts with real chess rules implement the same ``move()`` signature;
    this one is enough for reading, annotating and re-serializing games.
    """

    __slots__ = ("history", "_tag_pairs")

    def __init__(self, tag_pairs: Iterable[TagPair] | None = None) -> None:
        self.history: list[Ply] = []
        self._tag_pairs: tuple[TagPair, ...] | None = (
            tuple(tag_pairs) if tag_pairs is not None else None
        )

    def move(self, move_text: str) -> Ply:
        if not move_text:
            raise ValueError("Empty move text")
        ply = Ply(move_text)
        self.history.append(ply)
        return ply

    def undo(self) -> Ply | None:
        """Remove and return the last ply, or ``None`` if nothing was played."""
        if not self.history:
            return None
        return self.history.pop()

    def clear(self) -> None:
        self.history.clear()

    @property
    def move_texts(self) -> list[str]:
        return [ply.move_text for ply in self.history]

    def __len__(self) -> int:
        return len(self.history)

    def __repr__(self) -> str:
        return f"MoveHistory({' '.join(self.move_texts)!r})"
