"""Shared notation-layer data models."""

from __future__ import annotations

import re
from dataclasses import dataclass

from passant.errors import MalformedTagLine

_TAG_LINE_RE = re.compile(r'^\[(\S+)\s+"(.*)"\]$')


@dataclass(frozen=True, slots=True)
class TagPair:
    """A single ``[Key "Value"]`` metadata entry."""

    key: str
    value: str = ""

    @classmethod
    def parse(cls, line: str) -> TagPair:
        """Parse a tag-pair line, raising :class:`MalformedTagLine` on mismatch."""
        match = _TAG_LINE_RE.match(line.strip())
        if match is None:
            raise MalformedTagLine(line)
        key, value = match.groups()
        return cls(key, value)

    def to_pgn(self) -> str:
        return f'[{self.key} "{self.value}"]'


@dataclass(slots=True)
class Ply:
    """A half-move with an optional comment.

    ``comment`` is ``None`` when the ply carries no comment at all; an empty
    string is a comment whose body was only whitespace.
    """

    move_text: str
    comment: str | None = None

    def to_pgn(self) -> str:
        if self.comment is None:
            return self.move_text
        # PGN comments cannot contain a closing brace.
        safe_comment = self.comment.replace("}", "]")
        return f"{self.move_text} {{{safe_comment}}}"


@dataclass(slots=True)
class Turn:
    """One numbered turn.

    ``white`` is ``None`` only for a turn that opens with a ``<n>...`` marker.
    """

    number: int
    white: Ply | None = None
    black: Ply | None = None

    @property
    def plies(self) -> tuple[Ply, ...]:
        return tuple(ply for ply in (self.white, self.black) if ply is not None)
