"""Record reader for multi-game PGN streams.

A record is a block of ``[Key "Value"]`` lines followed by movetext and
closed by a blank line or the end of the stream.  ``%`` lines are skipped
wherever they appear.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from passant.notation.game import Game, replay_games
from passant.notation.movetext import MoveHost, brace_depth, fold_semicolon_comment
from passant.options import DEFAULT_OPTIONS, ParseOptions

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Record:
    """Raw text of one game as found in the stream."""

    tag_lines: tuple[str, ...]
    movetext: str
    line_number: int


def read_records(
    lines: Iterable[str], options: ParseOptions | None = None
) -> Iterator[Record]:
    """Group *lines* into records, lazily.

    Movetext lines are joined with a trailing space each.  Blank lines only
    close a record once both tags and movetext have been seen, so runs of
    blank lines never produce empty records.
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    tag_lines: list[str] = []
    movetext = ""
    start: int | None = None
    depth = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if line.startswith("%"):
            continue

        if line.startswith("["):
            if start is None:
                start = line_number
            tag_lines.append(line)
        elif not line:
            if tag_lines and movetext:
                yield Record(tuple(tag_lines), movetext, start or line_number)
                tag_lines = []
                movetext = ""
                start = None
                depth = 0
        else:
            folded = fold_semicolon_comment(line, opts.semicolon_comments, depth)
            if not folded:
                continue
            if start is None:
                start = line_number
            depth = brace_depth(folded, depth)
            movetext += folded + " "

    if tag_lines and movetext:
        yield Record(tuple(tag_lines), movetext, start or 1)
    elif tag_lines or movetext:
        _LOGGER.warning(
            "Dropping incomplete record at line %s (%s)",
            start,
            "no movetext" if tag_lines else "no tag pairs",
        )


def read_games(
    lines: Iterable[str], options: ParseOptions | None = None
) -> Iterator[Game]:
    """Lazily build a :class:`Game` per record in *lines*."""
    for record in read_records(lines, options):
        yield Game(record.tag_lines, record.movetext, options, record.line_number)


def loads(text: str, options: ParseOptions | None = None) -> list[Game]:
    """Read every game contained in *text*."""
    return list(read_games(text.splitlines(), options))


class PgnFile:
    """A PGN file on disk that can contain multiple games.

    Nothing is cached: every call to :meth:`games` reopens the file and
    reads it from the start.

    Example:
        >>> pgn = PgnFile("tournament.pgn")
        >>> for game in pgn.games():
        ...     print(game.title)
    """

    __slots__ = ("_path", "_options", "_encoding")

    def __init__(
        self,
        path: Path | str,
        options: ParseOptions | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._path = Path(path)
        self._options = options if options is not None else DEFAULT_OPTIONS
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def games(self) -> Iterator[Game]:
        with open(self._path, encoding=self._encoding, errors="replace") as handle:
            yield from read_games(handle, self._options)

    def load(self) -> list[Game]:
        """Read the whole file once into a list."""
        games = list(self.games())
        _LOGGER.debug("Read %d games from %s", len(games), self._path)
        return games

    def boards(
        self, board_factory: Callable[[], MoveHost] | None = None
    ) -> list[MoveHost]:
        """Replay every game onto a fresh board from *board_factory*."""
        return list(replay_games(self.games(), board_factory, self._options))
