"""Game - one PGN record that can be replayed onto a board."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from passant.errors import MalformedTagLine, MissingTagError, UnparsablePlyFragment
from passant.notation.models import TagPair, Turn
from passant.notation.movetext import MoveHost, MovetextParser
from passant.notation.tags import missing_required, surname, tag_value
from passant.options import DEFAULT_OPTIONS, ErrorPolicy, ParseOptions

_LOGGER = logging.getLogger(__name__)


def _parse_tag_lines(tag_lines: Iterable[str]) -> tuple[TagPair, ...]:
    tags: list[TagPair] = []
    for line in tag_lines:
        try:
            tags.append(TagPair.parse(line))
        except MalformedTagLine as exc:
            _LOGGER.warning("%s; line skipped", exc)
    return tuple(tags)


class Game:
    """A single PGN record: tag pairs plus raw movetext.

    The title is derived once, at construction, from the Date, Event,
    White, Black and Result tags.

    Args:
        tag_lines: Raw ``[Key "Value"]`` lines in file order.
        movetext: The record's movetext, physical lines joined by spaces.
        options: Parser settings used by :meth:`turns` and :meth:`to_board`.
        line_number: 1-based line on which the record starts, if known.
    """

    __slots__ = ("_tag_pairs", "_movetext", "_options", "_line_number", "_title")

    def __init__(
        self,
        tag_lines: Iterable[str],
        movetext: str,
        options: ParseOptions | None = None,
        line_number: int | None = None,
    ) -> None:
        self._options = options if options is not None else DEFAULT_OPTIONS
        self._tag_pairs = _parse_tag_lines(tag_lines)
        self._movetext = movetext
        self._line_number = line_number

        missing = self.missing_tags
        if missing:
            if self._options.require_tags:
                raise MissingTagError(missing)
            _LOGGER.warning(
                "Record at line %s is missing tags: %s",
                line_number if line_number is not None else "?",
                ", ".join(missing),
            )
        self._title = self._derive_title()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def tag_pairs(self) -> tuple[TagPair, ...]:
        return self._tag_pairs

    @property
    def movetext(self) -> str:
        return self._movetext

    @property
    def line_number(self) -> int | None:
        return self._line_number

    @property
    def title(self) -> str:
        return self._title

    @property
    def missing_tags(self) -> tuple[str, ...]:
        return missing_required(self._tag_pairs)

    @property
    def result(self) -> str | None:
        return self.tag_value("Result")

    def tag_value(self, key: str) -> str | None:
        return tag_value(self._tag_pairs, key)

    # ── Replay ───────────────────────────────────────────────────────────

    def turns(self) -> list[Turn]:
        """Parse the movetext without touching any board."""
        return self._parse(None)

    def to_board(self, board: MoveHost | None = None) -> MoveHost:
        """Replay every ply onto *board* (a fresh :class:`MoveHistory` if omitted).

        The board receives this game's tag pairs first; it is mutated in place
        and returned.
        """
        if board is None:
            from passant.history import MoveHistory

            board = MoveHistory()
        board.tag_pairs = self._tag_pairs
        self._parse(board)
        return board

    def _parse(self, board: MoveHost | None) -> list[Turn]:
        parser = MovetextParser(self._options)
        try:
            return parser.parse(
                self._movetext, board.move if board is not None else None
            )
        except UnparsablePlyFragment as exc:
            exc.at_line(self._line_number)
            raise

    # ── Helpers ──────────────────────────────────────────────────────────

    def _derive_title(self) -> str:
        def value(key: str) -> str:
            found = self.tag_value(key)
            return found if found is not None else "?"

        return "{} {}: {} vs. {} {}".format(
            value("Date"),
            value("Event"),
            surname(value("White")),
            surname(value("Black")),
            value("Result"),
        )

    def __repr__(self) -> str:
        return f"Game({self._title!r})"


def replay_games(
    games: Iterable[Game],
    board_factory: Callable[[], MoveHost] | None = None,
    options: ParseOptions | None = None,
) -> Iterator[MoveHost]:
    """Replay each game onto its own fresh board.

    With :attr:`ErrorPolicy.SKIP_RECORD` a record whose movetext cannot be
    parsed is logged and left out; any other policy lets the error through.
    Errors from the board itself always propagate.
    """
    if board_factory is None:
        from passant.history import MoveHistory

        board_factory = MoveHistory
    policy = (options if options is not None else DEFAULT_OPTIONS).on_error
    for game in games:
        board = board_factory()
        try:
            game.to_board(board)
        except UnparsablePlyFragment as exc:
            if policy is not ErrorPolicy.SKIP_RECORD:
                raise
            _LOGGER.warning("Skipping record %r: %s", game.title, exc)
            continue
        yield board
