"""Movetext tokenizer: splits PGN movetext into turns and commented plies.

The text is cut on move-number tokens (``12.`` or ``12...``), one fragment
per turn.  Inside a fragment comments are attached by position::

    e4                      -> e4
    e4 e5                   -> e4, e5
    e4 {a comment}          -> e4 {a comment}
    e4 {a comment} e5       -> e4 {a comment}, e5
    e4 e5 {a comment}       -> e4, e5 {a comment}
    e4 {first} e5 {second}  -> e4 {first}, e5 {second}

Result markers (``1-0``, ``0-1``, ``1/2-1/2``, ``*``) never become plies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Protocol

from passant.errors import UnparsablePlyFragment
from passant.notation.models import Ply, TagPair, Turn
from passant.options import DEFAULT_OPTIONS, ErrorPolicy, ParseOptions

_LOGGER = logging.getLogger(__name__)

# Brace comments are matched first so numbers inside them never split turns.
_FRAGMENT_SPLIT_RE = re.compile(r"\{[^}]*\}|(\d+)(\.\.\.|\.)")
_TOKEN_RE = re.compile(r"\{([^}]*)\}|([^\s{}]+)")
_RESULT_MARKER_RE = re.compile(r"1/2-1/2|1-0|0-1")
_TRAILING_RESULT_RE = re.compile(r"(?:^|\s+)(?:1/2-1/2|1-0|0-1|\*)$")


class CommentableMove(Protocol):
    """What a move-application host hands back for each applied ply."""

    comment: str | None


ApplyMove = Callable[[str], CommentableMove]


class MoveHost(Protocol):
    """A board that PGN games can be replayed onto."""

    tag_pairs: tuple[TagPair, ...]

    def move(self, move_text: str) -> CommentableMove: ...


def brace_depth(text: str, depth: int = 0) -> int:
    """Return how many brace comments are still open after *text*.

    Counting starts at *depth*; a stray ``}`` never takes it below zero.
    """
    for ch in text:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(0, depth - 1)
    return depth


def fold_semicolon_comment(line: str, keep: bool, depth: int = 0) -> str:
    """Rewrite a ``; comment`` running to the end of *line*.

    With *keep* the comment becomes a brace comment, otherwise it is dropped.
    Semicolons inside brace comments are left alone; *depth* is the number
    of brace comments opened on earlier lines and not yet closed.
    """
    for idx, ch in enumerate(line):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            head = line[:idx].rstrip()
            comment = line[idx + 1 :].strip()
            if not keep:
                return head
            safe_comment = comment.replace("{", "[").replace("}", "]")
            return f"{head} {{{safe_comment}}}".lstrip()
    return line


def normalize_movetext(movetext: str, keep_semicolon_comments: bool = False) -> str:
    """Resolve semicolon comments line by line; other text is untouched."""
    if ";" not in movetext:
        return movetext
    return "\n".join(
        fold_semicolon_comment(line, keep_semicolon_comments)
        for line in movetext.split("\n")
    )


def split_fragments(movetext: str) -> Iterator[tuple[int | None, bool, int, str]]:
    """Yield ``(number, is_continuation, offset, fragment)`` per turn fragment.

    The text before the first move number comes first with ``number=None``.
    """
    number: int | None = None
    continuation = False
    start = 0
    for match in _FRAGMENT_SPLIT_RE.finditer(movetext):
        if match.group(1) is None:
            continue
        yield number, continuation, start, movetext[start : match.start()]
        number = int(match.group(1))
        continuation = match.group(2) == "..."
        start = match.end()
    yield number, continuation, start, movetext[start:]


def _clean_move(token: str) -> str:
    cleaned = _RESULT_MARKER_RE.sub("", token).strip()
    return "" if cleaned == "*" else cleaned


def _comment_text(body: str) -> str | None:
    # "{}" is no comment at all; "{  }" is an empty one.
    if body == "":
        return None
    return body.strip()


class MovetextParser:
    """Turn PGN movetext into :class:`Turn` objects.

    Args:
        options: Error policy and comment handling; defaults to strict parsing.
    """

    __slots__ = ("_options",)

    def __init__(self, options: ParseOptions | None = None) -> None:
        self._options = options if options is not None else DEFAULT_OPTIONS

    @property
    def options(self) -> ParseOptions:
        return self._options

    def parse(self, movetext: str, apply_move: ApplyMove | None = None) -> list[Turn]:
        """Parse *movetext*, calling *apply_move* once per ply in game order.

        Errors raised by *apply_move* propagate unchanged.  Unparsable
        fragments raise :class:`UnparsablePlyFragment` unless the policy is
        :attr:`ErrorPolicy.SKIP_TURN`.
        """
        text = normalize_movetext(movetext, self._options.semicolon_comments)
        turns: list[Turn] = []

        for index, (number, continuation, offset, fragment) in enumerate(
            split_fragments(text)
        ):
            if not fragment.strip():
                continue
            try:
                plies = self._fragment_plies(
                    fragment, offset, index, number is None, continuation
                )
            except UnparsablePlyFragment as exc:
                if self._options.on_error is not ErrorPolicy.SKIP_TURN:
                    raise
                _LOGGER.warning("Skipping turn: %s", exc)
                continue
            if not plies:
                continue

            if apply_move is not None:
                for ply in plies:
                    played = apply_move(ply.move_text)
                    if ply.comment is not None:
                        played.comment = ply.comment
            turn_number = number if number is not None else 1
            self._place(turns, turn_number, continuation, plies)

        return turns

    # -- Fragment analysis --------------------------------------------------

    def _fragment_plies(
        self,
        fragment: str,
        offset: int,
        index: int,
        leading: bool,
        continuation: bool,
    ) -> list[Ply]:
        def fail(reason: str) -> UnparsablePlyFragment:
            return UnparsablePlyFragment(fragment, offset, index, reason)

        body = _TRAILING_RESULT_RE.sub("", fragment.strip())
        if not body:
            return []

        # (position, comment body or None, move token or None)
        tokens = [
            (match.start(), match.group(1), match.group(2))
            for match in _TOKEN_RE.finditer(body)
        ]
        if any(ch in "{}" for ch in _TOKEN_RE.sub(" ", body)):
            raise fail("unbalanced comment braces")
        if any(comment is not None and "{" in comment for _, comment, _ in tokens):
            raise fail("nested comment braces")

        moves = [(pos, move) for pos, _, move in tokens if move is not None]
        if not moves:
            if leading:
                _LOGGER.debug("Ignoring movetext preamble %r", body)
                return []
            raise fail("comment without a move")
        if tokens[0][2] is None:
            raise fail("comment where a move was expected")
        if len(moves) > 2:
            raise fail(f"{len(moves)} moves in a single turn")
        if continuation and len(moves) > 1:
            raise fail("black continuation holds two moves")

        comments = [(pos, text) for pos, text, _ in tokens if text is not None]
        first_comment: str | None = None
        second_comment: str | None = None
        if len(moves) == 1:
            if comments:
                first_comment = _comment_text(comments[0][1])
        else:
            second_at = moves[1][0]
            between = [c for pos, c in comments if pos < second_at]
            if between:
                first_comment = _comment_text(between[0])
            if tokens[-1][1] is not None and tokens[-1][0] > second_at:
                second_comment = _comment_text(tokens[-1][1])

        plies: list[Ply] = []
        for (_, move), comment in zip(moves, (first_comment, second_comment)):
            cleaned = _clean_move(move)
            if cleaned:
                plies.append(Ply(cleaned, comment))
        return plies

    @staticmethod
    def _place(
        turns: list[Turn], number: int, continuation: bool, plies: list[Ply]
    ) -> None:
        if continuation:
            last = turns[-1] if turns else None
            if (
                last is not None
                and last.number == number
                and last.white is not None
                and last.black is None
            ):
                last.black = plies[0]
            else:
                turns.append(Turn(number, black=plies[0]))
            return

        turn = Turn(number, white=plies[0])
        if len(plies) > 1:
            turn.black = plies[1]
        turns.append(turn)


def parse_movetext(
    movetext: str,
    apply_move: ApplyMove | None = None,
    options: ParseOptions | None = None,
) -> list[Turn]:
    """Module-level shortcut for :meth:`MovetextParser.parse`."""
    return MovetextParser(options).parse(movetext, apply_move)
