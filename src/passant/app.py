"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from passant.errors import PgnError
from passant.history import MoveHistory
from passant.notation.reader import PgnFile
from passant.options import ErrorPolicy, ParseOptions

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passant", description="Read and re-write PGN game records."
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip turns that cannot be parsed instead of failing",
    )
    parser.add_argument(
        "--skip-records",
        action="store_true",
        help="Skip whole records whose movetext cannot be parsed",
    )
    parser.add_argument(
        "--semicolon-comments",
        action="store_true",
        help="Keep '; comment' text as ply comments instead of dropping it",
    )
    parser.add_argument(
        "--require-tags",
        action="store_true",
        help="Fail on records missing one of the seven required tags",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    titles = commands.add_parser("titles", help="Print one title per game")
    titles.add_argument("files", nargs="+")
    render = commands.add_parser("render", help="Replay and re-serialize games")
    render.add_argument("files", nargs="+")
    return parser


def _options_from_args(args: argparse.Namespace) -> ParseOptions:
    policy = ErrorPolicy.ABORT
    if args.skip_records:
        policy = ErrorPolicy.SKIP_RECORD
    elif args.lenient:
        policy = ErrorPolicy.SKIP_TURN
    return ParseOptions(
        on_error=policy,
        semicolon_comments=args.semicolon_comments,
        require_tags=args.require_tags,
    )


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    for path in args.files:
        pgn = PgnFile(path, options)
        _LOGGER.info("Reading %s", pgn.path)
        if args.command == "titles":
            for game in pgn.games():
                print(game.title)
        else:
            for board in pgn.boards(MoveHistory):
                print(board.to_pgn())
                print()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``passant`` command and return its exit status."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return run(args)
    except (OSError, PgnError) as exc:
        print(f"passant: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
