"""Error taxonomy for PGN reading and parsing."""

from __future__ import annotations


class PgnError(ValueError):
    """Base class for every error raised while reading PGN text."""


class MalformedTagLine(PgnError):
    """A ``[``-prefixed line that is not a ``[Key "Value"]`` tag pair."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Malformed tag pair line: {line!r}")
        self.line = line


class MissingTagError(PgnError):
    """A record lacks one or more of the required seven tags."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        super().__init__(f"Missing required tags: {', '.join(missing)}")
        self.missing = missing


class UnparsablePlyFragment(PgnError):
    """A movetext fragment whose move tokens cannot be isolated.

    Args:
        fragment: The offending fragment text.
        offset: Character offset of the fragment inside the movetext.
        index: Position of the fragment among all fragments of the movetext.
        reason: Short description of what went wrong.
    """

    def __init__(self, fragment: str, offset: int, index: int, reason: str) -> None:
        self.fragment = fragment
        self.offset = offset
        self.index = index
        self.reason = reason
        self.line_number: int | None = None
        super().__init__(self._describe())

    def at_line(self, line_number: int | None) -> UnparsablePlyFragment:
        """Attach the record's starting line number and refresh the message."""
        self.line_number = line_number
        self.args = (self._describe(),)
        return self

    def _describe(self) -> str:
        where = f"offset {self.offset} (fragment {self.index})"
        if self.line_number is not None:
            where = f"record at line {self.line_number}, {where}"
        return f"Cannot parse {self.fragment.strip()!r} at {where}: {self.reason}"
