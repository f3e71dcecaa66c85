"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorPolicy(StrEnum):
    """What to do with a movetext fragment that cannot be parsed."""

    ABORT = "abort"
    SKIP_TURN = "skip-turn"
    SKIP_RECORD = "skip-record"


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Immutable reader/parser settings.

    Args:
        on_error: Recovery policy for unparsable fragments.
        semicolon_comments: Attach ``; text`` comments to plies instead of
            discarding them.
        require_tags: Raise when a record misses one of the seven required tags.
    """

    on_error: ErrorPolicy = ErrorPolicy.ABORT
    semicolon_comments: bool = False
    require_tags: bool = False

    @classmethod
    def strict(cls) -> ParseOptions:
        """Stop at the first broken turn and insist on the seven required tags."""
        return cls(on_error=ErrorPolicy.ABORT, require_tags=True)

    @classmethod
    def lenient(cls) -> ParseOptions:
        """Drop broken turns and keep going."""
        return cls(on_error=ErrorPolicy.SKIP_TURN)


DEFAULT_OPTIONS = ParseOptions()
