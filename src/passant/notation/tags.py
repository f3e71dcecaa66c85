"""Tag-pair roster and key-based lookup helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from passant.notation.models import TagPair

# Canonical order of the Seven Tag Roster.
REQUIRED_TAGS: tuple[str, ...] = (
    "Event",
    "Site",
    "Date",
    "Round",
    "White",
    "Black",
    "Result",
)


def required_tag_pairs(today: date | None = None) -> tuple[TagPair, ...]:
    """Default tags for a fresh record, in canonical order."""
    day = today if today is not None else date.today()
    return (
        TagPair("Event", "casual game"),
        TagPair("Site", "?"),
        TagPair("Date", day.strftime("%Y.%m.%d")),
        TagPair("Round", "?"),
        TagPair("White", "?"),
        TagPair("Black", "?"),
        TagPair("Result", "*"),
    )


def tag_value(tag_pairs: Iterable[TagPair], key: str) -> str | None:
    """Case-insensitive lookup of *key*; the first match wins."""
    wanted = key.lower()
    for tag in tag_pairs:
        if tag.key.lower() == wanted:
            return tag.value
    return None


def replace_tag_value(
    tag_pairs: Sequence[TagPair], key: str, value: str
) -> tuple[TagPair, ...]:
    """Return *tag_pairs* with *key* set to *value*, keeping the order.

    The tag is appended when absent.
    """
    wanted = key.lower()
    updated: list[TagPair] = []
    replaced = False
    for tag in tag_pairs:
        if not replaced and tag.key.lower() == wanted:
            updated.append(TagPair(tag.key, value))
            replaced = True
        else:
            updated.append(tag)
    if not replaced:
        updated.append(TagPair(key, value))
    return tuple(updated)


def missing_required(tag_pairs: Iterable[TagPair]) -> tuple[str, ...]:
    present = {tag.key.lower() for tag in tag_pairs}
    return tuple(key for key in REQUIRED_TAGS if key.lower() not in present)


def surname(name: str) -> str:
    """Text before the first comma of a player tag (``"Smith, J"`` -> ``"Smith"``)."""
    return name.split(",", 1)[0]
