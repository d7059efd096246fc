"""Locate search blocks in a document by fuzzy matching and splice in edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import accumulate, count

__all__ = ["Diff", "Edit", "EditError", "levenshtein", "similarity", "search", "apply"]


@dataclass(frozen=True)
class Diff:
    """A replacement of ``search`` by ``replace`` expected near ``line`` (1-based)."""

    line: int = 0
    search: str = ""
    replace: str = ""


@dataclass(frozen=True)
class Edit:
    """Replace the text between offsets ``start`` (inclusive) and ``end`` (exclusive)."""

    start: int
    end: int
    text: str = ""


class EditError(ValueError):
    """Raised when a set of edits cannot be applied to a document."""


def levenshtein(a: str, b: str) -> int:
    """Return the edit distance between two strings."""
    if a == b:
        return 0
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return len(b)
    previous = list(range(len(a) + 1))
    for row, char_b in enumerate(b, start=1):
        current = [row]
        for col, char_a in enumerate(a, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[col] + 1,
                    current[col - 1] + 1,
                    previous[col - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance / longest length``; two empty strings are identical."""
    if not a and not b:
        return 1.0
    return 1 - levenshtein(a, b) / max(len(a), len(b))


def _split_lines(text: str) -> list[str]:
    """Split after each newline, keeping it, with no trailing empty piece."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _candidate_starts(hint: int, size: int, total: int) -> Iterator[int]:
    """Yield window starts moving outward from ``hint``, above before below."""
    for radius in count():
        tried = False
        left = hint - radius
        if left >= 0 and left + size <= total:
            tried = True
            yield left
        right = hint + radius
        if radius > 0 and right + size <= total:
            tried = True
            yield right
        if not tried:
            return


def search(source: str, diff: Diff, threshold: float) -> Edit | None:
    """Find the block of ``source`` matching ``diff.search`` closest to ``diff.line``.

    Returns the edit replacing that block with ``diff.replace``, or ``None``
    when no window reaches ``threshold`` similarity.
    """
    lines = _split_lines(source)
    if not lines:
        return None
    offsets = list(accumulate((len(line) for line in lines), initial=0))

    size = len(_split_lines(diff.search))
    if size == 0 or size > len(lines):
        return None

    hint = max(0, min(diff.line - 1, len(lines) - 1))
    for start in _candidate_starts(hint, size, len(lines)):
        chunk = "".join(lines[start : start + size])
        if similarity(chunk, diff.search) >= threshold:
            return Edit(offsets[start], offsets[start + size], diff.replace)
    return None


def apply(source: str, edits: Iterable[Edit]) -> str:
    """Apply all edits to ``source`` at once, back to front.

    Raises :class:`EditError` for an invalid range or overlapping edits.
    """
    result = source
    last_end = len(result)
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        if edit.start < 0 or edit.end < edit.start or edit.end > len(result):
            raise EditError(f"invalid edit range [{edit.start},{edit.end})")
        if edit.end > last_end:
            raise EditError(f"overlapping edits at [{edit.start},{edit.end})")
        result = result[: edit.start] + edit.text + result[edit.end :]
        last_end = edit.start
    return result