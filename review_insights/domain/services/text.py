# review_insights/domain/services/text.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

import re

_PUNCT = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lower-case, blank out punctuation, split on whitespace."""
    return _PUNCT.sub(" ", text.lower()).split()


def find_all(haystack: str, needle: str) -> list[int]:
    """
    Start offsets of every non-overlapping occurrence of `needle`.

    The cursor advances past each match, so occurrences may adjoin but never
    overlap ("aaaa" / "aa" -> [0, 2]). An empty needle matches nothing.
    """
    if not needle:
        return []
    hits: list[int] = []
    pos = haystack.find(needle)
    while pos != -1:
        hits.append(pos)
        pos = haystack.find(needle, pos + len(needle))
    return hits


def context_bounds(text_len: int, start: int, length: int, radius: int) -> tuple[int, int]:
    return max(0, start - radius), min(text_len, start + length + radius)


def extract_context(text: str, start: int, length: int, radius: int = 50) -> str:
    """Window of `radius` chars on both sides of a match, clipped and stripped."""
    lo, hi = context_bounds(len(text), start, length, radius)
    return text[lo:hi].strip()


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))
