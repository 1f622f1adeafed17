"""String searching, filtering and decoding helpers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain, groupby, pairwise

__all__ = [
    "str_str",
    "length_of_last_word",
    "is_vowel",
    "reverse_vowels",
    "find_min_difference",
    "remove_adjacent_duplicates",
    "remove_occurrences",
    "decode_message",
    "possible_string_count",
]

_MINUTES_PER_DAY = 1440


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, ignoring trailing spaces."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def is_vowel(ch: str) -> bool:
    """Tell whether a single character is an English vowel, in either case."""
    return len(ch) == 1 and ch.lower() in "aeiou"


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels of ``s``, leaving other characters in place."""
    vowels = reversed([c for c in s if is_vowel(c)])
    return "".join(next(vowels) if is_vowel(c) else c for c in s)


def find_min_difference(time_points: Iterable[str]) -> int:
    """Return the smallest gap in minutes between any two ``HH:MM`` times on a clock.

    A single time gives a full day. Raises ValueError for an empty input.
    """
    minutes = sorted(int(t[:2]) * 60 + int(t[3:5]) for t in time_points)
    if not minutes:
        raise ValueError("find_min_difference() arg is an empty iterable")
    gaps = (later - earlier for earlier, later in pairwise(minutes))
    wrap = _MINUTES_PER_DAY - minutes[-1] + minutes[0]
    return min(chain(gaps, [wrap]))


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def remove_occurrences(s: str, part: str) -> str:
    """Remove occurrences of ``part`` until none is left, leftmost first."""
    size = len(part)
    kept: list[str] = []
    for ch in s:
        kept.append(ch)
        if size and len(kept) >= size and "".join(kept[-size:]) == part:
            del kept[-size:]
    return "".join(kept)


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` with the substitution table given by ``key``.

    The first distinct non-space characters of ``key`` stand for ``a``, ``b``,
    ``c`` and so on. Spaces are kept. Raises ValueError on a character that
    the key does not map.
    """
    table: dict[str, str] = {}
    for ch in key:
        if ch != " " and ch not in table:
            table[ch] = chr(ord("a") + len(table))
    try:
        return "".join(" " if ch == " " else table[ch] for ch in message)
    except KeyError as exc:
        raise ValueError(f"character {exc.args[0]!r} is not in the key") from None


def possible_string_count(word: str) -> int:
    """Count the strings that could have been meant if at most one key was held too long."""
    return 1 + sum(len(list(run)) - 1 for _, run in groupby(word))