"""Palindrome checks and counts."""

from __future__ import annotations

__all__ = [
    "is_palindrome",
    "count_palindromic_substrings",
    "is_palindrome_range",
    "valid_palindrome_with_one_deletion",
]


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, looking only at ASCII letters
    and digits and ignoring case."""
    kept = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return kept == kept[::-1]


def _expand(s: str, left: int, right: int) -> int:
    count = 0
    while left >= 0 and right < len(s) and s[left] == s[right]:
        count += 1
        left -= 1
        right += 1
    return count


def count_palindromic_substrings(s: str) -> int:
    """Count the palindromic substrings of ``s``, by position."""
    return sum(
        _expand(s, center, center) + _expand(s, center, center + 1)
        for center in range(len(s))
    )


def is_palindrome_range(s: str, i: int, j: int) -> bool:
    """Tell whether ``s[i..j]`` (inclusive) is a palindrome; an empty range is one."""
    segment = s[i : j + 1] if j >= i else ""
    return segment == segment[::-1]


def valid_palindrome_with_one_deletion(s: str) -> bool:
    """Tell whether ``s`` becomes a palindrome after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return is_palindrome_range(s, i + 1, j) or is_palindrome_range(s, i, j - 1)
        i += 1
        j -= 1
    return True