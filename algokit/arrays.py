"""In-place and functional operations on integer and character lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import takewhile

__all__ = [
    "remove_element",
    "plus_one",
    "sort_colors",
    "merge",
    "move_zeroes",
    "find_duplicate",
    "reverse_string",
    "sorted_squares",
    "find_middle_index",
    "final_position_of_snake",
]


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front, in order; return their count.

    Elements past the returned count are left as they were.
    """
    kept = [x for x in nums if x != val]
    nums[: len(kept)] = kept
    return len(kept)


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the decimal number held as a list of digits, in place."""
    nines = sum(1 for _ in takewhile(lambda d: d == 9, reversed(digits)))
    if nines == len(digits):
        digits[:] = [1] + [0] * nines
    else:
        digits[-nines - 1] += 1
        digits[len(digits) - nines:] = [0] * nines
    return digits


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with a single three-way partition pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Replace ``nums1`` with the sorted merge of ``nums1[:m]`` and ``nums2[:n]``."""
    nums1[:] = heapq.merge(nums1[:m], nums2[:n])


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the other values."""
    non_zero = [x for x in nums if x != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_duplicate(nums: Iterable[int]) -> int:
    """Return the first value seen a second time, or -1 if every value is unique."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    return -1


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def sorted_squares(nums: Iterable[int]) -> list[int]:
    """Return the squares of ``nums`` in ascending order."""
    return sorted(x * x for x in nums)


def find_middle_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if total - left - value == left:
            return index
        left += value
    return -1


_MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def final_position_of_snake(n: int, commands: Iterable[str]) -> int:
    """Follow UP/DOWN/LEFT/RIGHT commands from cell 0 of an n x n grid.

    Returns the final cell as ``row * n + column``; only each command's first
    letter matters and unknown commands are ignored.
    """
    row = col = 0
    for command in commands:
        d_row, d_col = _MOVES.get(command[:1], (0, 0))
        row += d_row
        col += d_col
    return row * n + col