"""Binary-search based lookups over sorted, rotated and mountain-shaped sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

__all__ = [
    "find_pivot",
    "binary_search",
    "search_rotated",
    "search_range",
    "search_insert",
    "find_peak_element",
    "missing_number",
    "peak_index_in_mountain_array",
]


def find_pivot(nums: Sequence[int]) -> int:
    """Return the index of the largest element of a rotated ascending sequence.

    A sequence that is not rotated yields its last index; an empty one yields -1.
    """
    start, end = 0, len(nums) - 1
    while start <= end:
        if start == end:
            return start
        mid = start + (end - start) // 2
        if mid + 1 < len(nums) and nums[mid] > nums[mid + 1]:
            return mid
        if nums[start] > nums[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def binary_search(
    nums: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int:
    """Find ``target`` in the ascending slice ``nums[start..end]`` (inclusive).

    Returns its index, or -1 when it is not there.
    """
    if end is None:
        end = len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        value = nums[mid]
        if value == target:
            return mid
        if target > value:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending sequence of distinct values.

    Returns its index, or -1 when it is absent.
    """
    if not nums:
        return -1
    pivot = find_pivot(nums)
    if nums[0] <= target <= nums[pivot]:
        return binary_search(nums, target, 0, pivot)
    return binary_search(nums, target, pivot + 1, len(nums) - 1)


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in an ascending sequence.

    Both are -1 when the value does not occur.
    """
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target``, or where it would be inserted to keep order."""
    return bisect_left(nums, target)


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element that is larger than its neighbours.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("find_peak_element() arg is an empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def missing_number(nums: Sequence[int]) -> int:
    """Return the value of ``0..len(nums)`` that does not appear in ``nums``."""
    ordered = sorted(nums)
    low, high = 0, len(ordered) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if ordered[mid] == mid:
            low = mid + 1
        else:
            high = mid - 1
    return low


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Return the index of the first largest element, or -1 for an empty sequence."""
    return max(range(len(arr)), key=arr.__getitem__, default=-1)