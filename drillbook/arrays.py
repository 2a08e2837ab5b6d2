"""Searching, summarising and sorting sequences of numbers and words."""

from __future__ import annotations

from collections.abc import Sequence


def _require_items(values: Sequence) -> None:
    if not values:
        raise ValueError("sequence is empty")


def largest(values: Sequence[int]) -> int:
    """Return the largest element of a non-empty sequence."""
    _require_items(values)
    return max(values)


def smallest(values: Sequence[int]) -> int:
    """Return the smallest element of a non-empty sequence."""
    _require_items(values)
    return min(values)


def sum_and_average(values: Sequence[int]) -> tuple[int, float]:
    """Return the sum and the mean of a non-empty sequence."""
    _require_items(values)
    total = sum(values)
    return total, total / len(values)


def linear_search(values: Sequence[int], key: int) -> bool:
    """Return True when ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def binary_search_index(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search(values: Sequence[int], key: int) -> bool:
    """Return True when ``key`` occurs in the ascending ``values``."""
    return binary_search_index(values, key) is not None


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quicksort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy using top-down merge sort (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def sort_strings(words: Sequence[str]) -> list[str]:
    """Return the words in code-point (byte-wise) order."""
    return sorted(words)