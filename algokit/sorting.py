"""Classic comparison and distribution sorts.

Every function takes any iterable, leaves it untouched, and returns a new
list in ascending order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

_RADIX = 10


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by swapping neighbours; stops early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by shifting larger elements right and inserting each element."""
    result = list(items)
    for i, current in enumerate(result):
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each round."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def shell_sort(items: Iterable[T]) -> list[T]:
    """Sort with insertion passes over gaps n/2, n/4, ..., 1."""
    result = list(items)
    gap = len(result) // 2
    while gap >= 1:
        for i in range(gap, len(result), gap):
            current = result[i]
            j = i - gap
            while j >= 0 and result[j] > current:
                result[j + gap] = result[j]
                j -= gap
            result[j + gap] = current
        gap //= 2
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    a = b = 0
    while a < len(left) and b < len(right):
        if left[a] <= right[b]:
            merged.append(left[a])
            a += 1
        else:
            merged.append(right[b])
            b += 1
    merged.extend(left[a:])
    merged.extend(right[b:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort using the first element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[low]
        i, j = low, high
        while i < j:
            while i < j and result[j] >= pivot:
                j -= 1
            if i < j:
                result[i] = result[j]
                i += 1
            while i < j and result[i] < pivot:
                i += 1
            if i < j:
                result[j] = result[i]
                j -= 1
        result[i] = pivot
        pending.append((low, i - 1))
        pending.append((i + 1, high))
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers.

    Raises TypeError for non-integers and ValueError for negative numbers.
    """
    result = list(items)
    for value in result:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"radix_sort needs integers, got {value!r}")
        if value < 0:
            raise ValueError(f"radix_sort needs non-negative integers, got {value}")
    largest = max(result, default=0)
    offset = 1
    while largest // offset > 0:
        buckets: list[list[Any]] = [[] for _ in range(_RADIX)]
        for value in result:
            buckets[(value // offset) % _RADIX].append(value)
        result = [value for bucket in buckets for value in bucket]
        offset *= _RADIX
    return result