"""
Heap-based selection.

top_k keeps a min-heap of size k so that each of the n items costs O(log k),
beating a full sort when k is small.
"""

import heapq
from collections import Counter
from itertools import count

_SENTINEL = object()


def top_k(items, k: int, key=None) -> list:
    """The k largest items, largest first. Ties keep input order."""
    if k <= 0:
        raise ValueError("k must be positive")
    key = key or (lambda x: x)
    heap = []
    # Negated sequence number: on equal keys the later item is evicted first
    for seq, item in enumerate(items):
        entry = (key(item), -seq, item)
        if len(heap) < k:
            heapq.heappush(heap, entry)
        elif entry[:2] > heap[0][:2]:
            heapq.heapreplace(heap, entry)
    heap.sort(key=lambda e: e[:2], reverse=True)
    return [item for _, _, item in heap]


def k_smallest(items, k: int, key=None) -> list:
    """The k smallest items, smallest first."""
    if k <= 0:
        raise ValueError("k must be positive")
    return heapq.nsmallest(k, items, key=key)


def kth_largest(nums, k: int):
    nums = list(nums)
    if not 1 <= k <= len(nums):
        raise ValueError(f"k={k} out of range for {len(nums)} items")
    heap = nums[:k]
    heapq.heapify(heap)
    for num in nums[k:]:
        if num > heap[0]:
            heapq.heapreplace(heap, num)
    return heap[0]


def top_k_frequent(nums, k: int) -> list:
    """The k most frequent values; equal counts ordered by first appearance."""
    counts = Counter(nums)
    return top_k(counts, k, key=lambda value: counts[value])


def merge_k_sorted(lists) -> list:
    """Merge already-sorted lists in O(N log k)."""
    heap = []
    tie = count()
    for lst in lists:
        it = iter(lst)
        first = next(it, _SENTINEL)
        if first is not _SENTINEL:
            heap.append((first, next(tie), it))
    heapq.heapify(heap)

    merged = []
    while heap:
        value, _, it = heap[0]
        merged.append(value)
        nxt = next(it, _SENTINEL)
        if nxt is _SENTINEL:
            heapq.heappop(heap)
        else:
            heapq.heapreplace(heap, (nxt, next(tie), it))
    return merged


class KthLargest:
    """Streaming k-th largest: add() returns the current k-th largest value."""

    def __init__(self, k: int, nums=()):
        if k <= 0:
            raise ValueError("k must be positive")
        self.k = k
        self.heap = []
        for num in nums:
            self.add(num)

    def add(self, val):
        if len(self.heap) < self.k:
            heapq.heappush(self.heap, val)
        elif val > self.heap[0]:
            heapq.heapreplace(self.heap, val)
        return self.heap[0] if len(self.heap) == self.k else None
