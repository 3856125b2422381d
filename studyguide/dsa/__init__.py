"""
Reference implementations of the algorithms taught in notes/dsa/.

CATALOG lists every public algorithm with its topic and complexity; notes link
to entries by name and `studyguide algorithms` prints the table.
"""

from dataclasses import dataclass
from typing import Callable

from . import binary_search, bst, dp, graphs, heaps, trie, two_pointers, union_find
from .bst import BinarySearchTree, TreeNode, is_valid_bst
from .heaps import KthLargest, top_k
from .trie import Trie
from .union_find import UnionFind


@dataclass(frozen=True)
class Algorithm:
    name: str
    topic: str
    time: str
    space: str
    impl: Callable

    @property
    def qualname(self) -> str:
        return f"{self.impl.__module__}.{self.impl.__qualname__}"


CATALOG = [
    Algorithm("two-sum-sorted", "two-pointers", "O(n)", "O(1)", two_pointers.two_sum_sorted),
    Algorithm("three-sum", "two-pointers", "O(n^2)", "O(1)", two_pointers.three_sum),
    Algorithm("container-with-most-water", "two-pointers", "O(n)", "O(1)", two_pointers.max_area),
    Algorithm("remove-duplicates", "two-pointers", "O(n)", "O(1)", two_pointers.remove_duplicates),
    Algorithm("valid-palindrome", "two-pointers", "O(n)", "O(1)", two_pointers.is_palindrome),
    Algorithm("trapping-rain-water", "two-pointers", "O(n)", "O(1)", two_pointers.trap),
    Algorithm("longest-substring-without-repeat", "two-pointers", "O(n)", "O(k)",
              two_pointers.length_of_longest_substring),
    Algorithm("binary-search", "binary-search", "O(log n)", "O(1)", binary_search.binary_search),
    Algorithm("lower-bound", "binary-search", "O(log n)", "O(1)", binary_search.lower_bound),
    Algorithm("search-rotated", "binary-search", "O(log n)", "O(1)", binary_search.search_rotated),
    Algorithm("find-min-rotated", "binary-search", "O(log n)", "O(1)", binary_search.find_min_rotated),
    Algorithm("trie", "trie", "O(L) per op", "O(total chars)", trie.Trie),
    Algorithm("union-find", "union-find", "O(alpha(n)) per op", "O(n)", union_find.UnionFind),
    Algorithm("count-components", "union-find", "O(E alpha(n))", "O(n)", union_find.count_components),
    Algorithm("redundant-connection", "union-find", "O(E alpha(n))", "O(n)",
              union_find.find_redundant_connection),
    Algorithm("number-of-islands", "union-find", "O(rc alpha(rc))", "O(rc)", union_find.num_islands),
    Algorithm("binary-search-tree", "trees", "O(h) per op", "O(n)", bst.BinarySearchTree),
    Algorithm("validate-bst", "trees", "O(n)", "O(h)", bst.is_valid_bst),
    Algorithm("topological-sort-kahn", "graphs", "O(V + E)", "O(V)", graphs.topological_sort_kahn),
    Algorithm("topological-sort-dfs", "graphs", "O(V + E)", "O(V)", graphs.topological_sort_dfs),
    Algorithm("course-schedule", "graphs", "O(V + E)", "O(V + E)", graphs.can_finish),
    Algorithm("course-schedule-order", "graphs", "O(V + E)", "O(V + E)", graphs.find_order),
    Algorithm("top-k", "heaps", "O(n log k)", "O(k)", heaps.top_k),
    Algorithm("k-smallest", "heaps", "O(n log k)", "O(k)", heaps.k_smallest),
    Algorithm("kth-largest", "heaps", "O(n log k)", "O(k)", heaps.kth_largest),
    Algorithm("top-k-frequent", "heaps", "O(n log k)", "O(n)", heaps.top_k_frequent),
    Algorithm("merge-k-sorted", "heaps", "O(N log k)", "O(k)", heaps.merge_k_sorted),
    Algorithm("kth-largest-stream", "heaps", "O(log k) per add", "O(k)", heaps.KthLargest),
    Algorithm("coin-change", "dynamic-programming", "O(amount * coins)", "O(amount)", dp.coin_change),
    Algorithm("coin-change-ways", "dynamic-programming", "O(amount * coins)", "O(amount)",
              dp.coin_change_ways),
    Algorithm("lis-length", "dynamic-programming", "O(n log n)", "O(n)", dp.lis_length),
    Algorithm("longest-increasing-subsequence", "dynamic-programming", "O(n log n)", "O(n)",
              dp.longest_increasing_subsequence),
    Algorithm("climbing-stairs", "dynamic-programming", "O(n)", "O(1)", dp.climb_stairs),
    Algorithm("max-subarray", "dynamic-programming", "O(n)", "O(1)", dp.max_subarray),
    Algorithm("longest-common-subsequence", "dynamic-programming", "O(nm)", "O(m)",
              dp.longest_common_subsequence),
    Algorithm("edit-distance", "dynamic-programming", "O(nm)", "O(m)", dp.edit_distance),
    Algorithm("knapsack-01", "dynamic-programming", "O(n * W)", "O(W)", dp.knapsack_01),
    Algorithm("word-break", "dynamic-programming", "O(n * L)", "O(n)", dp.word_break),
]


def algorithms_by_topic(topic: str | None = None) -> list[Algorithm]:
    if topic is None:
        return list(CATALOG)
    return [algo for algo in CATALOG if algo.topic == topic]


def get_algorithm(name: str) -> Algorithm:
    for algo in CATALOG:
        if algo.name == name:
            return algo
    raise KeyError(name)


__all__ = [
    "Algorithm", "CATALOG", "algorithms_by_topic", "get_algorithm",
    "BinarySearchTree", "TreeNode", "is_valid_bst", "KthLargest", "top_k",
    "Trie", "UnionFind",
]
