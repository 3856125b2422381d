"""
Dynamic-programming recurrences.

Each function states its recurrence in the docstring; tables are bottom-up
and rolled to one dimension where the recurrence allows it.
"""

from bisect import bisect_left


def coin_change(coins, amount: int) -> int:
    """Fewest coins summing to amount, or -1 if unreachable.

    dp[a] = min(dp[a - c] + 1 for c in coins if c <= a), dp[0] = 0.
    O(amount * len(coins)) time, O(amount) space.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    unreachable = amount + 1
    dp = [0] + [unreachable] * amount
    for a in range(1, amount + 1):
        for coin in coins:
            if 0 < coin <= a and dp[a - coin] + 1 < dp[a]:
                dp[a] = dp[a - coin] + 1
    return -1 if dp[amount] == unreachable else dp[amount]


def coin_change_ways(coins, amount: int) -> int:
    """Number of coin combinations (order-insensitive) making amount.

    Coins in the outer loop so each combination is counted once.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin <= 0:
            continue
        for a in range(coin, amount + 1):
            ways[a] += ways[a - coin]
    return ways[amount]


def lis_length(nums) -> int:
    """Length of the longest strictly increasing subsequence, O(n log n).

    tails[i] is the smallest tail of any increasing subsequence of length i+1.
    """
    tails = []
    for num in nums:
        i = bisect_left(tails, num)
        if i == len(tails):
            tails.append(num)
        else:
            tails[i] = num
    return len(tails)


def longest_increasing_subsequence(nums) -> list:
    """One longest strictly increasing subsequence."""
    nums = list(nums)
    tails = []      # values
    tail_idx = []   # index into nums of each tail
    prev = [-1] * len(nums)
    for i, num in enumerate(nums):
        pos = bisect_left(tails, num)
        if pos > 0:
            prev[i] = tail_idx[pos - 1]
        if pos == len(tails):
            tails.append(num)
            tail_idx.append(i)
        else:
            tails[pos] = num
            tail_idx[pos] = i

    result = []
    i = tail_idx[-1] if tail_idx else -1
    while i != -1:
        result.append(nums[i])
        i = prev[i]
    return result[::-1]


def climb_stairs(n: int) -> int:
    """Ways to climb n steps taking 1 or 2 at a time (Fibonacci)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def max_subarray(nums) -> int:
    """Kadane: best sum of a non-empty contiguous subarray."""
    nums = list(nums)
    if not nums:
        raise ValueError("max_subarray() arg is an empty sequence")
    best = current = nums[0]
    for num in nums[1:]:
        current = max(num, current + num)
        best = max(best, current)
    return best


def longest_common_subsequence(a, b) -> int:
    """dp[i][j] = dp[i-1][j-1] + 1 if a[i-1] == b[j-1] else max(up, left)."""
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0]
        for j, y in enumerate(b, 1):
            cur.append(prev[j - 1] + 1 if x == y else max(prev[j], cur[j - 1]))
        prev = cur
    return prev[-1]


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/replace costs."""
    prev = list(range(len(b) + 1))
    for i, x in enumerate(a, 1):
        cur = [i]
        for j, y in enumerate(b, 1):
            cur.append(min(
                prev[j] + 1,
                cur[j - 1] + 1,
                prev[j - 1] + (x != y),
            ))
        prev = cur
    return prev[-1]


def knapsack_01(weights, values, capacity: int) -> int:
    """Best total value within capacity, each item used at most once."""
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for w, v in zip(weights, values):
        # Descending so each item is counted once
        for c in range(capacity, w - 1, -1):
            best[c] = max(best[c], best[c - w] + v)
    return best[capacity]


def word_break(s: str, words) -> bool:
    """Can s be segmented into a sequence of dictionary words?"""
    words = set(words)
    lengths = {len(w) for w in words}
    ok = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        ok[end] = any(
            n <= end and ok[end - n] and s[end - n:end] in words
            for n in lengths
        )
    return ok[len(s)]
