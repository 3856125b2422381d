"""
Two-pointer and sliding-window scans over arrays and strings.

Every function here runs in a single left/right sweep (three_sum adds an
outer loop) and uses O(1) extra space unless noted.
"""


def two_sum_sorted(numbers: list[int], target: int) -> tuple[int, int]:
    """Return the 1-indexed pair (i, j), i < j, whose values sum to target.

    `numbers` must be sorted ascending. Raises ValueError if no pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total < target:
            left += 1
        else:
            right -= 1
    raise ValueError(f"no pair sums to {target}")


def three_sum(nums: list[int]) -> list[list[int]]:
    """Unique triplets summing to zero, each sorted, in sorted order."""
    nums = sorted(nums)
    result = []
    for i in range(len(nums) - 2):
        if nums[i] > 0:
            break
        if i > 0 and nums[i] == nums[i - 1]:
            continue
        left, right = i + 1, len(nums) - 1
        while left < right:
            total = nums[i] + nums[left] + nums[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                result.append([nums[i], nums[left], nums[right]])
                left += 1
                right -= 1
                while left < right and nums[left] == nums[left - 1]:
                    left += 1
                while left < right and nums[right] == nums[right + 1]:
                    right -= 1
    return result


def max_area(heights: list[int]) -> int:
    """Container with most water: max of min(h[i], h[j]) * (j - i)."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        width = right - left
        if heights[left] < heights[right]:
            best = max(best, heights[left] * width)
            left += 1
        else:
            best = max(best, heights[right] * width)
            right -= 1
    return best


def remove_duplicates(nums: list) -> int:
    """Compact a sorted list in place; returns the number of unique values."""
    if not nums:
        return 0
    write = 1
    for read in range(1, len(nums)):
        if nums[read] != nums[write - 1]:
            nums[write] = nums[read]
            write += 1
    return write


def is_palindrome(s: str) -> bool:
    left, right = 0, len(s) - 1
    while left < right:
        if not s[left].isalnum():
            left += 1
        elif not s[right].isalnum():
            right -= 1
        elif s[left].lower() != s[right].lower():
            return False
        else:
            left += 1
            right -= 1
    return True


def trap(heights: list[int]) -> int:
    """Units of rain water trapped between bars."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            left_max = max(left_max, heights[left])
            water += left_max - heights[left]
            left += 1
        else:
            right_max = max(right_max, heights[right])
            water += right_max - heights[right]
            right -= 1
    return water


def length_of_longest_substring(s: str) -> int:
    """Longest window of distinct characters. O(min(n, alphabet)) space."""
    last_seen = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        if ch in last_seen and last_seen[ch] >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best
