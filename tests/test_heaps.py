import pytest

from studyguide.dsa.heaps import KthLargest, k_smallest, kth_largest, merge_k_sorted, top_k, top_k_frequent


def test_top_k_largest_first():
    assert top_k([3, 1, 5, 12, 2, 11], 3) == [12, 11, 5]


def test_top_k_more_than_len():
    assert top_k([2, 1], 5) == [2, 1]


def test_top_k_with_key_keeps_input_order_on_ties():
    words = ["bb", "a", "cc", "ddd", "ee"]
    assert top_k(words, 3, key=len) == ["ddd", "bb", "cc"]


@pytest.mark.parametrize("k", [0, -1])
def test_top_k_rejects_non_positive_k(k):
    with pytest.raises(ValueError):
        top_k([1, 2], k)


def test_k_smallest():
    assert k_smallest([5, 1, 4, 2], 2) == [1, 2]


def test_kth_largest():
    assert kth_largest([3, 2, 1, 5, 6, 4], 2) == 5
    assert kth_largest([3, 2, 3, 1, 2, 4, 5, 5, 6], 4) == 4
    with pytest.raises(ValueError):
        kth_largest([1], 2)


def test_top_k_frequent():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]
    assert top_k_frequent([4, 5, 5, 4, 6], 2) == [4, 5]


def test_merge_k_sorted():
    assert merge_k_sorted([[1, 4, 5], [1, 3, 4], [2, 6]]) == [1, 1, 2, 3, 4, 4, 5, 6]
    assert merge_k_sorted([[], [1], []]) == [1]
    assert merge_k_sorted([]) == []


def test_kth_largest_stream():
    stream = KthLargest(3, [4, 5, 8, 2])
    assert [stream.add(v) for v in (3, 5, 10, 9, 4)] == [4, 5, 5, 8, 8]


def test_kth_largest_stream_until_full():
    stream = KthLargest(2)
    assert stream.add(1) is None
    assert stream.add(2) == 1
