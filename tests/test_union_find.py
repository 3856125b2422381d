import pytest

from studyguide.dsa.union_find import UnionFind, count_components, find_redundant_connection, num_islands


def test_union_reduces_count_by_one():
    uf = UnionFind(5)
    assert uf.count == 5
    assert uf.union(0, 1)
    assert uf.count == 4
    assert uf.union(1, 2)
    assert uf.count == 3
    assert not uf.union(0, 2)
    assert uf.count == 3
    assert uf.connected(0, 2)
    assert not uf.connected(0, 3)


def test_count_never_below_one():
    uf = UnionFind(4)
    for a in range(4):
        for b in range(4):
            uf.union(a, b)
            assert 1 <= uf.count <= 4
    assert uf.count == 1
    assert uf.component_size(3) == 4


def test_path_compression_flattens():
    uf = UnionFind(6)
    for i in range(5):
        uf.union(i, i + 1)
    root = uf.find(5)
    assert all(uf.parent[i] == root for i in range(6))


def test_out_of_range():
    uf = UnionFind(2)
    with pytest.raises(IndexError):
        uf.find(2)
    with pytest.raises(IndexError):
        uf.union(-1, 0)
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_count_components():
    assert count_components(5, [[0, 1], [1, 2], [3, 4]]) == 2
    assert count_components(3, []) == 3


def test_find_redundant_connection():
    assert find_redundant_connection([[1, 2], [1, 3], [2, 3]]) == [2, 3]
    assert find_redundant_connection([[1, 2], [2, 3], [3, 4], [1, 4], [1, 5]]) == [1, 4]


def test_num_islands():
    grid = [
        ["1", "1", "0", "0", "0"],
        ["1", "1", "0", "0", "0"],
        ["0", "0", "1", "0", "0"],
        ["0", "0", "0", "1", "1"],
    ]
    assert num_islands(grid) == 3
    assert num_islands([[1, 0, 1]]) == 2
    assert num_islands([]) == 0
