"""
Disjoint-set union with path compression and union by rank.

find() and union() run in amortised O(alpha(n)). Nodes are the integers
0..n-1; anything else raises IndexError.
"""


class UnionFind:
    def __init__(self, n: int):
        if n < 0:
            raise ValueError("n must be non-negative")
        self.parent = list(range(n))
        self.rank = [0] * n
        self.size = [1] * n
        self.count = n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int):
        if not 0 <= x < len(self.parent):
            raise IndexError(f"node {x} out of range 0..{len(self.parent) - 1}")

    def find(self, x: int) -> int:
        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b. False if already in the same set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self.count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def component_size(self, x: int) -> int:
        return self.size[self.find(x)]


def count_components(n: int, edges) -> int:
    uf = UnionFind(n)
    for a, b in edges:
        uf.union(a, b)
    return uf.count


def find_redundant_connection(edges) -> list[int]:
    """First edge (1-based nodes) that closes a cycle in an undirected graph."""
    uf = UnionFind(len(edges) + 1)
    for a, b in edges:
        if not uf.union(a, b):
            return [a, b]
    return []


def num_islands(grid) -> int:
    """Count 4-connected groups of "1" cells (ints or strings accepted)."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    def land(r, c):
        return str(grid[r][c]) == "1"

    uf = UnionFind(rows * cols)
    water = 0
    for r in range(rows):
        for c in range(cols):
            if not land(r, c):
                water += 1
                continue
            if r + 1 < rows and land(r + 1, c):
                uf.union(r * cols + c, (r + 1) * cols + c)
            if c + 1 < cols and land(r, c + 1):
                uf.union(r * cols + c, r * cols + c + 1)
    return uf.count - water
