"""
Unbalanced binary search tree.

Operations are O(h) where h is the tree height: O(log n) for random
insertion order, O(n) for sorted input. Keys must be mutually comparable.
"""

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class TreeNode(Generic[K, V]):
    key: K
    value: Optional[V] = None
    left: Optional["TreeNode[K, V]"] = None
    right: Optional["TreeNode[K, V]"] = None


class BinarySearchTree(Generic[K, V]):
    def __init__(self, keys=(), items=()):
        """Build from bare keys, and from (key, value) pairs or a mapping."""
        self.root: Optional[TreeNode[K, V]] = None
        self._size = 0
        for key in keys:
            self.insert(key)
        if hasattr(items, "items"):
            items = items.items()
        for key, value in items:
            self.insert(key, value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[K]:
        for node in self._inorder():
            yield node.key

    def items(self) -> Iterator[tuple[K, Optional[V]]]:
        for node in self._inorder():
            yield node.key, node.value

    def _inorder(self) -> Iterator[TreeNode[K, V]]:
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _find(self, key) -> Optional[TreeNode[K, V]]:
        node = self.root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def insert(self, key: K, value: Optional[V] = None):
        """Insert key, or replace the value if the key exists."""
        if self.root is None:
            self.root = TreeNode(key, value)
            self._size += 1
            return
        node = self.root
        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = TreeNode(key, value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(key, value)
                    break
                node = node.right
        self._size += 1

    def get(self, key, default=None):
        node = self._find(key)
        return default if node is None else node.value

    def remove(self, key):
        """Delete key. Raises KeyError if absent."""
        parent = None
        node = self.root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            # Two children: pull up the in-order successor, then unlink it
            succ_parent = node
            successor = node.right
            while successor.left is not None:
                succ_parent = successor
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            parent, node = succ_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def min(self) -> K:
        if self.root is None:
            raise ValueError("min() on empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def max(self) -> K:
        if self.root is None:
            raise ValueError("max() on empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.key

    def floor(self, key) -> Optional[K]:
        """Largest key <= key, or None."""
        best = None
        node = self.root
        while node is not None:
            if key == node.key:
                return node.key
            if key < node.key:
                node = node.left
            else:
                best = node.key
                node = node.right
        return best

    def ceil(self, key) -> Optional[K]:
        """Smallest key >= key, or None."""
        best = None
        node = self.root
        while node is not None:
            if key == node.key:
                return node.key
            if node.key < key:
                node = node.right
            else:
                best = node.key
                node = node.left
        return best

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self.root is None:
            return 0
        height = 0
        level = [self.root]
        while level:
            height += 1
            level = [child for n in level for child in (n.left, n.right) if child is not None]
        return height


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Strict BST check: every left key < node key < every right key."""
    stack = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if (low is not None and not low < node.key) or (high is not None and not node.key < high):
            return False
        stack.append((node.left, low, node.key))
        stack.append((node.right, node.key, high))
    return True
