"""
Prefix tree over strings.

Each node maps a character to a child. A node marks `is_word` when the path
from the root spells an inserted word, so the empty string is stored on the
root itself.
"""

from dataclasses import dataclass, field


@dataclass
class TrieNode:
    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    def __init__(self, words=()):
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.search(word)

    def _walk(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str):
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def delete(self, word: str) -> bool:
        """Remove word; prunes nodes that no longer lead to any word."""
        path = [self.root]
        for ch in word:
            child = path[-1].children.get(ch)
            if child is None:
                return False
            path.append(child)
        if not path[-1].is_word:
            return False
        path[-1].is_word = False
        self._size -= 1

        for i in range(len(word), 0, -1):
            node = path[i]
            if node.is_word or node.children:
                break
            del path[i - 1].children[word[i - 1]]
        return True

    def words_with_prefix(self, prefix: str = "") -> list[str]:
        """All stored words starting with prefix, sorted."""
        node = self._walk(prefix)
        if node is None:
            return []
        found = []
        stack = [(node, prefix)]
        while stack:
            current, spelled = stack.pop()
            if current.is_word:
                found.append(spelled)
            for ch, child in current.children.items():
                stack.append((child, spelled + ch))
        return sorted(found)
