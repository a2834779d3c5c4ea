"""Byte-keyed prefix trie with longest-prefix lookup.

Keys are arbitrary byte strings. ``longest_match`` walks the query one
byte at a time and remembers the deepest node that holds a value, so a
lookup costs O(len(path)) regardless of how many keys are stored.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

V = TypeVar("V")

_MISSING: Any = object()


class _TrieNode:
    """A node in the trie. Mutable during compilation only."""

    __slots__ = ("children", "value")

    def __init__(self) -> None:
        # Next byte -> child node
        self.children: dict[int, _TrieNode] = {}
        # Value stored at this key, or _MISSING for interior nodes
        self.value: Any = _MISSING


@dataclass(frozen=True, slots=True)
class TrieMatch(Generic[V]):
    """Result of a successful longest-prefix lookup."""

    key: bytes
    value: V
    remainder: bytes


class PrefixTrie(Generic[V]):
    """Mapping from byte-string keys to values with longest-prefix lookup.

    Usage::

        trie = PrefixTrie()
        trie.insert(b"/api", api)
        trie.insert(b"/api/v1", v1)
        trie.freeze()
        match = trie.longest_match(b"/api/v1/widgets")
        # match.key == b"/api/v1", match.remainder == b"/widgets"
    """

    __slots__ = ("_frozen", "_root", "_size")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._size = 0
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the trie read-only. No more keys can be inserted."""
        self._frozen = True

    def insert(self, key: bytes, value: V) -> V | None:
        """Store *value* under *key*, replacing any existing value.

        Returns the value that was replaced, or ``None``.
        """
        if self._frozen:
            msg = "Cannot insert into a trie after it has been frozen."
            raise RuntimeError(msg)

        node = self._root
        for byte in key:
            child = node.children.get(byte)
            if child is None:
                child = _TrieNode()
                node.children[byte] = child
            node = child

        previous = node.value
        node.value = value
        if previous is _MISSING:
            self._size += 1
            return None
        return previous

    def get(self, key: bytes, default: V | None = None) -> V | None:
        """Exact-match lookup."""
        node = self._find(key)
        if node is None or node.value is _MISSING:
            return default
        return node.value

    def longest_match(self, path: bytes) -> TrieMatch[V] | None:
        """Return the entry whose key is the longest prefix of *path*.

        Returns ``None`` if no stored key is a prefix of *path*.
        """
        node = self._root
        best_len = 0 if node.value is not _MISSING else -1
        best_value = node.value

        for index, byte in enumerate(path):
            node = node.children.get(byte)
            if node is None:
                break
            if node.value is not _MISSING:
                best_len = index + 1
                best_value = node.value

        if best_len < 0:
            return None
        return TrieMatch(key=path[:best_len], value=best_value, remainder=path[best_len:])

    def items(self) -> Iterator[tuple[bytes, V]]:
        """Yield ``(key, value)`` pairs in byte order."""
        stack: list[tuple[bytes, _TrieNode]] = [(b"", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.value is not _MISSING:
                yield prefix, node.value
            # Push in reverse so the smallest byte is popped first
            for byte in sorted(node.children, reverse=True):
                stack.append((prefix + bytes((byte,)), node.children[byte]))

    def _find(self, key: bytes) -> _TrieNode | None:
        node = self._root
        for byte in key:
            node = node.children.get(byte)
            if node is None:
                return None
        return node

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, bytes):
            return False
        node = self._find(key)
        return node is not None and node.value is not _MISSING

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<PrefixTrie {self._size} keys, {state}>"
