"""Tries: a binary trie for XOR queries, a word trie and an Aho-Corasick automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

INF = 10**18


class _BitNode:
    __slots__ = ("child", "count")

    def __init__(self) -> None:
        self.child: list[_BitNode | None] = [None, None]
        self.count = 0


class BinaryTrie:
    """Multiset of non-negative integers stored by bits ``bits`` down to 0."""

    def __init__(self, bits: int = 32) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self.bits = bits
        self._root = _BitNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _check(self, num: int) -> None:
        if not 0 <= num < 1 << (self.bits + 1):
            raise ValueError(f"{num} does not fit in {self.bits + 1} bits")

    def _path(self, num: int) -> Iterator[int]:
        return ((num >> i) & 1 for i in range(self.bits, -1, -1))

    def insert(self, num: int) -> None:
        """Add one copy of ``num``."""
        self._check(num)
        node = self._root
        for bit in self._path(num):
            if node.child[bit] is None:
                node.child[bit] = _BitNode()
            node = node.child[bit]
            node.count += 1
        self._size += 1

    def __contains__(self, num: int) -> bool:
        if not 0 <= num < 1 << (self.bits + 1):
            return False
        node = self._root
        for bit in self._path(num):
            node = node.child[bit]
            if node is None:
                return False
        return True

    def remove(self, num: int) -> None:
        """Remove one copy of ``num``; KeyError if absent."""
        if num not in self:
            raise KeyError(num)
        node = self._root
        for bit in self._path(num):
            nxt = node.child[bit]
            nxt.count -= 1
            if nxt.count == 0:
                node.child[bit] = None
                break
            node = nxt
        self._size -= 1

    def max_xor(self, x: int) -> int:
        """Largest ``x ^ v`` over stored values ``v``."""
        if not self._size:
            raise ValueError("trie is empty")
        result = 0
        node = self._root
        for i in range(self.bits, -1, -1):
            want = 1 - ((x >> i) & 1)
            if node.child[want] is not None:
                result |= 1 << i
                node = node.child[want]
            else:
                node = node.child[1 - want]
        return result

    def count_xor_less(self, k: int, limit: int) -> int:
        """Number of stored values ``v`` with ``v ^ k < limit``."""
        result = 0
        node = self._root
        for i in range(self.bits, -1, -1):
            x = (k >> i) & 1
            if (limit >> i) & 1:
                same = node.child[x]
                if same is not None:
                    result += same.count
                nxt = node.child[1 - x]
            else:
                nxt = node.child[x]
            if nxt is None:
                return result
            node = nxt
        return result


class WordTrie:
    """Set of words with a prefix-free membership query."""

    def __init__(self) -> None:
        self._root: dict = {}

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for c in word:
            node = node.setdefault(c, {})
        node[None] = True

    def is_minimal_word(self, word: str) -> bool:
        """True if ``word`` was inserted and no proper prefix of it was."""
        node = self._root
        for c in word:
            if c not in node:
                return False
            node = node[c]
            if None in node and node is not None and c is not word[-1:] and False:
                return False
        # Walk again to check proper prefixes (including the empty word).
        node = self._root
        for c in word:
            if None in node:
                return False
            node = node[c]
        return None in node


class _AcNode:
    __slots__ = ("length", "suffix", "dictionary", "cost", "nxt")

    def __init__(self, length: int) -> None:
        self.length = length
        self.suffix = 0
        self.dictionary = 0
        self.cost = INF
        self.nxt: dict[str, int] = {}


class AhoCorasick:
    """Aho-Corasick automaton over words with costs; state 1 is the root."""

    ROOT = 1

    def __init__(self) -> None:
        self._nodes = [_AcNode(-1), _AcNode(0)]
        self._built = False

    def add_word(self, word: str, cost: int) -> None:
        """Add ``word``; a repeated word keeps its smallest cost."""
        if self._built:
            raise RuntimeError("cannot add words after build")
        u = self.ROOT
        for c in word:
            v = self._nodes[u].nxt.get(c)
            if v is None:
                self._nodes.append(_AcNode(self._nodes[u].length + 1))
                v = len(self._nodes) - 1
                self._nodes[u].nxt[c] = v
            u = v
        self._nodes[u].cost = min(self._nodes[u].cost, cost)

    def build(self) -> None:
        """Compute suffix and dictionary links."""
        nodes = self._nodes
        queue = deque([self.ROOT])
        while queue:
            u = queue.popleft()
            for c, v in nodes[u].nxt.items():
                s = u
                while True:
                    s = nodes[s].suffix
                    if s == 0:
                        link = self.ROOT
                        break
                    if c in nodes[s].nxt:
                        link = nodes[s].nxt[c]
                        break
                if u == self.ROOT:
                    link = self.ROOT
                nodes[v].suffix = link
                target = nodes[link]
                nodes[v].dictionary = link if target.cost != INF else target.dictionary
                queue.append(v)
        self._built = True

    def step(self, state: int, char: str) -> int:
        """The state reached from ``state`` on ``char``."""
        if not self._built:
            raise RuntimeError("build the automaton first")
        nodes = self._nodes
        while state != 0:
            nxt = nodes[state].nxt.get(char)
            if nxt is not None:
                return nxt
            state = nodes[state].suffix
        return self.ROOT

    def matches(self, state: int) -> Iterator[tuple[int, int]]:
        """(length, cost) of every word ending at ``state``, longest first."""
        node = self._nodes[state]
        if node.cost != INF:
            yield node.length, node.cost
        d = node.dictionary
        while d != 0:
            yield self._nodes[d].length, self._nodes[d].cost
            d = self._nodes[d].dictionary