"""Implicit-key splay tree over a sequence with range add, reverse, rotate and minimum."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence


class _Node:
    __slots__ = ("f", "c", "size", "val", "mn", "tag", "rev")

    def __init__(self, val: int) -> None:
        self.f: _Node | None = None
        self.c: list[_Node | None] = [None, None]
        self.size = 1
        self.val = val
        self.mn = val
        self.tag = 0
        self.rev = False

    def apply_add(self, v: int) -> None:
        self.val += v
        self.mn += v
        self.tag += v

    def apply_reverse(self) -> None:
        self.c[0], self.c[1] = self.c[1], self.c[0]
        self.rev = not self.rev

    def push_down(self) -> None:
        if self.rev:
            for ch in self.c:
                if ch is not None:
                    ch.apply_reverse()
            self.rev = False
        if self.tag:
            for ch in self.c:
                if ch is not None:
                    ch.apply_add(self.tag)
            self.tag = 0

    def update(self) -> None:
        self.size = 1
        self.mn = self.val
        for ch in self.c:
            if ch is not None:
                self.size += ch.size
                if ch.mn < self.mn:
                    self.mn = ch.mn


class SplaySequence:
    """A sequence of integers; ranges are 0-based and half-open ``[l, r)``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node(0)
        self._tail = _Node(0)
        self._head.c[1] = self._tail
        self._tail.f = self._head
        self._head.update()
        self._root = self._head
        for v in values:
            self.insert(len(self), v)

    def __len__(self) -> int:
        return self._root.size - 2

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                node.push_down()
                stack.append(node)
                node = node.c[0]
            node = stack.pop()
            if node is not self._head and node is not self._tail:
                yield node.val
            node = node.c[1]

    def _rotate(self, n: _Node) -> None:
        p = n.f
        v = 1 if p.c[0] is n else 0
        g = p.f
        m = n.c[v]
        if g is not None:
            g.c[1 if g.c[1] is p else 0] = n
        n.f = g
        n.c[v] = p
        p.f = n
        p.c[v ^ 1] = m
        if m is not None:
            m.f = p
        p.update()
        n.update()

    def _splay(self, n: _Node, s: _Node | None = None) -> None:
        while n.f is not s:
            m = n.f
            g = m.f
            if g is s:
                self._rotate(n)
            elif (g.c[0] is m) == (m.c[0] is n):
                self._rotate(m)
                self._rotate(n)
            else:
                self._rotate(n)
                self._rotate(n)
        if s is None:
            self._root = n

    def _kth(self, k: int) -> _Node:
        node = self._root
        while True:
            node.push_down()
            left = node.c[0]
            ls = left.size if left is not None else 0
            if k < ls:
                node = left
            elif k == ls:
                return node
            else:
                k -= ls + 1
                node = node.c[1]

    def _bounds(self, l: int, r: int) -> tuple[_Node, _Node]:
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) outside 0..{len(self)}")
        right = self._kth(r + 1)
        self._splay(right)
        left = self._kth(l)
        self._splay(left, right)
        return left, right

    def _cut(self, l: int, r: int) -> _Node | None:
        left, right = self._bounds(l, r)
        sub = left.c[1]
        if sub is not None:
            sub.push_down()
            left.c[1] = None
            sub.f = None
            left.update()
            right.update()
        return sub

    def _graft(self, pos: int, sub: _Node) -> None:
        left, right = self._bounds(pos, pos)
        sub.push_down()
        left.c[1] = sub
        sub.f = left
        left.update()
        right.update()
        self._splay(sub)

    def insert(self, pos: int, value: int) -> None:
        """Insert ``value`` so that it ends up at index ``pos``."""
        self._graft(pos, _Node(value))

    def delete(self, pos: int) -> None:
        """Remove the element at index ``pos``."""
        if not 0 <= pos < len(self):
            raise IndexError(f"index {pos} out of range")
        self._cut(pos, pos + 1)

    def add(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to every element in ``[l, r)``."""
        left, right = self._bounds(l, r)
        sub = left.c[1]
        if sub is not None:
            sub.apply_add(value)
            left.update()
            right.update()

    def reverse(self, l: int, r: int) -> None:
        """Reverse the elements in ``[l, r)``."""
        left, right = self._bounds(l, r)
        sub = left.c[1]
        if sub is not None:
            sub.apply_reverse()

    def revolve(self, l: int, r: int, count: int) -> None:
        """Rotate ``[l, r)`` right by ``count`` places (taken modulo its length)."""
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) outside 0..{len(self)}")
        length = r - l
        if length == 0:
            return
        count %= length
        if count:
            sub = self._cut(r - count, r)
            self._graft(l, sub)

    def range_min(self, l: int, r: int) -> int:
        """Smallest element in ``[l, r)``."""
        left, _ = self._bounds(l, r)
        sub = left.c[1]
        if sub is None:
            raise ValueError("minimum of an empty range")
        return sub.mn


_ARITY = {"ADD": 3, "REVERSE": 2, "REVOLVE": 3, "INSERT": 2, "DELETE": 1, "MIN": 2}


def run_commands(values: Iterable[int], commands: Iterable[str | Sequence]) -> list[int]:
    """Apply 1-based commands (ADD, REVERSE, REVOLVE, INSERT, DELETE, MIN); return MIN answers."""
    seq = SplaySequence(values)
    results: list[int] = []
    for command in commands:
        parts = command.split() if isinstance(command, str) else list(command)
        if not parts:
            raise ValueError("empty command")
        name = str(parts[0]).upper()
        if name not in _ARITY:
            raise ValueError(f"unknown command {parts[0]!r}")
        args = [int(a) for a in parts[1:]]
        if len(args) != _ARITY[name]:
            raise ValueError(f"{name} takes {_ARITY[name]} arguments")
        if name == "ADD":
            low, high, val = args
            seq.add(low - 1, high, val)
        elif name == "REVERSE":
            low, high = args
            seq.reverse(low - 1, high)
        elif name == "REVOLVE":
            low, high, count = args
            seq.revolve(low - 1, high, count)
        elif name == "INSERT":
            x, p = args
            seq.insert(x, p)
        elif name == "DELETE":
            (x,) = args
            seq.delete(x - 1)
        else:
            x, y = args
            results.append(seq.range_min(x - 1, y))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Read a sequence and commands, print the answer of every MIN command."""
    parser = argparse.ArgumentParser(description="Run sequence commands on a splay tree.")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    tokens = iter(text.split())
    try:
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        q = int(next(tokens))
        commands = []
        for _ in range(q):
            name = next(tokens).upper()
            if name not in _ARITY:
                raise ValueError(f"unknown command {name!r}")
            commands.append([name] + [next(tokens) for _ in range(_ARITY[name])])
    except StopIteration:
        raise ValueError("input ended early") from None

    for answer in run_commands(values, commands):
        print(answer)
    return 0