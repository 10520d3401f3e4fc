"""Rooted trees: binary lifting, LCA, Cartesian and virtual trees."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

MOD = 998_244_353


class Tree:
    """Undirected tree on vertices 1..n with binary-lifting ancestor queries."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one vertex")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self._rooted = False

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise IndexError(f"vertex {x} out of range")

    def _require_rooted(self) -> None:
        if not self._rooted:
            raise RuntimeError("call root_at before querying the tree")

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge u - v."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._rooted = False

    def root_at(self, root: int = 1) -> None:
        """Root the tree and build depths, entry times, sizes and the lifting table."""
        self._check(root)
        n = self.n
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        tin = [0] * (n + 1)
        tout = [0] * (n + 1)
        size = [1] * (n + 1)
        seen = [False] * (n + 1)
        seen[root] = True
        timer = 1
        tin[root] = 1
        visited = 1
        stack = [(root, iter(self._adj[root]))]
        while stack:
            node, it = stack[-1]
            for nb in it:
                if nb == parent[node]:
                    continue
                if seen[nb]:
                    raise ValueError("graph contains a cycle")
                seen[nb] = True
                parent[nb] = node
                depth[nb] = depth[node] + 1
                timer += 1
                tin[nb] = timer
                visited += 1
                stack.append((nb, iter(self._adj[nb])))
                break
            else:
                stack.pop()
                tout[node] = timer
                if stack:
                    size[parent[node]] += size[node]
        if visited != n:
            raise ValueError("graph is not connected")

        levels = max(1, n.bit_length())
        lift = [parent]
        for _ in range(1, levels):
            prev = lift[-1]
            lift.append([prev[prev[v]] for v in range(n + 1)])

        self._root = root
        self._parent = parent
        self._depth = depth
        self._tin = tin
        self._tout = tout
        self._size = size
        self._lift = lift
        self._rooted = True

    def depth(self, x: int) -> int:
        """Number of edges from the root to ``x``."""
        self._require_rooted()
        self._check(x)
        return self._depth[x]

    def subtree_size(self, x: int) -> int:
        """Number of vertices in the subtree of ``x``."""
        self._require_rooted()
        self._check(x)
        return self._size[x]

    def jump(self, x: int, distance: int) -> int:
        """The ancestor of ``x`` that is ``distance`` edges above it."""
        self._require_rooted()
        self._check(x)
        if not 0 <= distance <= self._depth[x]:
            raise ValueError("jump distance outside 0..depth")
        level = 0
        while distance:
            if distance & 1:
                x = self._lift[level][x]
            distance >>= 1
            level += 1
        return x

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``."""
        self._require_rooted()
        self._check(a)
        self._check(b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        a = self.jump(a, self._depth[a] - self._depth[b])
        if a == b:
            return a
        for table in reversed(self._lift):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._parent[a]

    def dist(self, a: int, b: int) -> int:
        """Number of edges on the path between ``a`` and ``b``."""
        return self._depth[a] + self._depth[b] - 2 * self._depth[self.lca(a, b)]

    def is_ancestor(self, x: int, y: int) -> bool:
        """Whether ``x`` is ``y`` or an ancestor of ``y``."""
        self._require_rooted()
        self._check(x)
        self._check(y)
        return self._tin[x] <= self._tin[y] and self._tout[x] >= self._tout[y]


def cartesian_tree(values: Sequence[int]) -> tuple[list[int], list[int]]:
    """Max-heap Cartesian tree: left and right child of each index, -1 for none."""
    n = len(values)
    left = [-1] * n
    right = [-1] * n
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] < value:
            left[i] = stack.pop()
        if stack:
            right[stack[-1]] = i
        stack.append(i)
    return left, right


def build_virtual_tree(tree: Tree, nodes: Iterable[int]) -> tuple[list[int], list[tuple[int, int]]]:
    """Vertices (in DFS order) and (parent, child) edges of the virtual tree of ``nodes``."""
    tree._require_rooted()
    key = tree._tin.__getitem__
    chosen = sorted(set(nodes), key=key)
    for v in chosen:
        tree._check(v)
    extra = {tree.lca(a, b) for a, b in zip(chosen, chosen[1:])}
    vertices = sorted(set(chosen) | extra, key=key)
    edges = [(tree.lca(a, b), b) for a, b in zip(vertices, vertices[1:])]
    return vertices, edges


def count_colour_subtrees(
    colours: Sequence[int], edges: Iterable[tuple[int, int]]
) -> int:
    """Connected vertex sets whose degree-one vertices all share one colour, mod 998244353.

    ``colours[i]`` is the colour of vertex ``i + 1``; edges join vertices 1..n.
    """
    n = len(colours)
    tree = Tree(n)
    for u, v in edges:
        tree.add_edge(u, v)
    tree.root_at(1)

    by_colour: dict[int, set[int]] = defaultdict(set)
    for vertex, colour in enumerate(colours, start=1):
        by_colour[colour].add(vertex)

    total = 0
    for coloured in by_colour.values():
        vertices, vt_edges = build_virtual_tree(tree, coloured)
        children: dict[int, list[int]] = defaultdict(list)
        for parent, child in vt_edges:
            children[parent].append(child)
        ways: dict[int, int] = {}
        for node in reversed(vertices):
            now = 1
            below = 0
            for child in children[node]:
                below = (below + ways[child]) % MOD
                now = now * (1 + ways[child]) % MOD
            if node in coloured:
                total = (total + now) % MOD
            else:
                now = (now - 1) % MOD
                total = (total + now - below) % MOD
            ways[node] = now
    return total