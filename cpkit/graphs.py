"""Graph algorithms: 2-SAT, negative cycles, maximum flow, assignment and SCCs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

NEG_INF = -(10**18)


class TwoSat:
    """2-SAT over ``n_vars`` boolean variables, solved by strongly connected components."""

    def __init__(self, n_vars: int) -> None:
        if n_vars < 0:
            raise ValueError("number of variables must be non-negative")
        self.n_vars = n_vars
        self._adj: list[list[int]] = [[] for _ in range(2 * n_vars)]
        self._adj_t: list[list[int]] = [[] for _ in range(2 * n_vars)]

    def _literal(self, var: int, negate: bool) -> int:
        if not 0 <= var < self.n_vars:
            raise IndexError(f"variable {var} out of range")
        return 2 * var ^ int(bool(negate))

    def add_clause(self, a: int, negate_a: bool, b: int, negate_b: bool) -> None:
        """Require ``(a xor negate_a) or (b xor negate_b)``."""
        la = self._literal(a, negate_a)
        lb = self._literal(b, negate_b)
        self._adj[la ^ 1].append(lb)
        self._adj[lb ^ 1].append(la)
        self._adj_t[lb].append(la ^ 1)
        self._adj_t[la].append(lb ^ 1)

    def solve(self) -> list[bool] | None:
        """A satisfying assignment, or None when the clauses cannot all hold."""
        total = 2 * self.n_vars
        used = [False] * total
        order: list[int] = []
        for start in range(total):
            if used[start]:
                continue
            used[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                v, it = stack[-1]
                for u in it:
                    if not used[u]:
                        used[u] = True
                        stack.append((u, iter(self._adj[u])))
                        break
                else:
                    stack.pop()
                    order.append(v)

        comp = [-1] * total
        label = 0
        for v in reversed(order):
            if comp[v] != -1:
                continue
            comp[v] = label
            pending = [v]
            while pending:
                x = pending.pop()
                for u in self._adj_t[x]:
                    if comp[u] == -1:
                        comp[u] = label
                        pending.append(u)
            label += 1

        assignment = []
        for var in range(self.n_vars):
            pos, neg = comp[2 * var], comp[2 * var + 1]
            if pos == neg:
                return None
            assignment.append(pos > neg)
        return assignment


def negative_cycle(
    n: int, edges: Iterable[tuple[int, int, int]], source: int = 0
) -> list[int] | None:
    """A negative cycle as a closed vertex walk ``[v, ..., v]``, or None.

    Every vertex starts at distance zero, so a negative cycle anywhere in the
    graph is found, whether or not it is reachable from ``source``.
    """
    if not 0 <= source < n:
        raise IndexError("source out of range")
    edge_list = list(edges)
    dist = [0] * n
    dist[source] = 0
    pred = [-1] * n
    last = -1
    for _ in range(n):
        last = -1
        for u, v, w in edge_list:
            if dist[v] > dist[u] + w:
                dist[v] = max(NEG_INF, dist[u] + w)
                pred[v] = u
                last = v
    if last == -1:
        return None

    y = last
    for _ in range(n):
        y = pred[y]
    cycle = [y]
    cur = pred[y]
    while True:
        cycle.append(cur)
        if cur == y:
            break
        cur = pred[cur]
    cycle.reverse()
    return cycle


class Dinic:
    """Maximum flow by Dinic's blocking-flow algorithm."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._to: list[int] = []
        self._cap: list[int] = []

    def add_edge(self, u: int, v: int, cap: int = 1) -> None:
        """Add a directed edge u -> v with capacity ``cap``."""
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise IndexError("vertex out of range")
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        self._adj[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(cap)
        self._adj[v].append(len(self._to))
        self._to.append(u)
        self._cap.append(0)

    def _levels(self, s: int) -> list[int]:
        level = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for eid in self._adj[v]:
                to = self._to[eid]
                if self._cap[eid] > 0 and level[to] == -1:
                    level[to] = level[v] + 1
                    queue.append(to)
        return level

    def _blocking_flow(self, s: int, t: int, level: list[int]) -> int:
        ptr = [0] * self.n
        total = 0
        path: list[int] = []
        v = s
        while True:
            if v == t:
                pushed = min(self._cap[eid] for eid in path)
                for eid in path:
                    self._cap[eid] -= pushed
                    self._cap[eid ^ 1] += pushed
                total += pushed
                path.clear()
                v = s
                continue
            advanced = False
            edges = self._adj[v]
            while ptr[v] < len(edges):
                eid = edges[ptr[v]]
                to = self._to[eid]
                if self._cap[eid] > 0 and level[to] == level[v] + 1:
                    path.append(eid)
                    v = to
                    advanced = True
                    break
                ptr[v] += 1
            if advanced:
                continue
            if not path:
                return total
            eid = path.pop()
            v = self._to[eid ^ 1]
            ptr[v] += 1

    def max_flow(self, s: int, t: int) -> int:
        """Push as much flow as possible from ``s`` to ``t`` and return its value."""
        if not (0 <= s < self.n and 0 <= t < self.n):
            raise IndexError("vertex out of range")
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        while True:
            level = self._levels(s)
            if level[t] == -1:
                return flow
            flow += self._blocking_flow(s, t, level)


def hungarian(cost: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Minimum-cost assignment of every row to a distinct column.

    Returns the total cost and, for each row, the column it is given.
    The matrix must have no more rows than columns.
    """
    n = len(cost)
    if n == 0:
        return 0, []
    m = len(cost[0])
    if any(len(row) != m for row in cost):
        raise ValueError("all rows must have the same length")
    if n > m:
        raise ValueError("more rows than columns")

    u = [0] * (n + 1)
    v = [0] * (m + 1)
    p = [0] * (m + 1)
    way = [0] * (m + 1)
    for i in range(1, n + 1):
        p[0] = i
        j0 = 0
        minv = [math.inf] * (m + 1)
        used = [False] * (m + 1)
        while True:
            used[j0] = True
            i0 = p[j0]
            delta = math.inf
            j1 = 0
            row = cost[i0 - 1]
            for j in range(1, m + 1):
                if not used[j]:
                    cur = row[j - 1] - u[i0] - v[j]
                    if cur < minv[j]:
                        minv[j] = cur
                        way[j] = j0
                    if minv[j] < delta:
                        delta = minv[j]
                        j1 = j
            for j in range(m + 1):
                if used[j]:
                    u[p[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            j0 = j1
            if p[j0] == 0:
                break
        while j0:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1

    assignment = [-1] * n
    for j in range(1, m + 1):
        if p[j]:
            assignment[p[j] - 1] = j - 1
    return -v[0], assignment


def tarjan_components(
    adjacency: Sequence[Sequence[int]], undirected: bool = False
) -> list[int]:
    """Component number (from 1, in order of completion) of every vertex.

    Directed graphs give strongly connected components. With ``undirected``
    the edge back to the DFS parent is ignored, giving 2-edge-connected
    components.
    """
    n = len(adjacency)
    disc = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    component = [0] * n
    timer = 0
    number = 1

    for root in range(n):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = timer
        timer += 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, -1, iter(adjacency[root]))]
        while work:
            node, parent, it = work[-1]
            for nb in it:
                if undirected and nb == parent:
                    continue
                if disc[nb] == -1:
                    disc[nb] = low[nb] = timer
                    timer += 1
                    stack.append(nb)
                    on_stack[nb] = True
                    work.append((nb, node, iter(adjacency[nb])))
                    break
                if on_stack[nb]:
                    low[node] = min(low[node], disc[nb])
            else:
                work.pop()
                if low[node] == disc[node]:
                    while True:
                        cur = stack.pop()
                        on_stack[cur] = False
                        component[cur] = number
                        if cur == node:
                            break
                    number += 1
                if work:
                    up = work[-1][0]
                    low[up] = min(low[up], low[node])
    return component