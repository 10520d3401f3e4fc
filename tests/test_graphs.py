import itertools
import random
from collections import Counter

import pytest

from cpkit.graphs import Dinic, TwoSat, hungarian, negative_cycle, tarjan_components


def test_two_sat_worked_example():
    solver = TwoSat(3)
    solver.add_clause(0, False, 1, True)
    solver.add_clause(0, True, 1, True)
    solver.add_clause(1, False, 2, False)
    solver.add_clause(0, False, 0, False)
    assert solver.solve() == [True, False, True]


def test_two_sat_unsatisfiable():
    solver = TwoSat(1)
    solver.add_clause(0, False, 0, False)
    solver.add_clause(0, True, 0, True)
    assert solver.solve() is None


def test_two_sat_rejects_bad_variable():
    solver = TwoSat(2)
    with pytest.raises(IndexError):
        solver.add_clause(0, False, 2, False)


def _satisfies(assignment, clauses):
    return all(
        (assignment[a] != na) or (assignment[b] != nb) for a, na, b, nb in clauses
    )


@pytest.mark.parametrize("seed", range(20))
def test_two_sat_matches_exhaustive_search(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 4)
    clauses = [
        (rng.randrange(n), rng.random() < 0.5, rng.randrange(n), rng.random() < 0.5)
        for _ in range(rng.randint(1, 8))
    ]
    solver = TwoSat(n)
    for clause in clauses:
        solver.add_clause(*clause)
    result = solver.solve()
    possible = any(
        _satisfies(list(bits), clauses)
        for bits in itertools.product([False, True], repeat=n)
    )
    if result is None:
        assert not possible
    else:
        assert _satisfies(result, clauses)


def test_negative_cycle_found():
    edges = [(0, 1, 1), (1, 2, -3), (2, 0, 1), (2, 3, 4)]
    cycle = negative_cycle(4, edges, 0)
    assert cycle[0] == cycle[-1]
    weights = {(u, v): w for u, v, w in edges}
    assert all((u, v) in weights for u, v in zip(cycle, cycle[1:]))
    assert sum(weights[(u, v)] for u, v in zip(cycle, cycle[1:])) < 0


def test_negative_cycle_absent():
    edges = [(0, 1, 1), (1, 2, -3), (2, 0, 5)]
    assert negative_cycle(3, edges, 0) is None


def test_negative_cycle_bad_source():
    with pytest.raises(IndexError):
        negative_cycle(2, [], 5)


def test_dinic_single_path_bottleneck():
    flow = Dinic(3)
    flow.add_edge(0, 1, 3)
    flow.add_edge(1, 2, 2)
    assert flow.max_flow(0, 2) == 2


def test_dinic_parallel_paths():
    flow = Dinic(4)
    flow.add_edge(0, 1, 3)
    flow.add_edge(1, 3, 3)
    flow.add_edge(0, 2, 2)
    flow.add_edge(2, 3, 5)
    assert flow.max_flow(0, 3) == 5


def test_dinic_disconnected_is_zero():
    flow = Dinic(3)
    flow.add_edge(0, 1, 7)
    assert flow.max_flow(0, 2) == 0


def test_dinic_same_endpoints_rejected():
    with pytest.raises(ValueError):
        Dinic(2).max_flow(1, 1)


def test_hungarian_square():
    cost = [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    total, assignment = hungarian(cost)
    assert total == 5
    assert sorted(assignment) == [0, 1, 2]
    assert sum(cost[i][j] for i, j in enumerate(assignment)) == total


def test_hungarian_matches_brute_force_on_rectangle():
    rng = random.Random(7)
    cost = [[rng.randint(0, 20) for _ in range(4)] for _ in range(3)]
    total, assignment = hungarian(cost)
    best = min(
        sum(cost[i][j] for i, j in enumerate(cols))
        for cols in itertools.permutations(range(4), 3)
    )
    assert total == best
    assert len(set(assignment)) == 3
    assert sum(cost[i][j] for i, j in enumerate(assignment)) == total


def test_hungarian_too_many_rows():
    with pytest.raises(ValueError):
        hungarian([[1], [2]])


def test_tarjan_directed():
    adj = [[1], [2], [0, 3], []]
    comp = tarjan_components(adj)
    assert comp[0] == comp[1] == comp[2]
    assert comp[3] != comp[0]
    assert Counter(comp)[comp[0]] == 3


def test_tarjan_undirected_bridge():
    adj = [[1, 2], [0, 2], [0, 1, 3], [2]]
    comp = tarjan_components(adj, undirected=True)
    assert comp[0] == comp[1] == comp[2]
    assert comp[3] != comp[2]


def test_tarjan_undirected_path_splits():
    comp = tarjan_components([[1], [0]], undirected=True)
    assert sorted(comp) == [1, 2]