# cpkit

A collection of algorithms and data structures commonly needed in
competitive programming, written as plain Python with no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.modular` | `ModInt`, `Combinatorics`, `mod_add`, `mod_sub`, `mod_mul`, `mod_pow`, `mod_inv`, `binomial` |
| `cpkit.numbers` | `totients`, `divisor_phi_sums`, `segmented_sieve`, `exact_isqrt`, `capped_mul`, `capped_lcm`, `is_prime` |
| `cpkit.geometry` | `cross`, `dist_sq`, `is_square`, `upper_hull`, `lower_hull` |
| `cpkit.structures` | `DSU`, `PrefixSum`, `Prefix2D`, `SegTree`, `Compressor`, `split`, `splitmix64` |
| `cpkit.fenwick` | `FenwickTree` |
| `cpkit.range_queries` | `MergeSortTree`, `mo_even_xor`, `LiChaoTree`, `CumulativeSum2D`, `rotate90` |
| `cpkit.strings` | `prefix_function`, `z_function`, `manacher`, `palindrome_radii_odd`, `palindrome_radii_even`, `longest_palindrome`, `is_palindrome`, `OnlineManacher`, `sort_cyclic_shifts`, `suffix_array`, `suffix_lower_bound`, `count_occurrences` |
| `cpkit.trie` | `BinaryTrie`, `WordTrie`, `AhoCorasick` |
| `cpkit.graphs` | `TwoSat`, `negative_cycle`, `Dinic`, `hungarian`, `tarjan_components` |
| `cpkit.trees` | `Tree` (LCA, depth, subtree sizes, distances, ancestor tests), `cartesian_tree`, `build_virtual_tree`, `count_colour_subtrees` |
| `cpkit.splay` | `SplaySequence`, an implicit-key splay tree with range add, reverse, rotate and minimum; `run_commands` |
| `cpkit.fft` | `fft`, `multiply` for integer polynomial multiplication |
| `cpkit.xorbasis` | `XorBasis`, `best_masked_xor`, `maximize_xor_and_xor` |
| `cpkit.bigint` | `BigInt`, an arbitrary-precision integer in base 10⁹, with `gcd`, `lcm` and `can_keep_level` |

## Examples

Modular arithmetic:

```python
from cpkit.modular import ModInt, Combinatorics

a = ModInt(3, 1_000_000_007)
b = a ** 10
print(int(b))                 # 59049

comb = Combinatorics(100, 1_000_000_007)
print(comb.ncr(5, 2))         # 10
```

String matching:

```python
from cpkit.strings import prefix_function, z_function, suffix_array, count_occurrences

print(prefix_function("aabaaab"))   # [0, 1, 0, 1, 2, 2, 3]
print(z_function("aaabaab"))        # [0, 2, 1, 0, 2, 1, 0]

text = "banana"
sa = suffix_array(text)
print(count_occurrences("ana", text, sa))   # 2
```

Disjoint sets and flows:

```python
from cpkit.structures import DSU
from cpkit.graphs import Dinic

dsu = DSU(4)
dsu.unite(0, 1)
print(dsu.find(1) == dsu.find(0))   # True

flow = Dinic(4)
flow.add_edge(0, 1, 3)
flow.add_edge(1, 3, 2)
flow.add_edge(0, 2, 1)
flow.add_edge(2, 3, 5)
print(flow.max_flow(0, 3))          # 3
```

Polynomial multiplication:

```python
from cpkit.fft import multiply

print(multiply([1, 2], [3, 4]))     # [3, 10, 8]
```

## Command-line tools

Two small programs read a problem from a file named on the command line,
or from standard input when none is given, and write the answer to
standard output.

`cpkit-splay` reads `n`, then `n` values, then `q` commands:
`ADD l r v`, `REVERSE l r`, `REVOLVE l r count`, `MIN l r` and
`DELETE x` use 1-based inclusive positions; `INSERT x p` puts the value `p`
after the first `x` elements. Each `MIN` command prints the minimum of its
range.

```
cpkit-splay < input.txt
```

`cpkit-level` reads six integers `k l r t x y` and prints `Yes` or `No`
according to whether a level starting at `k` can be kept within `[l, r]`
for `t` days, when each day up to `y` may be added and then `x` is removed.

```
echo "8 1 10 2 6 4" | cpkit-level
```

## Not included

There is no sliding-window (monotonic) minimum or maximum queue; use
`SegTree`, `MergeSortTree` or a `collections.deque` of your own for that.