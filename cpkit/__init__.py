"""Algorithms and data structures for competitive programming: modular arithmetic,
number theory, geometry, range queries, strings, tries, graphs, trees, a splay
sequence, FFT, XOR bases and big integers."""

__version__ = "0.1.0"