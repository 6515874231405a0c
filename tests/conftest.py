"""Shared sample networks for flow tests.

Each fixture returns ``(nodes, arcs)``; arcs are ``(from, capacity, to)``.
"""

import pytest


@pytest.fixture
def sample_network():
    # Source A, sink G. Maximum flow 5, unique minimum cut
    # {A, B, C, E} | {D, F, G} through A->D, C->D and E->G.
    nodes = list("ABCDEFG")
    arcs = [
        ("A", 3, "B"),
        ("A", 3, "D"),
        ("B", 4, "C"),
        ("C", 3, "A"),
        ("C", 1, "D"),
        ("C", 2, "E"),
        ("D", 2, "E"),
        ("D", 6, "F"),
        ("E", 1, "B"),
        ("E", 1, "G"),
        ("F", 9, "G"),
    ]
    return nodes, arcs


@pytest.fixture
def adversarial_network():
    #        1e9
    #    ┌───────►B───────┐
    #    │        │1      │1e9
    #    A        ▼       ▼
    #    │  1e9         1e9
    #    └───────►C──────►D
    #
    # Picking A->B->C->D first would take 2e9 single-unit augmentations
    # without shortest paths.
    nodes = list("ABCD")
    arcs = [
        ("A", 1_000_000_000, "B"),
        ("A", 1_000_000_000, "C"),
        ("B", 1, "C"),
        ("B", 1_000_000_000, "D"),
        ("C", 1_000_000_000, "D"),
    ]
    return nodes, arcs


@pytest.fixture
def cyclic_network():
    # Every arc also exists reversed with the same capacity, and every node
    # carries a 1000-capacity self-loop. Maximum flow s -> t is 20.
    nodes = ["s", "1", "2", "3", "4", "t"]
    forward = [
        ("s", 10, "1"),
        ("s", 10, "2"),
        ("1", 2, "2"),
        ("1", 4, "3"),
        ("1", 8, "4"),
        ("2", 9, "4"),
        ("3", 10, "t"),
        ("4", 6, "3"),
        ("4", 10, "t"),
    ]
    reverse = [(v, capacity, u) for u, capacity, v in forward]
    loops = [(node, 1000, node) for node in nodes]
    return nodes, forward + reverse + loops


@pytest.fixture
def disconnected_network():
    #      5        0        3
    #  s ─────► a ─────► b ─────► t
    #
    # The zero-capacity arc disconnects the sink.
    nodes = ["s", "a", "b", "t"]
    arcs = [("s", 5, "a"), ("a", 0, "b"), ("b", 3, "t")]
    return nodes, arcs
