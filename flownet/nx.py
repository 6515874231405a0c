"""NetworkX graph conversion utilities.

Converts NetworkX graphs into the ``(nodes, arcs)`` form accepted by
``maximum_flow`` and back into a ``networkx.DiGraph`` annotated with flow.

Example:
    >>> import networkx as nx
    >>> from flownet.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=10)
    >>> G.add_edge("B", "C", capacity=5)
    >>> nodes, arcs = from_networkx(G)
    >>> arcs
    [('A', 10, 'B'), ('B', 5, 'C')]
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from flownet.types import Arc, ArcKey, FlowSummary, NodeID


def from_networkx(
    graph: nx.Graph,
    capacity_attr: str = "capacity",
    default_capacity: int = 1,
) -> Tuple[List[NodeID], List[Arc]]:
    """Convert a NetworkX graph into nodes and arcs.

    Undirected graphs contribute one arc per direction for every edge (a
    self-loop contributes one arc). Parallel edges of multigraphs are merged
    into one arc whose capacity is the sum of theirs.

    Args:
        graph: Any of ``nx.Graph``, ``nx.DiGraph``, ``nx.MultiGraph``,
            ``nx.MultiDiGraph``.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges missing ``capacity_attr``.

    Returns:
        ``(nodes, arcs)`` in NetworkX iteration order. Integral float
        capacities such as ``10.0`` become ``int``.

    Raises:
        ValueError: If a capacity is a float with a fractional part.
    """
    directed = graph.is_directed()
    capacities: Dict[ArcKey, int] = {}

    for u, v, data in graph.edges(data=True):
        capacity = _as_int_capacity(data.get(capacity_attr, default_capacity), u, v)
        capacities[(u, v)] = capacities.get((u, v), 0) + capacity
        if not directed and u != v:
            capacities[(v, u)] = capacities.get((v, u), 0) + capacity

    nodes = list(graph.nodes)
    arcs = [(u, capacity, v) for (u, v), capacity in capacities.items()]
    return nodes, arcs


def to_networkx(
    nodes: Iterable[NodeID],
    arcs: Iterable[Arc],
    summary: Optional[FlowSummary] = None,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> nx.DiGraph:
    """Build a ``networkx.DiGraph`` from nodes and arcs.

    Args:
        nodes: Node identifiers.
        arcs: ``(from, capacity, to)`` triples.
        summary: If given, copy per-arc flow into ``flow_attr`` and tag each
            node with ``side`` (``"source"`` or ``"sink"``).
        capacity_attr: Edge attribute to store capacity under.
        flow_attr: Edge attribute to store flow under.

    Returns:
        A new DiGraph.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(nodes)
    for u, capacity, v in arcs:
        nx_graph.add_edge(u, v, **{capacity_attr: capacity})

    if summary is not None:
        for (u, v), flow in summary.arc_flow.items():
            nx_graph.edges[u, v][flow_attr] = flow
        for node in nx_graph.nodes:
            nx_graph.nodes[node]["side"] = (
                "source" if node in summary.source_side else "sink"
            )
    return nx_graph


def _as_int_capacity(capacity, u: NodeID, v: NodeID):
    if isinstance(capacity, float):
        if not capacity.is_integer():
            raise ValueError(
                f"Capacity of edge '{u}' -> '{v}' must be integral, got {capacity}."
            )
        return int(capacity)
    return capacity
