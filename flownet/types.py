"""Core type aliases and result containers for flow computations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Hashable, List, Set, Tuple

#: Any hashable value can identify a node.
NodeID = Hashable

#: A directed, capacitated arc: ``(from_node, capacity, to_node)``.
Arc = Tuple[NodeID, int, NodeID]

#: An ordered node pair identifying an arc inside a network.
ArcKey = Tuple[NodeID, NodeID]

#: A node partition ``(source_side, sink_side)``.
Cut = Tuple[Set[NodeID], Set[NodeID]]


class FlowDirection(IntEnum):
    """Direction in which a residual edge traverses its underlying arc."""

    #: Along the arc, using spare capacity.
    FORWARD = 1
    #: Against the arc, cancelling flow already placed on it.
    BACKWARD = 2


#: BFS predecessor map: node -> (previous node, direction, residual capacity).
Predecessors = Dict[NodeID, Tuple[NodeID, FlowDirection, int]]


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Maximum flow value achieved.
        arc_flow: Flow placed on each arc, keyed by ``(from, to)``.
        residual_cap: Remaining capacity on each arc after placement.
        source_side: Nodes reachable from the source in the residual graph.
        sink_side: All other nodes.
        min_cut: Arcs crossing from ``source_side`` to ``sink_side``; each is
            saturated and their capacities sum to ``total_flow``.
        augmentations: Number of augmenting paths applied.
    """

    total_flow: int
    arc_flow: Dict[ArcKey, int]
    residual_cap: Dict[ArcKey, int]
    source_side: Set[NodeID]
    sink_side: Set[NodeID]
    min_cut: List[ArcKey]
    augmentations: int
