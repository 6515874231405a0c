"""Capacitated directed network with per-arc flow bookkeeping.

`FlowNetwork` is the mutable state behind a single max-flow computation. It
keeps forward adjacency for residual forward edges, reverse adjacency for
discovering cancelling (backward) edges, and a ``[flow, capacity]`` record per
arc. Construction is strict: unknown endpoints, duplicate ordered pairs, and
invalid capacities raise ``ValueError``.
"""

from __future__ import annotations

from numbers import Integral
from typing import Dict, Iterable, Iterator, List, Set

from flownet.exceptions import FlowInvariantError
from flownet.logging import get_logger
from flownet.types import Arc, ArcKey, NodeID

logger = get_logger(__name__)


class FlowNetwork:
    """Directed network of unique ``(from, to)`` arcs carrying integer flow.

    This class enforces:
      - Every arc endpoint must be a known node.
      - At most one arc per ordered node pair; antiparallel arcs and
        self-loops are separate arcs with independent flow.
      - Capacities are non-negative integers.
      - All flows start at zero.

    Attributes:
        _succ: Map node to the set of nodes it has an arc to.
        _pred: Map node to the set of nodes with an arc into it.
        _flows: Map ``(from, to)`` to a mutable ``[flow, capacity]`` pair.
    """

    def __init__(self, nodes: Iterable[NodeID], arcs: Iterable[Arc]) -> None:
        """Build a network at zero flow.

        Args:
            nodes: Node identifiers. Repeated identifiers are collapsed.
            arcs: ``(from, capacity, to)`` triples.

        Raises:
            ValueError: If an arc references an unknown node, repeats an
                ordered pair, or has a negative or non-integer capacity.
        """
        self._succ: Dict[NodeID, Set[NodeID]] = {node: set() for node in nodes}
        self._pred: Dict[NodeID, Set[NodeID]] = {node: set() for node in self._succ}
        self._flows: Dict[ArcKey, List[int]] = {}

        for u, capacity, v in arcs:
            if u not in self._succ:
                raise ValueError(f"Source node '{u}' does not exist.")
            if v not in self._succ:
                raise ValueError(f"Target node '{v}' does not exist.")
            if (u, v) in self._flows:
                raise ValueError(f"Arc from '{u}' to '{v}' already exists.")
            if isinstance(capacity, bool) or not isinstance(capacity, Integral):
                raise ValueError(
                    f"Capacity of arc '{u}' -> '{v}' must be an integer, "
                    f"got {capacity!r}."
                )
            if capacity < 0:
                raise ValueError(
                    f"Capacity of arc '{u}' -> '{v}' must be non-negative, "
                    f"got {capacity}."
                )
            self._succ[u].add(v)
            self._pred[v].add(u)
            self._flows[(u, v)] = [0, int(capacity)]

        logger.debug(
            "Built flow network with %d nodes and %d arcs",
            len(self._succ),
            len(self._flows),
        )

    def __contains__(self, node: object) -> bool:
        return node in self._succ

    def __len__(self) -> int:
        return len(self._succ)

    def __repr__(self) -> str:
        return f"FlowNetwork(nodes={len(self._succ)}, arcs={len(self._flows)})"

    #
    # Structure
    #
    @property
    def nodes(self) -> Set[NodeID]:
        """Return a new set holding every node of the network."""
        return set(self._succ)

    def arcs(self) -> Iterator[ArcKey]:
        """Iterate over ``(from, to)`` pairs of all arcs."""
        return iter(self._flows)

    def successors(self, node: NodeID) -> Set[NodeID]:
        """Return the targets of arcs leaving ``node``."""
        return self._succ[node]

    def predecessors(self, node: NodeID) -> Set[NodeID]:
        """Return the origins of arcs entering ``node``."""
        return self._pred[node]

    #
    # Flow bookkeeping
    #
    def capacity(self, u: NodeID, v: NodeID) -> int:
        return self._flows[(u, v)][1]

    def flow(self, u: NodeID, v: NodeID) -> int:
        return self._flows[(u, v)][0]

    def residual(self, u: NodeID, v: NodeID) -> int:
        """Return the spare capacity of arc ``u -> v``."""
        flow, capacity = self._flows[(u, v)]
        return capacity - flow

    def add_flow(
        self, u: NodeID, v: NodeID, amount: int, *, check_bounds: bool = True
    ) -> int:
        """Change the flow on arc ``u -> v`` by ``amount`` (which may be negative).

        Args:
            u: Arc origin.
            v: Arc target.
            amount: Signed flow delta.
            check_bounds: If True, verify ``0 <= flow <= capacity`` afterwards.

        Returns:
            The new flow on the arc.

        Raises:
            KeyError: If there is no arc ``u -> v``.
            FlowInvariantError: If the bound check is enabled and fails.
        """
        record = self._flows[(u, v)]
        record[0] += amount
        if check_bounds and not 0 <= record[0] <= record[1]:
            raise FlowInvariantError(
                f"Flow {record[0]} on arc '{u}' -> '{v}' is outside "
                f"[0, {record[1]}]."
            )
        return record[0]

    def inflow(self, node: NodeID) -> int:
        """Total flow on arcs entering ``node`` (self-loop included)."""
        return sum(self._flows[(u, node)][0] for u in self._pred[node])

    def outflow(self, node: NodeID) -> int:
        """Total flow on arcs leaving ``node`` (self-loop included)."""
        return sum(self._flows[(node, v)][0] for v in self._succ[node])

    def arc_flows(self) -> Dict[ArcKey, int]:
        """Return a snapshot of the flow on every arc."""
        return {arc: record[0] for arc, record in self._flows.items()}

    def residual_capacities(self) -> Dict[ArcKey, int]:
        """Return a snapshot of the spare capacity on every arc."""
        return {arc: record[1] - record[0] for arc, record in self._flows.items()}
