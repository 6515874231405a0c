"""Edmonds-Karp maximum flow and minimum cut.

The solver repeatedly finds a shortest augmenting path in the residual graph
with breadth-first search, pushes the path's bottleneck along it, and stops
when the sink is no longer reachable. The nodes still reachable from the
source at that point form the source side of a minimum cut.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Literal, Optional, Union, overload

from flownet.config import MAX_FLOW_CONFIG, MaxFlowConfig
from flownet.logging import get_logger
from flownet.network import FlowNetwork
from flownet.types import (
    Arc,
    ArcKey,
    Cut,
    FlowDirection,
    FlowSummary,
    NodeID,
    Predecessors,
)

logger = get_logger(__name__)


@overload
def maximum_flow(
    nodes: Iterable[NodeID],
    arcs: Iterable[Arc],
    source: NodeID,
    sink: NodeID,
    *,
    return_summary: Literal[False] = False,
    config: Optional[MaxFlowConfig] = None,
) -> tuple[int, Cut]: ...


@overload
def maximum_flow(
    nodes: Iterable[NodeID],
    arcs: Iterable[Arc],
    source: NodeID,
    sink: NodeID,
    *,
    return_summary: Literal[True],
    config: Optional[MaxFlowConfig] = None,
) -> tuple[int, Cut, FlowSummary]: ...


def maximum_flow(
    nodes: Iterable[NodeID],
    arcs: Iterable[Arc],
    source: NodeID,
    sink: NodeID,
    *,
    return_summary: bool = False,
    config: Optional[MaxFlowConfig] = None,
) -> Union[tuple[int, Cut], tuple[int, Cut, FlowSummary]]:
    """Compute the maximum flow from ``source`` to ``sink`` and a minimum cut.

    A fresh ``FlowNetwork`` is built from ``nodes`` and ``arcs`` for every
    call, so repeated calls never observe each other's flow.

    Args:
        nodes: Node identifiers; every arc endpoint must be among them.
        arcs: ``(from, capacity, to)`` triples with non-negative integer
            capacity and unique ``(from, to)`` pairs.
        source: Node the flow leaves from.
        sink: Node the flow arrives at.
        return_summary: If True, also return a ``FlowSummary``.
        config: Solver settings. Defaults to ``MAX_FLOW_CONFIG``.

    Returns:
        ``(total_flow, (source_side, sink_side))``, or
        ``(total_flow, (source_side, sink_side), summary)`` when
        ``return_summary`` is set.

    Raises:
        ValueError: If the network is malformed, ``source`` or ``sink`` is
            not a node, or ``source == sink``.

    Examples:
        >>> arcs = [("s", 3, "a"), ("a", 2, "t"), ("s", 1, "t")]
        >>> flow, (source_side, sink_side) = maximum_flow(
        ...     ["s", "a", "t"], arcs, "s", "t"
        ... )
        >>> flow
        3
        >>> sorted(sink_side)
        ['t']
    """
    config = config or MAX_FLOW_CONFIG

    network = FlowNetwork(nodes, arcs)
    _check_terminals(network, source, sink)

    total_flow = 0
    augmentations = 0
    while True:
        predecessors = augmenting_path(network, source, sink)
        if predecessors is None:
            break

        amount = bottleneck(predecessors, source, sink)
        augment(
            network,
            predecessors,
            amount,
            source,
            sink,
            check_bounds=config.check_capacity_bounds,
        )
        total_flow += amount
        augmentations += 1

        if config.log_augmentations:
            logger.debug(
                "Augmentation %d: pushed %d along %d edges (total %d)",
                augmentations,
                amount,
                _path_length(predecessors, source, sink),
                total_flow,
            )

    source_side, sink_side = min_cut(network, source)
    logger.debug(
        "Maximum flow %r -> %r is %d after %d augmentations; "
        "cut splits %d/%d nodes",
        source,
        sink,
        total_flow,
        augmentations,
        len(source_side),
        len(sink_side),
    )

    if not return_summary:
        return total_flow, (source_side, sink_side)

    summary = _build_flow_summary(
        network, total_flow, source_side, sink_side, augmentations
    )
    return total_flow, (source_side, sink_side), summary


def augmenting_path(
    network: FlowNetwork, source: NodeID, sink: NodeID
) -> Optional[Predecessors]:
    """Find a shortest augmenting path from ``source`` to ``sink``.

    Breadth-first search over the residual graph. Each node receives a
    predecessor at most once, so the search is ``O(V + E)``. Residual edges are:

      - ``u -> v`` for an arc ``u -> v`` with spare capacity (FORWARD).
      - ``u -> v`` for an arc ``v -> u`` carrying flow (BACKWARD), which
        cancels flow placed by an earlier augmentation.

    Args:
        network: Network with the current flow.
        source: Search origin; never assigned a predecessor.
        sink: Search target.

    Returns:
        The predecessor map once ``sink`` is discovered, or None if the sink is
        unreachable and the current flow is therefore maximum.

    Raises:
        ValueError: If ``source == sink``.
    """
    if source == sink:
        raise ValueError(f"Source and sink must differ, got '{source}' for both.")

    predecessors: Predecessors = {}
    queue = deque([source])
    while queue:
        node = queue.popleft()

        for succ in network.successors(node):
            if succ == source or succ in predecessors:
                continue
            remaining = network.residual(node, succ)
            if remaining > 0:
                predecessors[succ] = (node, FlowDirection.FORWARD, remaining)
                if succ == sink:
                    return predecessors
                queue.append(succ)

        for pred in network.predecessors(node):
            if pred == source or pred in predecessors:
                continue
            placed = network.flow(pred, node)
            if placed > 0:
                predecessors[pred] = (node, FlowDirection.BACKWARD, placed)
                if pred == sink:
                    return predecessors
                queue.append(pred)

    return None


def bottleneck(predecessors: Predecessors, source: NodeID, sink: NodeID) -> int:
    """Return the smallest residual capacity on the path ending at ``sink``."""
    amount: Optional[int] = None
    node = sink
    while node != source:
        prev, _, remaining = predecessors[node]
        if amount is None or remaining < amount:
            amount = remaining
        node = prev
    if amount is None:
        raise ValueError("Augmenting path is empty.")
    return amount


def augment(
    network: FlowNetwork,
    predecessors: Predecessors,
    amount: int,
    source: NodeID,
    sink: NodeID,
    *,
    check_bounds: bool = True,
) -> None:
    """Push ``amount`` units along the path recorded in ``predecessors``.

    Forward edges gain ``amount`` on their arc; backward edges give back
    ``amount`` on the arc they traverse against.

    Raises:
        FlowInvariantError: If ``check_bounds`` is set and a touched arc ends
            up outside ``[0, capacity]``.
    """
    node = sink
    while node != source:
        prev, direction, _ = predecessors[node]
        if direction is FlowDirection.FORWARD:
            network.add_flow(prev, node, amount, check_bounds=check_bounds)
        else:
            network.add_flow(node, prev, -amount, check_bounds=check_bounds)
        node = prev


def min_cut(network: FlowNetwork, source: NodeID) -> Cut:
    """Split the nodes by residual reachability from ``source``.

    Only meaningful once no augmenting path remains: the source side then holds
    every node reachable over the residual edges ``augmenting_path`` follows
    (arcs with spare capacity, and arcs carrying flow walked backwards), and
    the sink side holds the rest.
    """
    source_side = {source}
    stack = [source]
    while stack:
        node = stack.pop()
        for succ in network.successors(node):
            if succ not in source_side and network.residual(node, succ) > 0:
                source_side.add(succ)
                stack.append(succ)
        for pred in network.predecessors(node):
            if pred not in source_side and network.flow(pred, node) > 0:
                source_side.add(pred)
                stack.append(pred)

    sink_side = network.nodes - source_side
    return source_side, sink_side


def cut_capacity(arcs: Iterable[Arc], source_side: Iterable[NodeID]) -> int:
    """Sum the capacities of arcs leaving ``source_side``.

    Args:
        arcs: ``(from, capacity, to)`` triples.
        source_side: Nodes on the source side; every other node is on the
            sink side.

    Returns:
        Capacity of the cut.
    """
    side = set(source_side)
    return sum(
        capacity for u, capacity, v in arcs if u in side and v not in side
    )


def saturated_arcs(
    nodes: Iterable[NodeID],
    arcs: Iterable[Arc],
    source: NodeID,
    sink: NodeID,
    **kwargs,
) -> List[ArcKey]:
    """Return the arcs left without spare capacity by a maximum flow.

    Args:
        nodes: Node identifiers.
        arcs: ``(from, capacity, to)`` triples.
        source: Source node.
        sink: Sink node.
        **kwargs: Additional arguments passed to ``maximum_flow``.

    Returns:
        ``(from, to)`` pairs whose residual capacity is zero.
    """
    _, _, summary = maximum_flow(
        nodes, arcs, source, sink, return_summary=True, **kwargs
    )
    return [arc for arc, residual in summary.residual_cap.items() if residual == 0]


def run_sensitivity(
    nodes: Iterable[NodeID],
    arcs: Iterable[Arc],
    source: NodeID,
    sink: NodeID,
    *,
    change_amount: int = 1,
    **kwargs,
) -> dict[ArcKey, int]:
    """Measure how the maximum flow reacts to changing each saturated arc.

    Every saturated arc in turn gets its capacity changed by ``change_amount``
    (clamped at zero) and the maximum flow is recomputed on a fresh network.

    Args:
        nodes: Node identifiers.
        arcs: ``(from, capacity, to)`` triples.
        source: Source node.
        sink: Sink node.
        change_amount: Capacity delta; positive increases, negative decreases.
        **kwargs: Additional arguments passed to ``maximum_flow``.

    Returns:
        Map of ``(from, to)`` to the change in maximum flow.
    """
    nodes = list(nodes)
    arcs = list(arcs)

    baseline_flow, _, summary = maximum_flow(
        nodes, arcs, source, sink, return_summary=True, **kwargs
    )
    saturated = [
        arc for arc, residual in summary.residual_cap.items() if residual == 0
    ]

    sensitivity = {}
    for u, v in saturated:
        modified = [
            (a, max(capacity + change_amount, 0), b) if (a, b) == (u, v)
            else (a, capacity, b)
            for a, capacity, b in arcs
        ]
        new_flow, _ = maximum_flow(nodes, modified, source, sink, **kwargs)
        sensitivity[(u, v)] = new_flow - baseline_flow

    return sensitivity


def _check_terminals(network: FlowNetwork, source: NodeID, sink: NodeID) -> None:
    if source not in network:
        raise ValueError(f"Source node '{source}' does not exist.")
    if sink not in network:
        raise ValueError(f"Sink node '{sink}' does not exist.")
    if source == sink:
        raise ValueError(f"Source and sink must differ, got '{source}' for both.")


def _path_length(predecessors: Predecessors, source: NodeID, sink: NodeID) -> int:
    length = 0
    node = sink
    while node != source:
        node = predecessors[node][0]
        length += 1
    return length


def _build_flow_summary(
    network: FlowNetwork,
    total_flow: int,
    source_side: set,
    sink_side: set,
    augmentations: int,
) -> FlowSummary:
    """Build a FlowSummary from the final network state."""
    crossing = [
        (u, v) for u, v in network.arcs() if u in source_side and v in sink_side
    ]
    crossing.sort(key=repr)

    return FlowSummary(
        total_flow=total_flow,
        arc_flow=network.arc_flows(),
        residual_cap=network.residual_capacities(),
        source_side=set(source_side),
        sink_side=set(sink_side),
        min_cut=crossing,
        augmentations=augmentations,
    )
