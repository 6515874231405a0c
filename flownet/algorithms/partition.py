"""Split an undirected graph into two groups by cutting a known number of edges.

When a graph is known to fall apart after removing exactly ``k`` edges, any
source/sink pair lying on opposite sides of that cut has a unit-capacity
maximum flow of ``k``, and the minimum cut returned with it names the two
groups. Pairs are drawn at random until one such pair is found.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from flownet.algorithms.max_flow import maximum_flow
from flownet.config import MAX_FLOW_CONFIG, MaxFlowConfig
from flownet.logging import get_logger
from flownet.seed_manager import SeedManager
from flownet.types import Arc, ArcKey, Cut, NodeID

logger = get_logger(__name__)


def undirected_arcs(
    edges: Iterable[Tuple[NodeID, NodeID]], capacity: int = 1
) -> List[Arc]:
    """Turn undirected edges into a pair of opposite arcs each.

    Repeated edges, in either orientation, collapse into one. A self-loop
    yields a single arc.

    Args:
        edges: ``(a, b)`` node pairs.
        capacity: Capacity given to every arc.

    Returns:
        ``(from, capacity, to)`` triples in first-seen order.
    """
    seen: Dict[ArcKey, None] = {}
    for a, b in edges:
        seen[(a, b)] = None
        seen[(b, a)] = None
    return [(u, capacity, v) for u, v in seen]


def separate_groups(
    nodes: Iterable[NodeID],
    edges: Iterable[Tuple[NodeID, NodeID]],
    cut_size: int,
    *,
    seed: Optional[int] = None,
    config: Optional[MaxFlowConfig] = None,
) -> Cut:
    """Find two groups connected by exactly ``cut_size`` edges.

    Args:
        nodes: Node identifiers.
        edges: Undirected ``(a, b)`` edges of unit capacity.
        cut_size: Number of edges whose removal splits the graph.
        seed: Master seed for terminal selection; None for nondeterministic.
        config: Settings; ``max_separation_attempts`` bounds the search.

    Returns:
        ``(group, other_group)``.

    Raises:
        ValueError: If there are fewer than two nodes or ``cut_size`` is
            negative.
        RuntimeError: If no terminal pair with maximum flow ``cut_size`` was
            found within the allowed attempts.
    """
    config = config or MAX_FLOW_CONFIG

    node_list = list(dict.fromkeys(nodes))
    if len(node_list) < 2:
        raise ValueError(
            f"Need at least two nodes to separate, got {len(node_list)}."
        )
    if cut_size < 0:
        raise ValueError(f"Cut size must be non-negative, got {cut_size}.")

    arcs = undirected_arcs(edges)
    rng = SeedManager(seed).create_random_state("separate_groups")

    for attempt in range(1, config.max_separation_attempts + 1):
        source, sink = rng.sample(node_list, 2)
        flow, cut = maximum_flow(node_list, arcs, source, sink, config=config)
        if flow == cut_size:
            logger.debug(
                "Separated %d nodes into groups of %d and %d after %d attempts",
                len(node_list),
                len(cut[0]),
                len(cut[1]),
                attempt,
            )
            return cut

    raise RuntimeError(
        f"No cut of size {cut_size} found after "
        f"{config.max_separation_attempts} attempts."
    )
