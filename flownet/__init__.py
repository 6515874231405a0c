"""flownet: maximum flow and minimum cut on capacitated directed graphs.

Primary API:
    maximum_flow() - Edmonds-Karp maximum flow plus a minimum cut
    FlowNetwork - Residual network bookkeeping used by the solver
    separate_groups() - Split an undirected graph along a k-edge cut
    from_networkx() - Convert a NetworkX graph to nodes and arcs

Example:
    from flownet import maximum_flow

    arcs = [("s", 3, "a"), ("a", 2, "t"), ("s", 1, "t")]
    flow, (source_side, sink_side) = maximum_flow(["s", "a", "t"], arcs, "s", "t")
"""

from __future__ import annotations

from flownet import logging
from flownet._version import __version__
from flownet.algorithms.max_flow import (
    cut_capacity,
    maximum_flow,
    run_sensitivity,
    saturated_arcs,
)
from flownet.algorithms.partition import separate_groups, undirected_arcs
from flownet.config import MAX_FLOW_CONFIG, MaxFlowConfig
from flownet.exceptions import FlowInvariantError
from flownet.network import FlowNetwork
from flownet.nx import from_networkx, to_networkx
from flownet.types import Arc, Cut, FlowDirection, FlowSummary, NodeID

__all__ = [
    # Version
    "__version__",
    # Solver
    "maximum_flow",
    "cut_capacity",
    "saturated_arcs",
    "run_sensitivity",
    "separate_groups",
    "undirected_arcs",
    "FlowNetwork",
    # Types
    "Arc",
    "Cut",
    "NodeID",
    "FlowDirection",
    "FlowSummary",
    "FlowInvariantError",
    # Configuration
    "MaxFlowConfig",
    "MAX_FLOW_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
