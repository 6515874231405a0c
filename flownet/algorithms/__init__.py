"""Flow algorithms operating on ``FlowNetwork``."""

from flownet.algorithms.max_flow import (
    augment,
    augmenting_path,
    bottleneck,
    cut_capacity,
    maximum_flow,
    min_cut,
    run_sensitivity,
    saturated_arcs,
)
from flownet.algorithms.partition import separate_groups, undirected_arcs

__all__ = [
    "augment",
    "augmenting_path",
    "bottleneck",
    "cut_capacity",
    "maximum_flow",
    "min_cut",
    "run_sensitivity",
    "saturated_arcs",
    "separate_groups",
    "undirected_arcs",
]
