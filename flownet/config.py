"""Configuration classes for flownet solvers."""

from dataclasses import dataclass


@dataclass
class MaxFlowConfig:
    """Tunables for the augmenting-path solver and its callers."""

    # Verify 0 <= flow <= capacity on every arc touched by an augmentation
    check_capacity_bounds: bool = True

    # Emit one DEBUG record per augmentation
    log_augmentations: bool = False

    # Upper bound on random terminal pairs tried by separate_groups()
    max_separation_attempts: int = 1000


# Global configuration instance
MAX_FLOW_CONFIG = MaxFlowConfig()
