"""Deterministic random streams for randomized flow searches."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derive independent, reproducible RNGs from a single master seed.

    Each consumer names itself with a few components (for example
    ``("separate_groups", attempt_batch)``) and receives a seed hashed from
    the master seed and those components, so one search never perturbs the
    random sequence of another.

    Usage:
        seeds = SeedManager(42)
        rng = seeds.create_random_state("separate_groups")
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """Initialize the seed manager.

        Args:
            master_seed: Master seed. If None, derived RNGs are unseeded.
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Hash the master seed and ``components`` into a 31-bit seed.

        Returns:
            Derived non-negative seed, or None if no master seed is set.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        digest = hashlib.sha256(seed_input.encode()).digest()
        return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Return a new ``random.Random`` seeded for ``components``."""
        derived_seed = self.derive_seed(*components)
        rng = random.Random()
        if derived_seed is not None:
            rng.seed(derived_seed)
        return rng
