"""
Seeded random streams for simulation replications.
"""
from typing import List, Optional
import numpy as np

def replication_streams(seed: Optional[int], replications: int) -> List[np.random.Generator]:
    """
    Spawn one independent Generator per replication from a single seed.

    Args:
        seed: Integer seed, or None for OS entropy.
        replications: Number of streams to create.

    Returns:
        List of np.random.Generator, reproducible for a fixed seed.
    """
    root = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in root.spawn(replications)]
