"""Display-only P&L random walk for recorded positions.

The pricing engine never uses this; it exists so a dashboard can animate
"live" P&L from an injected random generator, keeping runs reproducible.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field

import numpy as np


@dataclass
class PnlJitter:
    """Uniform `[-step, step)` increments per tick, rounded to cents."""

    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    step: float = 12.0

    def __post_init__(self) -> None:
        if not self.step > 0:
            raise ValueError("step must be > 0")

    def initial(self, keys: Iterable[Hashable]) -> dict[Hashable, float]:
        return {key: 0.0 for key in keys}

    def tick(self, pnls: Mapping[Hashable, float]) -> dict[Hashable, float]:
        """Return a new mapping with every value moved by one random step."""
        keys = list(pnls)
        moves = self.rng.uniform(-self.step, self.step, size=len(keys))
        return {
            key: round(float(pnls[key] + move), 2) for key, move in zip(keys, moves)
        }
