from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Jitter:
    """A uniformly distributed delay of ``base`` +/- ``spread`` seconds."""

    base: float = 0.5
    spread: float = 0.25

    def __post_init__(self) -> None:
        if self.spread < 0 or self.base - self.spread < 0:
            raise ValueError("Jitter spread must be non-negative and no larger than base")

    def sample(self) -> float:
        return random.uniform(self.base - self.spread, self.base + self.spread)


DEFAULT_RELOAD_JITTER = Jitter()
