# whimsy_shared/randomness.py
import random
from typing import Optional, Sequence

from whimsy_shared.constants import PALETTE


class RandomProvider:
    """Uniform integers and palette picks behind one injectable RNG."""

    def __init__(self, rng: Optional[random.Random] = None, palette: Sequence[str] = PALETTE):
        if not palette:
            raise ValueError("palette must not be empty")
        self.rng = rng if rng is not None else random.Random()
        self.palette = tuple(palette)

    def random_int(self, lo: int, hi: int) -> int:
        """Integer drawn uniformly from the closed range [lo, hi]."""
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self.rng.randint(int(lo), int(hi))

    def random_color(self) -> str:
        return self.rng.choice(self.palette)
