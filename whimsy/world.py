# whimsy/world.py
import logging
from typing import Iterator, List, Optional, Tuple

import pygame
from pygame.math import Vector2 as Vec2

from whimsy.entities import MovingDisc
from whimsy_shared.game_config import CFG, FieldConfig
from whimsy_shared.randomness import RandomProvider

logger = logging.getLogger(__name__)


class SimulationField:
    """
    Owns the discs and moves them.
    Walls are the edges of the surface; discs never collide with each other.
    """

    def __init__(self, provider: Optional[RandomProvider] = None, cfg: FieldConfig = CFG):
        self.provider = provider if provider is not None else RandomProvider()
        self.cfg = cfg
        self._discs: List[MovingDisc] = []

    # ---------------- Read-only view ----------------
    @property
    def discs(self) -> Tuple[MovingDisc, ...]:
        return tuple(self._discs)

    def __iter__(self) -> Iterator[MovingDisc]:
        return iter(self.discs)

    def __len__(self) -> int:
        return len(self._discs)

    # ---------------- Spawn ----------------
    def initialize(self, width: int, height: int):
        """
        Throw away every disc and spawn a fresh batch inside width x height.
        An axis narrower than 2 * radius centres the disc on that axis; it
        starts overlapping the walls and bounces in place.
        """
        rnd = self.provider
        cfg = self.cfg
        discs: List[MovingDisc] = []

        n = rnd.random_int(cfg.min_discs, cfg.max_discs)
        for i in range(n):
            r = rnd.random_int(cfg.min_radius, cfg.max_radius)
            x = self._place(r, width)
            y = self._place(r, height)
            vx = rnd.random_int(-cfg.max_speed, cfg.max_speed)
            vy = rnd.random_int(-cfg.max_speed, cfg.max_speed)
            color = rnd.random_color()

            if vx == 0:
                vx = cfg.zero_speed_default
            if vy == 0:
                vy = cfg.zero_speed_default

            logger.debug("disc[%d]: (%d, %d, %d, %d, %d, %s)", i, x, y, vx, vy, r, color)
            discs.append(MovingDisc(Vec2(x, y), Vec2(vx, vy), float(r), color))

        self._discs = discs
        logger.info("spawned %d discs in %dx%d", n, width, height)

    def _place(self, r: int, extent: float) -> float:
        if extent - r < r:
            return extent / 2
        return self.provider.random_int(r, extent - r)

    # ---------------- Physics update ----------------
    def update(self, width: float, height: float, dt: float):
        # reflect on the pre-move position, then integrate; no clamping,
        # so a large dt can leave a disc outside for one frame
        for d in self._discs:
            if d.pos.x + d.r > width or d.pos.x - d.r < 0:
                d.vel.x = -d.vel.x

            if d.pos.y + d.r > height or d.pos.y - d.r < 0:
                d.vel.y = -d.vel.y

            d.pos += d.vel * dt

    # ---------------- Picking ----------------
    def hit_test(self, px: float, py: float) -> List[MovingDisc]:
        """Recolor every disc under (px, py) and return them in creation order."""
        p = Vec2(px, py)
        hits = []
        for d in self._discs:
            if d.contains(p):
                d.color = self.provider.random_color()
                hits.append(d)
        return hits

    # ---------------- Draw ----------------
    def draw(self, surface: pygame.Surface):
        for d in self._discs:
            d.draw(surface)
