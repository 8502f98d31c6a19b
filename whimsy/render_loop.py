# whimsy/render_loop.py
import logging
import math
from typing import Dict, Optional

import pygame

from whimsy.frame_timer import FrameTimer
from whimsy.world import SimulationField
from whimsy_shared.constants import BACKGROUND, FPS_TEXT_COLOR
from whimsy_shared.game_config import CFG, FieldConfig

logger = logging.getLogger(__name__)


class RenderLoop:
    """
    One step per display refresh.
    The host calls tick() with a millisecond timestamp and forwards resize
    and click events; nothing here schedules itself.
    """

    def __init__(self, surface: pygame.Surface, field: SimulationField,
                 timer: Optional[FrameTimer] = None, cfg: FieldConfig = CFG):
        self.surface = surface
        self.field = field
        self.timer = timer if timer is not None else FrameTimer()
        self.cfg = cfg

        self.last_timestamp: Optional[float] = None
        self._fonts: Dict[int, pygame.font.Font] = {}

        self.field.initialize(self.width, self.height)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    # ---------------- Frame ----------------
    def tick(self, timestamp: float) -> Optional[str]:
        """Advance, draw and sample one frame. Returns the FPS text drawn, if any."""
        if self.last_timestamp is None:
            self.last_timestamp = timestamp

        dt = (timestamp - self.last_timestamp) / 1000.0
        self.last_timestamp = timestamp

        self.surface.fill(BACKGROUND)
        self.field.update(self.width, self.height, dt)
        self.field.draw(self.surface)

        text = None
        if self.timer.accumulated_time() >= self.cfg.fps_window:
            text = self.draw_fps(self.timer.average())
            self.timer.drop_oldest()

        self.timer.sample(dt)
        return text

    def draw_fps(self, avg_fps: float) -> str:
        text = f"FPS: {avg_fps:.1f}"
        w, h = self.width, self.height
        size = math.floor(w / max(w, h) * self.cfg.fps_base_font)
        x = w - w * self.cfg.fps_margin
        y = w * self.cfg.fps_margin

        img = self._font(size).render(text, True, pygame.Color(FPS_TEXT_COLOR))
        self.surface.blit(img, img.get_rect(topright=(x, y)))
        return text

    def _font(self, size: int) -> pygame.font.Font:
        size = max(1, size)
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(self.cfg.fps_font_name, size)
            self._fonts[size] = font
        return font

    # ---------------- Host events ----------------
    def on_resize(self, surface: pygame.Surface):
        """Adopt the resized surface and respawn every disc to fit it."""
        self.surface = surface
        logger.info("resized to %dx%d", self.width, self.height)
        self.field.initialize(self.width, self.height)

    def on_click(self, x: float, y: float):
        hits = self.field.hit_test(x, y)
        if hits:
            logger.debug("click (%.0f, %.0f) recolored %d disc(s)", x, y, len(hits))
        return hits
