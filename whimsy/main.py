# whimsy/main.py
import argparse
import logging
import os
import random
import sys

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from whimsy_shared.constants import APP_TITLE, WIDTH, HEIGHT, FPS
from whimsy_shared.randomness import RandomProvider
from whimsy.frame_timer import FrameTimer
from whimsy.render_loop import RenderLoop
from whimsy.world import SimulationField

logger = logging.getLogger(__name__)


def make_provider(seed=None) -> RandomProvider:
    return RandomProvider(random.Random(seed))


class App:
    def __init__(self, width=WIDTH, height=HEIGHT, fps=None, seed=None):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        # fps=None follows the display refresh; clock.tick(0) never sleeps
        self.cap = fps or 0
        self.screen = self._open_window(width, height)
        self.clock = pygame.time.Clock()

        self.field = SimulationField(make_provider(seed))
        self.loop = RenderLoop(self.screen, self.field, FrameTimer())

        self.running = True

    def _open_window(self, width, height):
        if not self.cap:
            try:
                return pygame.display.set_mode((width, height), pygame.RESIZABLE, vsync=1)
            except pygame.error:
                logger.info("vsync unavailable, capping at %d fps", FPS)
                self.cap = FPS
        return pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.get_surface()
            self.loop.on_resize(self.screen)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL mirrors every tap as a click; FINGERDOWN already handled it
            if not getattr(event, "touch", False):
                self.loop.on_click(*event.pos)
        elif event.type == pygame.FINGERDOWN:
            # finger coordinates are normalized to 0..1
            self.loop.on_click(event.x * self.loop.width, event.y * self.loop.height)

    def run(self):
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.loop.tick(pygame.time.get_ticks())
                pygame.display.flip()
                self.clock.tick(self.cap)
        finally:
            pygame.quit()


def run_headless(frames, width=WIDTH, height=HEIGHT, fps=None, seed=None) -> RenderLoop:
    """Drive the loop off-screen with evenly spaced timestamps."""
    pygame.font.init()
    surface = pygame.Surface((width, height))
    loop = RenderLoop(surface, SimulationField(make_provider(seed)), FrameTimer())

    step_ms = 1000.0 / (fps or FPS)
    last_text = None
    for i in range(frames):
        text = loop.tick(i * step_ms)
        if text is not None:
            last_text = text

    logger.info("headless run: %d frames, last overlay %r", frames, last_text)
    return loop


def parse_args(argv=None):
    env = os.environ
    seed = env.get("WHIMSY_SEED")
    p = argparse.ArgumentParser(description="Colored discs bouncing around a window.")
    p.add_argument("--width", type=int, default=int(env.get("WHIMSY_WIDTH", WIDTH)))
    p.add_argument("--height", type=int, default=int(env.get("WHIMSY_HEIGHT", HEIGHT)))
    fps = env.get("WHIMSY_FPS")
    p.add_argument("--fps", type=int, default=int(fps) if fps is not None else None,
                   help="Cap the frame rate (default: follow the display refresh)")
    p.add_argument("--seed", type=int, default=int(seed) if seed is not None else None)
    p.add_argument("--frames", type=int, default=None,
                   help="Run N frames without a window and exit")
    p.add_argument("--log-level", default=env.get("WHIMSY_LOG_LEVEL", "INFO"),
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if args.frames is not None:
        run_headless(args.frames, args.width, args.height, args.fps, args.seed)
        return 0

    logger.info("%s %dx%d @ %s fps (click a disc to recolor it, ESC to quit)",
                APP_TITLE, args.width, args.height, args.fps or "display")
    App(args.width, args.height, args.fps, args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
