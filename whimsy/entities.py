# whimsy/entities.py
from dataclasses import dataclass

import pygame

Vec2 = pygame.math.Vector2

@dataclass
class MovingDisc:
    pos: Vec2
    vel: Vec2     # px/s
    r: float
    color: str    # hex token from the palette

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def vx(self) -> float:
        return self.vel.x

    @property
    def vy(self) -> float:
        return self.vel.y

    def contains(self, point) -> bool:
        # boundary is not inside
        return (self.pos - Vec2(point)).length() < self.r

    def draw(self, surface):
        pygame.draw.circle(surface, pygame.Color(self.color), (self.pos.x, self.pos.y), self.r)
