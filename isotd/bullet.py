"""Bullets fired by turrets at enemies."""

from __future__ import annotations

from dataclasses import dataclass, field

from isotd.enemy import Enemy
from isotd.geometry import Circle, Vec2, build_circle

BULLET_COLOR = (49, 45, 38)


@dataclass
class Bullet:
    """A bullet that homes in on its target enemy."""

    pos: Vec2
    target: Enemy
    speed: float = 18.0
    radius: float = 4.0
    shape: Circle = field(init=False)

    def __post_init__(self) -> None:
        self.shape = build_circle(self.pos, BULLET_COLOR, self.radius)

    def update(self, dist: float) -> None:
        """Move toward the target, dividing the direction by ``dist`` when non-zero."""
        direction = self.target.shape.position - self.pos
        if dist != 0:
            direction = direction / dist
        self.pos = self.pos + direction * self.speed
        self.shape.position = self.pos