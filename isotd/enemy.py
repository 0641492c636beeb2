"""Enemies walking from the spawn point to the tower."""

from __future__ import annotations

from dataclasses import dataclass, field

from isotd.geometry import Circle, Vec2, build_circle, calc_dist

ENEMY_COLOR = (240, 200, 78)
ENEMY_RADIUS = 20.0


@dataclass
class Enemy:
    """An enemy that moves in a straight line toward the tower."""

    spawn_pos: Vec2
    tower_pos: Vec2
    speed: float = 0.8
    health: float = 100.0
    shape: Circle = field(init=False)

    def __post_init__(self) -> None:
        self.shape = build_circle(self.spawn_pos, ENEMY_COLOR, ENEMY_RADIUS)

    def update(self) -> None:
        """Advance one step toward the tower, stopping within one pixel of it."""
        position = self.shape.position
        dist = calc_dist(position, self.tower_pos)
        if dist < 1.0:
            return
        direction = (self.tower_pos - position) / dist
        self.shape.position = position + direction * self.speed