"""The turret selection button."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from isotd.geometry import Color, Vec2


def build_rounded_rect(
    pos: Vec2, size: Vec2, radius: float = 20.0, corner_resolution: int = 8
) -> list[Vec2]:
    """Triangle-fan points of a rounded rectangle: centre, corner arcs, closing point."""
    points = [pos + size * 0.5]
    corners = (
        (pos + Vec2(radius, radius), math.pi),
        (pos + Vec2(size.x - radius, radius), 1.5 * math.pi),
        (pos + Vec2(size.x - radius, size.y - radius), 0.0),
        (pos + Vec2(radius, size.y - radius), 0.5 * math.pi),
    )
    for centre, start in corners:
        for step in range(corner_resolution + 1):
            angle = start + math.pi / 2.0 * step / corner_resolution
            points.append(
                Vec2(centre.x + math.cos(angle) * radius, centre.y + math.sin(angle) * radius)
            )
    points.append(points[2])
    return points


@dataclass
class Button:
    """A toggle button near the bottom of the screen for choosing a turret."""

    screen_dim: Vec2
    size: Vec2 = field(default_factory=lambda: Vec2(100.0, 100.0))
    color_norm: Color = (189, 181, 155)
    color_pressed: Color = (112, 107, 92)
    turret_selected: bool = False
    was_hovered: bool = False
    pos: Vec2 = field(init=False)
    shape: list[Vec2] = field(init=False)
    fill_color: Color = field(init=False)

    def __post_init__(self) -> None:
        self.pos = Vec2(
            self.screen_dim.x / 2.0 - self.size.x / 2.0, self.screen_dim.y - 150.0
        )
        self.shape = build_rounded_rect(self.pos, self.size)
        self.fill_color = self.color_norm

    def is_hovered(self, mouse_pos: Vec2) -> bool:
        """Whether the mouse lies inside the button's bounding box."""
        xs = [p.x for p in self.shape]
        ys = [p.y for p in self.shape]
        return min(xs) <= mouse_pos.x < max(xs) and min(ys) <= mouse_pos.y < max(ys)

    def update(self, mouse_pos: Vec2, clicked: bool) -> None:
        """Toggle selection from a click and refresh the fill colour."""
        hovered = self.is_hovered(mouse_pos)
        if not hovered and clicked:
            self.fill_color = self.color_norm
            self.turret_selected = False
        elif self.turret_selected or (hovered and clicked):
            self.fill_color = self.color_pressed
            self.turret_selected = True
            self.was_hovered = True
        elif self.was_hovered:
            self.fill_color = self.color_norm