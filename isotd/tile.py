"""Isometric board tiles and their face outlines."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from isotd.geometry import Color, Vec2

TOP_FILL: Color = (52, 95, 60)
TOP_OUTLINE: Color = (93, 171, 108)
RIGHT_FILL: Color = (78, 46, 25)
RIGHT_OUTLINE: Color = (154, 91, 49)
LEFT_FILL: Color = (139, 99, 64)
LEFT_OUTLINE: Color = (215, 153, 99)
OUTLINE_THICKNESS = -2.0


class TileRole(enum.Enum):
    EMPTY = enum.auto()
    TURRET = enum.auto()
    TOWER = enum.auto()


def top_face_points(size: float) -> tuple[Vec2, ...]:
    """Diamond of the tile's top face, relative to its screen position."""
    half = size / 2.0
    return (Vec2(0.0, -half), Vec2(size, 0.0), Vec2(0.0, half), Vec2(-size, 0.0))


def right_face_points(size: float) -> tuple[Vec2, ...]:
    """Right side face of the tile, relative to its screen position."""
    w, h, z = size, size / 2.0, size
    return (Vec2(w, 0.0), Vec2(0.0, h), Vec2(0.0, h + z), Vec2(w, z))


def left_face_points(size: float) -> tuple[Vec2, ...]:
    """Left side face of the tile, relative to its screen position."""
    w, h, z = size, size / 2.0, size
    return (Vec2(-w, 0.0), Vec2(0.0, h), Vec2(0.0, h + z), Vec2(-w, z))


@dataclass
class Tile:
    """One board cell: its grid origin, screen placement, role and colour."""

    origin: Vec2
    size: int
    screen_pos: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    role: TileRole = TileRole.EMPTY
    color_default: Color = TOP_FILL
    color_turret_placement_approved: Color = TOP_OUTLINE
    top_fill: Color = TOP_FILL

    def contains(self, screen_point: Vec2, tile_size: float) -> bool:
        """Whether a screen point lies on this tile's top face."""
        local = screen_point - self.screen_pos + Vec2(0.0, tile_size / 2.0)
        x = (2.0 * local.y + local.x) / 2.0
        y = (2.0 * local.y - local.x) / 2.0
        return 0.0 <= x <= tile_size and 0.0 <= y <= tile_size