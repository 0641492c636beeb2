"""The isometric board: tile layout, hit testing and placement feedback."""

from __future__ import annotations

from dataclasses import dataclass, field

from isotd.geometry import Vec2
from isotd.tile import Tile, TileRole

SPAWN_TILE_INDEX = 5
TOWER_TILE_INDEX = 9


@dataclass
class Board:
    """A grid of tiles laid out isometrically and centred on the screen."""

    grid_dim: tuple[int, int]
    tile_size: int
    screen_dim: Vec2
    tiles: list[Tile] = field(init=False, default_factory=list)
    hovered_tile_idx: int | None = field(init=False, default=None)
    spawn_pos: Vec2 = field(init=False)
    tower_pos: Vec2 = field(init=False)

    def __post_init__(self) -> None:
        self.tiles = list(self._build_tiles())
        self.spawn_pos = self.tiles[SPAWN_TILE_INDEX].screen_pos
        self.tower_pos = self.tiles[TOWER_TILE_INDEX].screen_pos

    def _build_tiles(self):
        rows, cols = self.grid_dim
        for row in range(rows):
            for col in range(cols):
                origin = Vec2(float(col * self.tile_size), float(row * self.tile_size))
                tile = Tile(origin, self.tile_size)
                tile.screen_pos = self.to_screen_centered_pos(self.iso_to_screen(origin))
                yield tile

    def to_screen_centered_pos(self, origin: Vec2) -> Vec2:
        """Shift an isometric position so the board sits in the middle of the screen."""
        rows, cols = self.grid_dim
        iso_board_height = (rows + cols - 1) * (self.tile_size / 4.0)
        x_offset = self.screen_dim.x / 2.0
        y_offset = self.screen_dim.y / 2.0 - iso_board_height
        return origin + Vec2(x_offset, y_offset)

    def iso_to_screen(self, iso_pos: Vec2) -> Vec2:
        """Project a grid position onto the isometric screen plane."""
        return Vec2(iso_pos.x - iso_pos.y, (iso_pos.x + iso_pos.y) / 2.0)

    def hovered_tile_index(self, mouse_pos: Vec2) -> int | None:
        """Index of the tile under the mouse, or ``None`` if there is none."""
        idx = self.hovered_tile_idx
        if idx is not None and self.tiles[idx].contains(mouse_pos, self.tile_size):
            return idx
        return next(
            (
                i
                for i, tile in enumerate(self.tiles)
                if tile.contains(mouse_pos, self.tile_size)
            ),
            None,
        )

    def update_turret_placement_feedback(
        self, mouse_pos: Vec2, turret_selected: bool
    ) -> None:
        """Track the hovered tile and highlight it when a turret can be placed."""
        old_idx = self.hovered_tile_idx
        self.hovered_tile_idx = self.hovered_tile_index(mouse_pos)

        if old_idx is not None and self.hovered_tile_idx != old_idx:
            old_tile = self.tiles[old_idx]
            old_tile.top_fill = old_tile.color_default

        if self.hovered_tile_idx is not None:
            tile = self.tiles[self.hovered_tile_idx]
            if turret_selected and tile.role is TileRole.EMPTY:
                tile.top_fill = tile.color_turret_placement_approved