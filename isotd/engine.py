"""The game loop: input, simulation step and drawing."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

import pygame

from isotd.board import Board
from isotd.bullet import Bullet
from isotd.button import Button
from isotd.config import GRID_DIM, SCREEN_DIM, TARGET_FPS, TILE_SIZE_PX
from isotd.enemy import Enemy
from isotd.geometry import Color, Vec2, calc_dist
from isotd.tile import (
    LEFT_FILL,
    LEFT_OUTLINE,
    RIGHT_FILL,
    RIGHT_OUTLINE,
    TOP_OUTLINE,
    TileRole,
    left_face_points,
    right_face_points,
    top_face_points,
)
from isotd.tower import Tower
from isotd.turret import Turret

BACKGROUND: Color = (19, 19, 19)
BULLET_DAMAGE = 10.0
WINDOW_TITLE = "Iso Demo"
_OUTLINE_WIDTH = 2


def _polygon(surface: pygame.Surface, points: Iterable[Vec2], fill: Color,
             outline: Color | None = None) -> None:
    coords = [tuple(p) for p in points]
    pygame.draw.polygon(surface, fill, coords)
    if outline is not None:
        pygame.draw.polygon(surface, outline, coords, _OUTLINE_WIDTH)


def _circle(surface: pygame.Surface, center: Vec2, radius: float, color: Color) -> None:
    pygame.draw.circle(surface, color, tuple(center), radius)


class Engine:
    """Owns the board and every game object and advances them frame by frame."""

    def __init__(self, screen_dim: Vec2, grid_dim: tuple[int, int], tile_size_px: int) -> None:
        self.screen_dim = screen_dim
        self.mouse_clicked = False
        self.mouse_pos = Vec2(0.0, 0.0)
        self.enemies: list[Enemy] = []
        self.bullets: list[Bullet] = []
        self.turrets: list[Turret] = []
        self.board = Board(grid_dim, tile_size_px, screen_dim)
        self.turret_button = Button(screen_dim)
        self.tower = Tower(self.board.tower_pos, tile_size_px)

    def step(self, mouse_pos: Iterable[float], mouse_clicked: bool) -> None:
        """Advance the game by one frame given the mouse position and click state."""
        self.mouse_pos = Vec2(*mouse_pos)
        self.mouse_clicked = mouse_clicked
        self._update_enemies()
        self._update_bullets()
        self._update_turret_placement()
        self._update_turrets()
        self.turret_button.update(self.mouse_pos, self.mouse_clicked)

    def _update_enemies(self) -> None:
        if not self.enemies:
            self.enemies.append(Enemy(self.board.spawn_pos, self.board.tower_pos))
        for enemy in self.enemies:
            enemy.update()
        self.enemies = [enemy for enemy in self.enemies if enemy.health > 0]

    def _update_bullets(self) -> None:
        remaining = []
        for bullet in self.bullets:
            target = bullet.target
            dist = calc_dist(bullet.pos, target.shape.position)
            bullet.update(dist)
            if dist <= target.shape.radius + bullet.radius:
                target.health -= BULLET_DAMAGE
            else:
                remaining.append(bullet)
        self.bullets = remaining

    def _update_turret_placement(self) -> None:
        board = self.board
        board.update_turret_placement_feedback(
            self.mouse_pos, self.turret_button.turret_selected
        )
        idx = board.hovered_tile_idx
        if idx is None or not self.mouse_clicked:
            return

        tile = board.tiles[idx]
        if self.turret_button.turret_selected:
            if tile.role is TileRole.EMPTY:
                self.turrets.append(Turret(tile.screen_pos, board.tile_size))
                tile.role = TileRole.TURRET
                tile.top_fill = tile.color_default
        elif tile.role is TileRole.TURRET:
            for turret in self.turrets:
                if turret.center_of_home_tile == tile.screen_pos:
                    self.turrets.remove(turret)
                    tile.role = TileRole.EMPTY
                    break

    def _update_turrets(self) -> None:
        for turret in self.turrets:
            turret.update(self.enemies, self.bullets)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current frame onto ``surface``."""
        surface.fill(BACKGROUND)

        size = float(self.board.tile_size)
        top, right, left = top_face_points(size), right_face_points(size), left_face_points(size)
        for tile in self.board.tiles:
            base = tile.screen_pos
            _polygon(surface, (base + p for p in top), tile.top_fill, TOP_OUTLINE)
            _polygon(surface, (base + p for p in right), RIGHT_FILL, RIGHT_OUTLINE)
            _polygon(surface, (base + p for p in left), LEFT_FILL, LEFT_OUTLINE)

        for enemy in self.enemies:
            _circle(surface, enemy.shape.position, enemy.shape.radius, enemy.shape.color)

        for turret in self.turrets:
            barrel = turret.barrel_shape
            if barrel.position.y > turret.barrel_anchor.y:
                _polygon(surface, turret.base_shape, turret.base_color)
                _circle(surface, barrel.position, barrel.radius, barrel.color)
            else:
                _circle(surface, barrel.position, barrel.radius, barrel.color)
                _polygon(surface, turret.base_shape, turret.base_color)

        for bullet in self.bullets:
            _circle(surface, bullet.shape.position, bullet.shape.radius, bullet.shape.color)

        # The first point is the fan centre and the last repeats the perimeter start.
        _polygon(surface, self.turret_button.shape[1:-1], self.turret_button.fill_color)
        _polygon(surface, self.tower.shape, self.tower.color)

    def run(self, target_fps: int) -> None:
        """Open a window and play until it is closed or Escape is pressed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (int(self.screen_dim.x), int(self.screen_dim.y))
            )
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                clicked = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        clicked = True
                if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                    running = False
                if not running:
                    break
                self.step(pygame.mouse.get_pos(), clicked)
                self.draw(screen)
                pygame.display.flip()
                clock.tick(target_fps)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game with the default settings."""
    parser = argparse.ArgumentParser(description="Isometric tower defence demo.")
    parser.parse_args(argv)
    Engine(SCREEN_DIM, GRID_DIM, TILE_SIZE_PX).run(TARGET_FPS)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())