# isotd

A small isometric tower-defence game drawn with pygame. The board is a 5×5 grid
of isometric tiles in a 1920×1080 window. An enemy spawns on one tile and walks
in a straight line toward the tower. You place turrets on empty tiles. Each
turret swings its barrel round an elliptical track, turns it toward the first
enemy, and fires a homing bullet when it is aimed and reloaded. Each hit does 10
damage. An enemy with no health left is removed, and a new one spawns whenever
none is left.

## Installing

```
pip install .
```

## Playing

```
isotd
```

- Click the button near the bottom of the screen to select a turret.
- While a turret is selected, empty tiles light up when the mouse is over them.
  Click one to build a turret on it. A click anywhere outside the button clears
  the selection.
- With no turret selected, click a tile that holds a turret to remove it.
- Press Escape or close the window to quit.

## What the game does not have

There is no scoring, no lives, no waves and no win or lose condition. An enemy
that reaches the tower stops there. There is no sound.

## Normalising outlines

```
isotd-normalize
```

This prints a built-in outline of points in normalised form, one `{x, y},` per
line. Each coordinate has its axis minimum subtracted, and both axes are divided
by the smaller of the two ranges, so the shape keeps its aspect ratio.
`isotd.normalize.normalize_points(points)` does the same for any list of points.
It raises `ValueError` when the points do not span a range on both axes.

## Using it as a library

The game logic runs without a window:

- `isotd.engine.Engine(screen_dim, grid_dim, tile_size_px)` holds the board,
  enemies, bullets, turrets, button and tower.
- `Engine.step(mouse_pos, mouse_clicked)` moves the game on by one frame.
- `Engine.draw(surface)` renders the current frame onto a pygame surface.
- `Engine.run(target_fps)` opens a window and plays.

The building blocks can also be used on their own:

- `isotd.board.Board` lays out the tiles isometrically and finds the tile under
  the mouse.
- `isotd.tile.Tile` holds a single tile.
- `isotd.turret.Turret`, `isotd.enemy.Enemy`, `isotd.bullet.Bullet` and
  `isotd.tower.Tower` hold the game objects.
- `isotd.button.Button` is the turret selection button.
- `isotd.geometry` holds `Vec2`, `Circle` and the angle and distance helpers.
- `isotd.config` holds the default screen, frame-rate and board settings.

## Tests

```
pip install .[test]
pytest
```