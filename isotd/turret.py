"""Turrets that swing a barrel around an ellipse and fire at the first enemy."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from isotd.bullet import Bullet
from isotd.enemy import Enemy
from isotd.geometry import Circle, Color, Vec2, angle_to, shortest_angle_delta

BASE_COLOR: Color = (203, 186, 158)
BARREL_COLOR: Color = (75, 68, 58)
BARREL_RADIUS = 12.0
FIRE_INTERVAL = 100
_BASE_OFFSET = Vec2(0.5, 0.74)
_BASE_SCALE = 0.833
_BARREL_ANCHOR_OFFSET = Vec2(0.0, 35.0)
_BARREL_START_OFFSET = Vec2(0.0, -10.0)
_AIM_TOLERANCE = 0.1

_BASE_POINTS: tuple[tuple[float, float], ...] = (
    (1, 0.745007), (0.990843, 0.797121), (0.964488, 0.843055), (0.926444, 0.88006),
    (0.881982, 0.909156), (0.834055, 0.932167), (0.78415, 0.950527),
    (0.733035, 0.965212), (0.681142, 0.976858), (0.628722, 0.985856),
    (0.575939, 0.992388), (0.522904, 0.996385), (0.469737, 0.995967),
    (0.416667, 0.992442), (0.363817, 0.986467), (0.311315, 0.97797),
    (0.259344, 0.966676), (0.208199, 0.952106), (0.158379, 0.933522),
    (0.110794, 0.909827), (0.0671886, 0.879483), (0.0308953, 0.840785),
    (0.00714522, 0.79345), (0, 0.74097), (0.00228147, 0.687839), (0.00786696, 0.634948),
    (0.0162233, 0.582423), (0.0270923, 0.53036), (0.0403624, 0.478855),
    (0.0560179, 0.428025), (0.0741149, 0.378012), (0.0947685, 0.329002),
    (0.118145, 0.281232), (0.144461, 0.235018), (0.17397, 0.190778),
    (0.206948, 0.149064), (0.243654, 0.110598), (0.284256, 0.0762813),
    (0.328729, 0.0471695), (0.376725, 0.0243437), (0.427509, 0.00868394),
    (0.480036, 0.000609117), (0.533182, 0), (0.585854, 0.00704704),
    (0.636818, 0.022083), (0.684873, 0.0447696), (0.729146, 0.0741745),
    (0.769237, 0.109082), (0.80514, 0.148296), (0.837087, 0.190802),
    (0.865408, 0.23581), (0.890446, 0.282727), (0.912511, 0.331116),
    (0.931866, 0.380654), (0.948715, 0.431099), (0.963208, 0.482273),
    (0.975431, 0.534037), (0.9854, 0.58628), (0.993032, 0.638916),
    (0.998085, 0.69186),
)


def build_base_shape() -> list[Vec2]:
    """The turret base outline in unit coordinates, centred on its foot."""
    return [Vec2(float(x), float(y)) - _BASE_OFFSET for x, y in _BASE_POINTS]


@dataclass
class Turret:
    """A turret standing on a tile, aiming its barrel at the first enemy."""

    tile_center: Vec2
    tile_size: int
    fire_timer: int = FIRE_INTERVAL
    barrel_rotation_speed: float = 0.05
    barrel_ellipse_width: float = 90.0
    barrel_ellipse_height: float = 45.0
    barrel_angle: float = 0.0
    base_color: Color = BASE_COLOR
    base_shape: list[Vec2] = field(init=False)
    center_of_home_tile: Vec2 = field(init=False)
    barrel_anchor: Vec2 = field(init=False)
    barrel_shape: Circle = field(init=False)

    def __post_init__(self) -> None:
        scale = self.tile_size * _BASE_SCALE
        self.base_shape = [self.tile_center + p * scale for p in build_base_shape()]
        self.center_of_home_tile = self.tile_center
        self.barrel_anchor = self.tile_center - _BARREL_ANCHOR_OFFSET
        self.barrel_shape = Circle(
            self.tile_center + _BARREL_START_OFFSET, BARREL_RADIUS, BARREL_COLOR
        )

    def update(self, enemies: list[Enemy], bullets: list[Bullet]) -> None:
        """Turn the barrel toward the first enemy and fire when aimed and reloaded.

        Does nothing when there are no enemies.
        """
        if not enemies:
            return
        target = enemies[0]
        a = self.barrel_ellipse_width / 2.0
        b = self.barrel_ellipse_height / 2.0

        desired_angle = angle_to(self.barrel_anchor, target.shape.position)
        desired_delta = shortest_angle_delta(self.barrel_angle, desired_angle)
        speed = self.barrel_rotation_speed
        self.barrel_angle += max(-speed, min(desired_delta, speed))

        t = math.atan2(a * math.sin(self.barrel_angle), b * math.cos(self.barrel_angle))
        self.barrel_shape.position = Vec2(
            self.barrel_anchor.x + a * math.cos(t),
            self.barrel_anchor.y + b * math.sin(t),
        )

        self.fire_timer -= 1
        angle_diff = abs(shortest_angle_delta(self.barrel_angle, desired_angle))
        if self.fire_timer <= 0 and angle_diff <= _AIM_TOLERANCE:
            bullets.append(Bullet(self.barrel_shape.position, target))
            self.fire_timer = FIRE_INTERVAL