import pytest

from isotd.button import Button, build_rounded_rect
from isotd.geometry import Vec2


@pytest.fixture
def button():
    return Button(Vec2(1920, 1080))


def centre(button):
    return button.pos + button.size * 0.5


def test_rounded_rect_structure():
    pos, size = Vec2(10, 20), Vec2(100, 60)
    points = build_rounded_rect(pos, size, 10.0, 4)
    assert len(points) == 1 + 4 * 5 + 1
    assert points[0] == Vec2(60, 50)
    assert points[-1] == points[2]
    eps = 1e-9
    for p in points:
        assert pos.x - eps <= p.x <= pos.x + size.x + eps
        assert pos.y - eps <= p.y <= pos.y + size.y + eps


def test_rounded_rect_default_resolution():
    points = build_rounded_rect(Vec2(0, 0), Vec2(100, 100))
    assert len(points) == 1 + 4 * 9 + 1


def test_button_placement(button):
    assert button.pos == Vec2(910, 930)
    assert button.fill_color == button.color_norm
    assert button.turret_selected is False


def test_is_hovered(button):
    assert button.is_hovered(centre(button))
    assert not button.is_hovered(Vec2(0, 0))
    assert not button.is_hovered(button.pos + Vec2(150, 50))


def test_click_selects_and_click_elsewhere_deselects(button):
    button.update(centre(button), True)
    assert button.turret_selected
    assert button.fill_color == button.color_pressed

    button.update(Vec2(0, 0), False)
    assert button.turret_selected
    assert button.fill_color == button.color_pressed

    button.update(Vec2(0, 0), True)
    assert not button.turret_selected
    assert button.fill_color == button.color_norm


def test_hover_without_click_does_not_select(button):
    button.update(centre(button), False)
    assert not button.turret_selected
    assert button.fill_color == button.color_norm
    assert not button.was_hovered