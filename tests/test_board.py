import pytest

from isotd.board import Board
from isotd.geometry import Vec2
from isotd.tile import TileRole


@pytest.fixture
def board():
    return Board((5, 5), 100, Vec2(1920, 1080))


def test_tile_count_matches_grid(board):
    assert len(board.tiles) == 25


def test_spawn_and_tower_positions_come_from_tiles(board):
    assert board.spawn_pos == board.tiles[5].screen_pos
    assert board.tower_pos == board.tiles[9].screen_pos


def test_iso_to_screen_diagonal_has_zero_x(board):
    assert board.iso_to_screen(Vec2(70.0, 70.0)) == Vec2(0.0, 70.0)


def test_iso_to_screen_axis(board):
    assert board.iso_to_screen(Vec2(100.0, 0.0)) == Vec2(100.0, 50.0)


def test_centered_pos_horizontal_offset(board):
    pos = board.to_screen_centered_pos(Vec2(0.0, 0.0))
    assert pos.x == 960.0
    assert pos.y == 315.0


def test_tile_origins_follow_rows_and_columns(board):
    assert board.tiles[1].origin == Vec2(100.0, 0.0)
    assert board.tiles[5].origin == Vec2(0.0, 100.0)


def test_screen_positions_are_consistent(board):
    for tile in board.tiles:
        expected = board.to_screen_centered_pos(board.iso_to_screen(tile.origin))
        assert tile.screen_pos == expected


def test_hovered_tile_at_each_tile_centre(board):
    for i, tile in enumerate(board.tiles):
        assert board.hovered_tile_index(tile.screen_pos) == i


def test_no_tile_hovered_far_away(board):
    assert board.hovered_tile_index(Vec2(-5000.0, -5000.0)) is None


def test_feedback_highlights_empty_tile_when_selected(board):
    tile = board.tiles[3]
    board.update_turret_placement_feedback(tile.screen_pos, True)
    assert board.hovered_tile_idx == 3
    assert tile.top_fill == tile.color_turret_placement_approved


def test_feedback_no_highlight_without_selection(board):
    tile = board.tiles[3]
    board.update_turret_placement_feedback(tile.screen_pos, False)
    assert board.hovered_tile_idx == 3
    assert tile.top_fill == tile.color_default


def test_feedback_no_highlight_on_occupied_tile(board):
    tile = board.tiles[7]
    tile.role = TileRole.TURRET
    board.update_turret_placement_feedback(tile.screen_pos, True)
    assert tile.top_fill == tile.color_default


def test_feedback_resets_previous_tile(board):
    first, second = board.tiles[2], board.tiles[12]
    board.update_turret_placement_feedback(first.screen_pos, True)
    board.update_turret_placement_feedback(second.screen_pos, True)
    assert first.top_fill == first.color_default
    assert second.top_fill == second.color_turret_placement_approved


def test_feedback_resets_when_leaving_board(board):
    tile = board.tiles[0]
    board.update_turret_placement_feedback(tile.screen_pos, True)
    board.update_turret_placement_feedback(Vec2(-5000.0, -5000.0), True)
    assert board.hovered_tile_idx is None
    assert tile.top_fill == tile.color_default