import random

import pytest

from shapecatch.character import GAME_HEIGHT, GAME_WIDTH, FallingObject, Player, Shape
from shapecatch.game import GameState
from shapecatch.render import (
    BORDER_COLOR,
    DEFAULT_ATTRIBUTES,
    PLAYER_COLOR,
    SHAPE_STYLES,
    Cell,
    Color,
    ScreenBuffer,
    cursor_to,
    draw_border,
    draw_falling_object,
    draw_game_over,
    draw_player,
    draw_score,
    draw_time,
    render_game,
)


def test_new_buffer_is_blank():
    buf = ScreenBuffer()
    assert buf.width == GAME_WIDTH + 30
    assert buf.height == GAME_HEIGHT + 5
    assert buf.row_text(0) == " " * buf.width
    assert buf.cell(3, 3) == Cell(" ", Color.RED | Color.GREEN | Color.BLUE)


def test_write_char_and_read_back():
    buf = ScreenBuffer(10, 4)
    buf.write_char(2, 1, "x", Color.GREEN)
    assert buf.cell(2, 1) == Cell("x", Color.GREEN)


def test_write_outside_is_ignored():
    buf = ScreenBuffer(10, 4)
    before = [buf.row_text(y) for y in range(4)]
    buf.write_char(-1, 0, "x", Color.RED)
    buf.write_char(10, 0, "x", Color.RED)
    buf.write_char(0, 4, "x", Color.RED)
    assert [buf.row_text(y) for y in range(4)] == before


def test_write_char_rejects_strings():
    buf = ScreenBuffer(10, 4)
    with pytest.raises(ValueError):
        buf.write_char(0, 0, "ab", Color.RED)


def test_cell_outside_raises():
    with pytest.raises(IndexError):
        ScreenBuffer(10, 4).cell(10, 0)


def test_write_string_clips_at_edge():
    buf = ScreenBuffer(6, 2)
    buf.write_string(3, 0, "hello", Color.BLUE)
    assert buf.row_text(0) == "   hel"


def test_clear_resets_cells():
    buf = ScreenBuffer(6, 2)
    buf.write_string(0, 0, "abc", Color.RED)
    buf.clear()
    assert buf.row_text(0) == " " * 6


def test_cursor_to_is_one_based():
    assert cursor_to(0, 0) == "\x1b[1;1H"


def test_to_ansi_contains_rows_and_reset():
    buf = ScreenBuffer(4, 2)
    buf.write_string(0, 1, "ab", Color.RED | Color.INTENSITY)
    out = buf.to_ansi()
    assert out.startswith(cursor_to(0, 0))
    assert cursor_to(0, 1) in out
    assert "ab" in out
    assert out.endswith("\x1b[0m")


def test_border_corners_and_edges():
    buf = ScreenBuffer()
    draw_border(buf)
    assert buf.cell(0, 0) == Cell("|", BORDER_COLOR)
    assert buf.cell(1, 0).char == "="
    assert buf.cell(1, GAME_HEIGHT).char == "="
    assert buf.cell(GAME_WIDTH - 1, 5).char == "|"


def test_player_triangle():
    buf = ScreenBuffer()
    player = Player()
    draw_player(buf, player)
    row = buf.row_text(player.y)
    assert row[player.x - 1 : player.x + 2] == "/^\\"
    assert buf.cell(player.x, player.y).attributes == PLAYER_COLOR


def test_diamond_takes_two_cells():
    buf = ScreenBuffer()
    draw_falling_object(buf, FallingObject(Shape.DIAMOND, x=5, y=3))
    assert buf.row_text(3)[5:7] == "<>"
    assert buf.cell(6, 3).attributes == SHAPE_STYLES[Shape.DIAMOND][1]


@pytest.mark.parametrize("shape, glyph", [(Shape.STAR, "*"), (Shape.SQUARE, "#"), (Shape.CIRCLE, "O"), (Shape.CROSS, "+")])
def test_single_cell_shapes(shape, glyph):
    buf = ScreenBuffer()
    draw_falling_object(buf, FallingObject(shape, x=4, y=2))
    assert buf.cell(4, 2).char == glyph
    assert buf.cell(5, 2).char == " "


def test_score_panel_text():
    buf = ScreenBuffer()
    draw_score(buf, 70)
    assert "分数: 70" in buf.row_text(2)
    assert "ESC - 退出游戏" in buf.row_text(7)
    assert "+ - 50分" in buf.row_text(14)


@pytest.mark.parametrize(
    "remaining, color",
    [
        (31, Color.GREEN | Color.INTENSITY),
        (30, Color.RED | Color.GREEN | Color.INTENSITY),
        (10, Color.RED | Color.INTENSITY),
    ],
)
def test_time_color_thresholds(remaining, color):
    buf = ScreenBuffer()
    draw_time(buf, remaining)
    assert f"剩余时间: {remaining} 秒" in buf.row_text(1)
    assert buf.cell(GAME_WIDTH + 2, 1).attributes == color


def test_render_game_draws_state():
    state = GameState(rng=random.Random(5), clock=lambda: 0.0)
    buf = ScreenBuffer()
    render_game(buf, state)
    p = state.player
    assert buf.cell(p.x, p.y).char == "^"
    assert "剩余时间: 120 秒" in buf.row_text(1)
    for obj in state.objects:
        if obj is not None:
            assert buf.cell(obj.x, obj.y).char == SHAPE_STYLES[obj.shape][0][0]


def test_game_over_screen():
    buf = ScreenBuffer()
    draw_border(buf)
    draw_game_over(buf, 90)
    assert "游戏结束!" in buf.row_text(GAME_HEIGHT // 2 - 2)
    assert "你的最终得分: 90" in buf.row_text(GAME_HEIGHT // 2)
    assert "按任意键退出..." in buf.row_text(GAME_HEIGHT // 2 + 2)
    assert buf.cell(0, 0) == Cell(" ", DEFAULT_ATTRIBUTES)