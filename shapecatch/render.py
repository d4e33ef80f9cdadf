"""Off-screen character buffer and the drawing of each game screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from .character import GAME_HEIGHT, GAME_WIDTH, FallingObject, Player, Shape


class Color(IntFlag):
    """Console colour attribute bits."""

    BLUE = 0x1
    GREEN = 0x2
    RED = 0x4
    INTENSITY = 0x8


DEFAULT_ATTRIBUTES = Color.RED | Color.GREEN | Color.BLUE
BORDER_COLOR = Color.BLUE | Color.INTENSITY
PLAYER_COLOR = Color.RED | Color.INTENSITY
YELLOW = Color.RED | Color.GREEN | Color.INTENSITY
BRIGHT_GREEN = Color.GREEN | Color.INTENSITY
CYAN = Color.GREEN | Color.BLUE | Color.INTENSITY
MAGENTA = Color.RED | Color.BLUE | Color.INTENSITY
WHITE = Color.RED | Color.GREEN | Color.BLUE | Color.INTENSITY

SHAPE_STYLES: dict[Shape, tuple[str, Color]] = {
    Shape.STAR: ("*", YELLOW),
    Shape.SQUARE: ("#", BRIGHT_GREEN),
    Shape.CIRCLE: ("O", CYAN),
    Shape.DIAMOND: ("<>", MAGENTA),
    Shape.CROSS: ("+", WHITE),
}

PANEL_X = GAME_WIDTH + 2


@dataclass(frozen=True)
class Cell:
    """One character position on screen."""

    char: str = " "
    attributes: Color = DEFAULT_ATTRIBUTES


def cursor_to(x: int, y: int) -> str:
    """Escape sequence moving the terminal cursor to column x, row y (0-based)."""
    return f"\x1b[{y + 1};{x + 1}H"


def _sgr(attributes: Color) -> str:
    code = (
        (1 if attributes & Color.RED else 0)
        + (2 if attributes & Color.GREEN else 0)
        + (4 if attributes & Color.BLUE else 0)
    )
    base = 90 if attributes & Color.INTENSITY else 30
    return f"\x1b[{base + code}m"


class ScreenBuffer:
    """A grid of cells drawn off-screen and written to the terminal in one go."""

    def __init__(self, width: int = GAME_WIDTH + 30, height: int = GAME_HEIGHT + 5) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("buffer dimensions must be positive")
        self.width = width
        self.height = height
        self.clear()

    def clear(self) -> None:
        """Fill every cell with a blank in the default colour."""
        self._rows = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_char(self, x: int, y: int, ch: str, attributes: Color) -> None:
        """Place one character; positions outside the buffer are ignored."""
        if len(ch) != 1:
            raise ValueError("write_char expects a single character")
        if self._inside(x, y):
            self._rows[y][x] = Cell(ch, attributes)

    def write_string(self, x: int, y: int, text: str, attributes: Color) -> None:
        """Place text left to right, one character per cell."""
        for offset, ch in enumerate(text):
            self.write_char(x + offset, y, ch, attributes)

    def cell(self, x: int, y: int) -> Cell:
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the buffer")
        return self._rows[y][x]

    def row_text(self, y: int) -> str:
        """The characters of one row, without colours."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the buffer")
        return "".join(cell.char for cell in self._rows[y])

    def to_ansi(self) -> str:
        """The whole buffer as terminal output with cursor moves and colours."""
        parts: list[str] = []
        for y, row in enumerate(self._rows):
            parts.append(cursor_to(0, y))
            current = None
            for cell in row:
                if cell.attributes != current:
                    current = cell.attributes
                    parts.append(_sgr(current))
                parts.append(cell.char)
        parts.append("\x1b[0m")
        return "".join(parts)


def draw_border(buffer: ScreenBuffer) -> None:
    for x in range(GAME_WIDTH):
        buffer.write_char(x, 0, "=", BORDER_COLOR)
        buffer.write_char(x, GAME_HEIGHT, "=", BORDER_COLOR)
    for y in range(GAME_HEIGHT + 1):
        buffer.write_char(0, y, "|", BORDER_COLOR)
        buffer.write_char(GAME_WIDTH - 1, y, "|", BORDER_COLOR)


def draw_player(buffer: ScreenBuffer, player: Player) -> None:
    buffer.write_char(player.x, player.y, "^", PLAYER_COLOR)
    buffer.write_char(player.x - 1, player.y, "/", PLAYER_COLOR)
    buffer.write_char(player.x + 1, player.y, "\\", PLAYER_COLOR)


def draw_falling_object(buffer: ScreenBuffer, obj: FallingObject) -> None:
    glyph, color = SHAPE_STYLES[obj.shape]
    buffer.write_string(obj.x, obj.y, glyph, color)


def draw_score(buffer: ScreenBuffer, score: int) -> None:
    """Score, controls and the points table in the side panel."""
    buffer.write_string(PANEL_X, 2, f"分数: {score}", DEFAULT_ATTRIBUTES)
    buffer.write_string(PANEL_X, 4, "控制说明:", DEFAULT_ATTRIBUTES)
    buffer.write_string(PANEL_X, 5, "左箭头 - 向左移动", DEFAULT_ATTRIBUTES)
    buffer.write_string(PANEL_X, 6, "右箭头 - 向右移动", DEFAULT_ATTRIBUTES)
    buffer.write_string(PANEL_X, 7, "ESC - 退出游戏", DEFAULT_ATTRIBUTES)
    buffer.write_string(PANEL_X, 9, "形状得分:", DEFAULT_ATTRIBUTES)
    for row, shape in enumerate(Shape, start=10):
        glyph, color = SHAPE_STYLES[shape]
        buffer.write_string(PANEL_X, row, f"{glyph} - {shape.points()}分", color)


def draw_time(buffer: ScreenBuffer, time_remaining: int) -> None:
    if time_remaining > 30:
        color = BRIGHT_GREEN
    elif time_remaining > 10:
        color = YELLOW
    else:
        color = PLAYER_COLOR
    buffer.write_string(PANEL_X, 1, f"剩余时间: {time_remaining} 秒", color)


def render_game(buffer: ScreenBuffer, state) -> None:
    """Redraw the whole play screen from ``state``."""
    buffer.clear()
    draw_border(buffer)
    for obj in state.objects:
        if obj is not None:
            draw_falling_object(buffer, obj)
    draw_player(buffer, state.player)
    draw_score(buffer, state.score)
    draw_time(buffer, state.time_remaining)


def draw_game_over(buffer: ScreenBuffer, score: int) -> None:
    buffer.clear()
    buffer.write_string(GAME_WIDTH // 2 - 5, GAME_HEIGHT // 2 - 2, "游戏结束!", PLAYER_COLOR)
    buffer.write_string(GAME_WIDTH // 2 - 12, GAME_HEIGHT // 2, f"你的最终得分: {score}", WHITE)
    buffer.write_string(
        GAME_WIDTH // 2 - 12, GAME_HEIGHT // 2 + 2, "按任意键退出...", DEFAULT_ATTRIBUTES
    )