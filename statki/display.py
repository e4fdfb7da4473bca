"""Drawing the game board, ships and text on a 240x320 RGB565 screen."""

from __future__ import annotations

from enum import IntEnum

from statki.font import GLYPH_HEIGHT, GLYPH_WIDTH, Font, glyph

START_X = 30
START_Y = 75
CELL_WIDTH = 15
BOARD_SIZE = 12
GRID_LINE_LENGTH = 180

LCD_MAX_X = 240
LCD_MAX_Y = 320


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Color(IntEnum):
    """Predefined RGB565 colours."""

    WHITE = 0xFFFF
    BLACK = 0x0000
    GREY = 0xA534
    BLUE = 0x001F
    BLUE_SEA = 0x05BF
    PASTEL_BLUE = 0x051F
    VIOLET = 0xB81F
    MAGENTA = 0xF81F
    RED = 0xF800
    GINGER = 0xFAE0
    GREEN = 0x07E0
    CYAN = 0x7FFF
    YELLOW = 0xFFE0


def _check_color(color: int) -> int:
    value = int(color)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"colour {value:#x} is not a 16-bit RGB565 value")
    return value


class Canvas:
    """An in-memory frame buffer addressed by screen cursor coordinates."""

    def __init__(self, width: int = LCD_MAX_X, height: int = LCD_MAX_Y,
                 background: int = Color.WHITE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        fill_value = _check_color(background)
        self._pixels = [[fill_value] * width for _ in range(height)]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is off the screen")

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self._check(x, y)
        self._pixels[y][x] = _check_color(color)

    def get_pixel(self, x: int, y: int) -> int:
        self._check(x, y)
        return self._pixels[y][x]

    def fill(self, color: int) -> None:
        value = _check_color(color)
        for row in self._pixels:
            row[:] = [value] * self.width

    def _plot(self, x: int, y: int, color: int) -> None:
        # Writes that fall outside the panel are dropped.
        if self.contains(x, y):
            self._pixels[y][x] = color


def draw_line(canvas: Canvas, x: int, y: int, length: int,
              direction: Direction, color: int) -> None:
    """Draw a one-pixel line of ``length`` pixels starting at (x, y)."""
    value = _check_color(color)
    direction = Direction(direction)
    if direction is Direction.UP:
        points = ((x + i, y) for i in range(length))
    elif direction is Direction.DOWN:
        points = ((x - i, y) for i in range(length))
    elif direction is Direction.RIGHT:
        points = ((x, y + i) for i in range(length))
    else:
        points = ((x, y - i) for i in range(length))
    for px, py in points:
        canvas._plot(px, py, value)


def draw_gameboard(canvas: Canvas) -> None:
    """Draw the grid lines of the board in black."""
    for i in range(BOARD_SIZE + 1):
        draw_line(canvas, START_X, START_Y + CELL_WIDTH * i,
                  GRID_LINE_LENGTH, Direction.UP, Color.BLACK)
    for j in range(BOARD_SIZE + 1):
        draw_line(canvas, START_X + CELL_WIDTH * j, START_Y,
                  GRID_LINE_LENGTH, Direction.RIGHT, Color.BLACK)


def fill_rectangle(canvas: Canvas, x: int, y: int, color: int) -> None:
    """Paint the interior of the cell whose corner is at (x, y)."""
    value = _check_color(color)
    for row in range(y + 1, y + CELL_WIDTH):
        for col in range(x + CELL_WIDTH - 1, x - 2, -1):
            canvas._plot(col, row, value)


def draw_ship(canvas: Canvas, x: int, y: int, size: int,
              direction: Direction, color: int) -> None:
    """Fill ``size`` consecutive cells from (x, y) in ``direction``."""
    direction = Direction(direction)
    steps = {
        Direction.UP: (CELL_WIDTH, 0),
        Direction.DOWN: (-CELL_WIDTH, 0),
        Direction.RIGHT: (0, CELL_WIDTH),
        Direction.LEFT: (0, -CELL_WIDTH),
    }
    dx, dy = steps[direction]
    for i in range(size):
        fill_rectangle(canvas, x + dx * i, y + dy * i, color)


def write_char(canvas: Canvas, x: int, y: int, char: str, color: int,
               scale: int = 1) -> None:
    """Draw a character in the system font; the screen is mounted rotated."""
    value = _check_color(color)
    if scale < 1:
        raise ValueError("scale must be at least 1")
    rows = glyph(Font.SYSTEM, char)
    for i in range(GLYPH_HEIGHT):
        bits = rows[i]
        for j in range(GLYPH_WIDTH):
            if bits & (1 << j):
                for k in range(scale):
                    canvas._plot(y + i * scale + k, x + j * scale + k, value)