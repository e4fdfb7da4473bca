"""Game-flow helpers: touch filtering, ship previews, serial commands and buttons."""

from __future__ import annotations

from enum import Enum, auto

from statki.calibration import CalibrationMatrix
from statki.display import BOARD_SIZE, CELL_WIDTH, START_X, START_Y, Direction

TOUCH_MIN = 10
TOUCH_MAX_X = 2800
TOUCH_MAX_Y = 3500

# Vertical offset between the calibrated screen space and the drawn grid.
TOUCH_Y_OFFSET = 45

BOUND_X = START_X // CELL_WIDTH
BOUND_Y = START_Y // CELL_WIDTH

COMMAND_CAPACITY = 15
DEBOUNCE_MS = 200
KEY_ROTATE = 0x01
KEY_CONFIRM = 0x02

ROTATION_ORDER = (Direction.DOWN, Direction.LEFT, Direction.UP, Direction.RIGHT)


class State(Enum):
    CAL = auto()
    START = auto()
    SET = auto()
    MY_TURN = auto()
    OPPONENT_TURN = auto()
    FINISH = auto()


def inside_touch_area(x: int, y: int) -> bool:
    """Whether a raw touch reading lies in the panel's usable range."""
    return TOUCH_MIN < x < TOUCH_MAX_X and TOUCH_MIN < y < TOUCH_MAX_Y


def _preview_cells(draw_x: int, draw_y: int, size: int,
                   direction: Direction) -> list[tuple[int, int]]:
    dx, dy = {
        Direction.UP: (1, 0),
        Direction.DOWN: (-1, 0),
        Direction.RIGHT: (0, 1),
        Direction.LEFT: (0, -1),
    }[Direction(direction)]
    return [(draw_x + dx * s, draw_y + dy * s) for s in range(size)]


def anchor_to_place(draw_x: int, draw_y: int, size: int,
                    direction: Direction) -> tuple[int, int, bool]:
    """Turn a drawn preview anchor into (row, col, horizontal) board coordinates."""
    direction = Direction(direction)
    if direction is Direction.UP:
        return draw_y - BOUND_Y, draw_x - BOUND_X, True
    if direction is Direction.DOWN:
        return draw_y - BOUND_Y, draw_x - (size - 1) - BOUND_X, True
    if direction is Direction.RIGHT:
        return draw_y - BOUND_Y, draw_x - BOUND_X, False
    return draw_y - (size - 1) - BOUND_Y, draw_x - BOUND_X, False


def ship_fits_on_board(draw_x: int, draw_y: int, size: int,
                       direction: Direction) -> bool:
    """Whether every cell of a preview lies on the drawn grid."""
    x_max = BOUND_X + BOARD_SIZE - 1
    y_max = BOUND_Y + BOARD_SIZE - 1
    return all(BOUND_X <= cx <= x_max and BOUND_Y <= cy <= y_max
               for cx, cy in _preview_cells(draw_x, draw_y, size, direction))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def touch_to_cell(matrix: CalibrationMatrix, x: int, y: int) -> tuple[int, int] | None:
    """Map a touch reading to a screen cell (draw_x, draw_y), or None off the grid."""
    point = matrix.transform(x, y)
    draw_x = _trunc_div(point.x, CELL_WIDTH)
    draw_y = _trunc_div(point.y + TOUCH_Y_OFFSET, CELL_WIDTH)
    if not BOUND_X <= draw_x <= BOUND_X + BOARD_SIZE:
        return None
    if not BOUND_Y <= draw_y <= BOUND_Y + BOARD_SIZE:
        return None
    return draw_x, draw_y


class CommandReader:
    """Assembles line-terminated commands from single received characters."""

    def __init__(self) -> None:
        self._buffer: list[str] = []

    def feed(self, char: str) -> str | None:
        """Take one character; return a finished command when a line ends."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        if char in "\r\n":
            if not self._buffer:
                return None
            command = "".join(self._buffer)
            self._buffer.clear()
            return command
        if len(self._buffer) < COMMAND_CAPACITY:
            self._buffer.append(char)
        return None


class ButtonHandler:
    """Millisecond tick handler for the rotate and confirm keys."""

    def __init__(self) -> None:
        self.ms_ticks = 0
        self.debounce_timer = 0
        self.direction = Direction.RIGHT
        self.confirm_ship_pending = False
        self.confirm_shot_pending = False
        self._rotation = 0

    def _debounced(self) -> bool:
        return self.ms_ticks >= self.debounce_timer + DEBOUNCE_MS

    def tick(self, buttons: int, state: State) -> None:
        """Advance one millisecond with the given button bit mask pressed."""
        self.ms_ticks += 1

        if buttons & KEY_ROTATE and self._debounced():
            if state is State.SET:
                self.direction = ROTATION_ORDER[self._rotation]
                self._rotation = (self._rotation + 1) % len(ROTATION_ORDER)
            self.debounce_timer = self.ms_ticks

        if buttons & KEY_CONFIRM and self._debounced():
            if state is State.SET:
                self.confirm_ship_pending = True
            elif state is State.MY_TURN:
                self.confirm_shot_pending = True
            self.debounce_timer = self.ms_ticks