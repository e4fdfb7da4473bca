import pytest

from statki.display import (
    BOARD_SIZE,
    CELL_WIDTH,
    GRID_LINE_LENGTH,
    LCD_MAX_X,
    LCD_MAX_Y,
    START_X,
    START_Y,
    Canvas,
    Color,
    Direction,
    draw_gameboard,
    draw_line,
    draw_ship,
    fill_rectangle,
    write_char,
)
from statki.font import Font, glyph


def painted(canvas, color):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) == color
    }


@pytest.mark.parametrize(
    "color, value",
    [(Color.RED, 0xF800), (Color.GREEN, 0x07E0), (Color.BLUE, 0x001F)],
)
def test_colour_constants_match_rgb565_values(color, value):
    canvas = Canvas(2, 2)
    canvas.fill(color)
    assert canvas.get_pixel(1, 1) == value


def test_canvas_defaults_to_screen_size_and_white():
    canvas = Canvas()
    assert (canvas.width, canvas.height) == (LCD_MAX_X, LCD_MAX_Y)
    assert canvas.get_pixel(0, 0) == Color.WHITE
    assert canvas.get_pixel(LCD_MAX_X - 1, LCD_MAX_Y - 1) == Color.WHITE


def test_set_and_get_pixel_round_trip():
    canvas = Canvas(10, 10)
    canvas.set_pixel(3, 7, Color.GINGER)
    assert canvas.get_pixel(3, 7) == Color.GINGER
    assert canvas.get_pixel(7, 3) == Color.WHITE


def test_pixel_access_off_screen_raises():
    canvas = Canvas(10, 10)
    with pytest.raises(IndexError):
        canvas.get_pixel(10, 0)
    with pytest.raises(IndexError):
        canvas.set_pixel(-1, 0, Color.BLACK)


def test_invalid_colour_raises():
    canvas = Canvas(4, 4)
    with pytest.raises(ValueError):
        canvas.set_pixel(0, 0, 0x10000)
    with pytest.raises(ValueError):
        canvas.fill(-1)


def test_fill_paints_every_pixel():
    canvas = Canvas(6, 5)
    canvas.fill(Color.CYAN)
    assert len(painted(canvas, Color.CYAN)) == 6 * 5


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, {(20 + i, 10) for i in range(5)}),
        (Direction.DOWN, {(20 - i, 10) for i in range(5)}),
        (Direction.RIGHT, {(20, 10 + i) for i in range(5)}),
        (Direction.LEFT, {(20, 10 - i) for i in range(5)}),
    ],
)
def test_draw_line_directions(direction, expected):
    canvas = Canvas(40, 40)
    draw_line(canvas, 20, 10, 5, direction, Color.RED)
    assert painted(canvas, Color.RED) == expected


def test_draw_line_clips_at_screen_edge():
    canvas = Canvas(10, 10)
    draw_line(canvas, 2, 5, 6, Direction.DOWN, Color.RED)
    assert painted(canvas, Color.RED) == {(2, 5), (1, 5), (0, 5)}


def test_fill_rectangle_covers_cell_interior():
    canvas = Canvas(100, 100)
    fill_rectangle(canvas, 30, 45, Color.BLUE)
    pixels = painted(canvas, Color.BLUE)
    assert {x for x, _ in pixels} == set(range(29, 30 + CELL_WIDTH))
    assert {y for _, y in pixels} == set(range(46, 45 + CELL_WIDTH))
    assert len(pixels) == (CELL_WIDTH + 1) * (CELL_WIDTH - 1)


@pytest.mark.parametrize(
    "direction, corner",
    [
        (Direction.UP, (90 + 2 * CELL_WIDTH, 90)),
        (Direction.DOWN, (90 - 2 * CELL_WIDTH, 90)),
        (Direction.RIGHT, (90, 90 + 2 * CELL_WIDTH)),
        (Direction.LEFT, (90, 90 - 2 * CELL_WIDTH)),
    ],
)
def test_draw_ship_matches_cell_fills(direction, corner):
    ship_canvas = Canvas(200, 200)
    draw_ship(ship_canvas, 90, 90, 3, direction, Color.BLUE)

    cells_canvas = Canvas(200, 200)
    fill_rectangle(cells_canvas, 90, 90, Color.BLUE)
    fill_rectangle(cells_canvas, *corner, Color.BLUE)
    last = painted(cells_canvas, Color.BLUE)

    ship_pixels = painted(ship_canvas, Color.BLUE)
    assert last <= ship_pixels
    assert ship_canvas.get_pixel(corner[0] + 5, corner[1] + 5) == Color.BLUE


def test_draw_ship_of_size_zero_draws_nothing():
    canvas = Canvas(50, 50)
    draw_ship(canvas, 20, 20, 0, Direction.UP, Color.BLUE)
    assert painted(canvas, Color.BLUE) == set()


def test_write_char_paints_one_pixel_per_glyph_bit():
    canvas = Canvas(100, 100)
    write_char(canvas, 20, 30, "X", Color.RED)
    bits = sum(bin(row).count("1") for row in glyph(Font.SYSTEM, "X"))
    pixels = painted(canvas, Color.RED)
    assert len(pixels) == bits
    assert all(30 <= x < 46 and 20 <= y < 28 for x, y in pixels)


def test_write_char_is_rotated():
    canvas = Canvas(100, 100)
    write_char(canvas, 20, 30, "_", Color.RED)
    rows = glyph(Font.SYSTEM, "_")
    underline_row = next(i for i, row in enumerate(rows) if row)
    pixels = painted(canvas, Color.RED)
    assert {x for x, _ in pixels} == {30 + underline_row}
    assert {y for _, y in pixels} == set(range(20, 28))


def test_write_char_scale_multiplies_pixels():
    canvas = Canvas(100, 100)
    write_char(canvas, 10, 10, "O", Color.GREEN, 2)
    bits = sum(bin(row).count("1") for row in glyph(Font.SYSTEM, "O"))
    assert len(painted(canvas, Color.GREEN)) == 2 * bits


def test_write_char_rejects_unprintable_and_bad_scale():
    canvas = Canvas(50, 50)
    with pytest.raises(ValueError):
        write_char(canvas, 0, 0, "\n", Color.RED)
    with pytest.raises(ValueError):
        write_char(canvas, 0, 0, "A", Color.RED, 0)