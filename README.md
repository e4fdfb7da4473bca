# statki

A two-player Battleship game on a 12 × 12 board, together with the pieces
needed to drive it from a resistive touch screen: three-point touch
calibration, two 8×16 bitmap fonts and a small in-memory RGB565 canvas
renderer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Game rules (`statki.board`)

The fleet, as returned by `ship_defs()`, is five ships: Carrier (5),
Battleship (4), Cruiser (3), Submarine (3) and Destroyer (2). Ships must lie
fully on the board and may not overlap or touch, not even diagonally.
A refused placement raises `PlacementError`, whose `result` attribute is a
`PlaceResult` (`OUT_OF_BOUNDS`, `OVERLAP`, `ADJACENT`, `ALL_PLACED` or
`INVALID_INDEX`).

```python
from statki.board import Player, ShotResult, PlacementError

player = Player()
player.place_ship(0, row=0, col=0, horizontal=True)   # Carrier along row 0

try:
    player.place_ship(1, row=1, col=0, horizontal=True)
except PlacementError as err:
    print(err.result.name)       # ADJACENT

result = player.receive_shot(0, 0)
assert result is ShotResult.HIT
```

`Player.receive_shot` returns a `ShotResult`: `MISS`, `HIT`, `SUNK`, `WIN`
when the last ship goes down, `ALREADY` for a cell shot before, and
`INVALID` for a cell off the board. `Player.record_shot` notes the outcome
of your own shots on the `track` board. `Player.ship_at` finds the ship
covering a cell, `Player.clear_ships` starts over, and `Player.all_placed`
and `Player.all_sunk` report the state of the fleet. Each `Board` is a grid
of `Cell` values read and written with `get` and `set`.

## Touch calibration (`statki.calibration`)

```python
from statki.calibration import Point, calibrate

lcd = [Point(70, 30), Point(120, 150), Point(250, 80)]
touch = [Point(900, 600), Point(1500, 2000), Point(3000, 1200)]
matrix = calibrate(lcd, touch)
x, y = matrix.transform(1500, 2000)
```

`calibrate` raises `ValueError` unless given exactly three point pairs, or
when the touch points are collinear. `CalibrationMatrix.transform` truncates
toward zero. `sum_touch` adds up five samples on each axis.

## Fonts (`statki.font`)

`glyph(font, char)` returns the 16 row bytes of a printable ASCII character
(codes 0x20–0x7E) in `Font.MS_GOTHIC` or `Font.SYSTEM`; anything else raises
`ValueError`.

## Drawing (`statki.display`)

`Canvas` is a 240 × 320 frame of RGB565 colours with `set_pixel`,
`get_pixel` and `fill`; `set_pixel` and `get_pixel` raise `IndexError` off
the screen. `draw_gameboard`, `draw_ship`, `fill_rectangle`, `draw_line`
and `write_char` draw onto it, silently dropping pixels that fall off the
screen. `write_char` uses the system font and swaps the axes, for a panel
mounted rotated. `Color` names the predefined colours and `Direction` the
four drawing directions.

## Game flow helpers (`statki.game`)

- `State` lists the game phases.
- `inside_touch_area` filters raw touch readings.
- `touch_to_cell` maps a reading through a `CalibrationMatrix` to a screen
  cell `(draw_x, draw_y)`, or `None` off the grid.
- `ship_fits_on_board` checks that a ship preview lies on the grid, and
  `anchor_to_place` turns a preview anchor into `(row, col, horizontal)`
  for `Player.place_ship`.
- `CommandReader.feed` assembles line-terminated serial commands one
  character at a time (at most 15 characters are kept).
- `ButtonHandler.tick` runs once per millisecond with the pressed-button
  mask, debouncing the rotate and confirm keys over 200 ms.

## What this package does not do

It has no command to run and no game loop: nothing here talks to a touch
panel, a screen or a serial line, and there is no exchange of shots between
two players. The modules above are the building blocks; wiring them to
real input and output is left to the application.