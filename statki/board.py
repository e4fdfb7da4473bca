"""Battleship rules: boards, fleet placement and shot resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BOARD_SIZE = 12
NUM_SHIPS = 5
TOTAL_CELLS = 17


class Cell(IntEnum):
    WATER = 0
    SHIP = 1
    HIT = 2
    MISS = 3


class ShotResult(IntEnum):
    MISS = 0
    HIT = 1
    SUNK = 2
    ALREADY = 3
    INVALID = 4
    WIN = 5


class PlaceResult(IntEnum):
    OK = 0
    OUT_OF_BOUNDS = 1
    OVERLAP = 2
    ADJACENT = 3
    ALL_PLACED = 4
    INVALID_INDEX = 5


class PlacementError(ValueError):
    """A ship could not be placed; ``result`` says why."""

    def __init__(self, result: PlaceResult) -> None:
        super().__init__(f"cannot place ship: {result.name.lower()}")
        self.result = result


@dataclass(frozen=True)
class ShipDef:
    name: str
    size: int


_SHIP_DEFS = (
    ShipDef("Carrier", 5),
    ShipDef("Battleship", 4),
    ShipDef("Cruiser", 3),
    ShipDef("Submarine", 3),
    ShipDef("Destroyer", 2),
)


def ship_defs() -> tuple[ShipDef, ...]:
    """The fleet every player places, in placement order."""
    return _SHIP_DEFS


@dataclass
class Ship:
    size: int
    row: int = 0
    col: int = 0
    horizontal: bool = False
    hits: int = 0
    placed: bool = False

    def covers(self, row: int, col: int) -> bool:
        if not self.placed:
            return False
        if self.horizontal:
            return row == self.row and self.col <= col < self.col + self.size
        return col == self.col and self.row <= row < self.row + self.size


class Board:
    """A square grid of cells, all water at the start."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = size
        self._cells = [[Cell.WATER] * size for _ in range(size)]

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: Cell | int) -> None:
        self._check(row, col)
        self._cells[row][col] = Cell(value)


class Player:
    """One side of the game: its own fleet board and its tracking board."""

    def __init__(self) -> None:
        self.clear_ships()

    def clear_ships(self) -> None:
        self.own = Board()
        self.track = Board()
        self.ships = [Ship(size=d.size) for d in _SHIP_DEFS]
        self.ships_placed = 0
        self.ships_alive = 0

    def _touches_ship(self, row: int, col: int) -> bool:
        for nr in range(row - 1, row + 2):
            for nc in range(col - 1, col + 2):
                if (nr, nc) == (row, col) or not self.own.contains(nr, nc):
                    continue
                if self.own.get(nr, nc) == Cell.SHIP:
                    return True
        return False

    def place_ship(self, index: int, row: int, col: int, horizontal: bool) -> Ship:
        """Place ship ``index``; raise PlacementError when the rules forbid it."""
        if not 0 <= index < NUM_SHIPS:
            raise PlacementError(PlaceResult.INVALID_INDEX)
        if self.ships_placed >= NUM_SHIPS:
            raise PlacementError(PlaceResult.ALL_PLACED)

        size = _SHIP_DEFS[index].size
        dr, dc = (0, 1) if horizontal else (1, 0)
        cells = [(row + dr * i, col + dc * i) for i in range(size)]
        if not all(self.own.contains(r, c) for r, c in cells):
            raise PlacementError(PlaceResult.OUT_OF_BOUNDS)

        for r, c in cells:
            if self.own.get(r, c) != Cell.WATER:
                raise PlacementError(PlaceResult.OVERLAP)
            if self._touches_ship(r, c):
                raise PlacementError(PlaceResult.ADJACENT)

        for r, c in cells:
            self.own.set(r, c, Cell.SHIP)

        ship = Ship(size=size, row=row, col=col, horizontal=bool(horizontal),
                    hits=0, placed=True)
        self.ships[index] = ship
        self.ships_placed += 1
        self.ships_alive += 1
        return ship

    def all_placed(self) -> bool:
        return self.ships_placed == NUM_SHIPS

    def ship_at(self, row: int, col: int) -> Ship | None:
        """The placed ship covering a cell, if any."""
        return next((s for s in self.ships if s.covers(row, col)), None)

    def receive_shot(self, row: int, col: int) -> ShotResult:
        """Resolve an opponent's shot against this player's fleet."""
        if not self.own.contains(row, col):
            return ShotResult.INVALID

        cell = self.own.get(row, col)
        if cell in (Cell.HIT, Cell.MISS):
            return ShotResult.ALREADY
        if cell == Cell.WATER:
            self.own.set(row, col, Cell.MISS)
            return ShotResult.MISS

        self.own.set(row, col, Cell.HIT)
        ship = self.ship_at(row, col)
        if ship is None:
            return ShotResult.HIT
        ship.hits += 1
        if ship.hits >= ship.size:
            self.ships_alive -= 1
            return ShotResult.WIN if self.ships_alive == 0 else ShotResult.SUNK
        return ShotResult.HIT

    def record_shot(self, row: int, col: int, result: ShotResult) -> None:
        """Mark the outcome of this player's own shot on the tracking board."""
        if not self.track.contains(row, col):
            return
        if result == ShotResult.MISS:
            self.track.set(row, col, Cell.MISS)
        elif result in (ShotResult.HIT, ShotResult.SUNK, ShotResult.WIN):
            self.track.set(row, col, Cell.HIT)

    def all_sunk(self) -> bool:
        return self.ships_alive == 0 and self.ships_placed == NUM_SHIPS