"""Three-point touch panel calibration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

SAMPLE_COUNT = 5


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class CalibrationMatrix:
    """Affine map from touch-panel readings to screen coordinates."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def transform(self, tx: int, ty: int) -> Point:
        """Map a touch reading to a screen point, truncating toward zero."""
        return Point(
            int(self.a * tx + self.b * ty + self.c),
            int(self.d * tx + self.e * ty + self.f),
        )


def sum_touch(xs: Sequence[int], ys: Sequence[int]) -> tuple[int, int]:
    """Add up five touch samples on each axis."""
    if len(xs) != SAMPLE_COUNT or len(ys) != SAMPLE_COUNT:
        raise ValueError(f"expected {SAMPLE_COUNT} samples on each axis")
    return sum(xs), sum(ys)


def calibrate(lcd: Sequence[Point], touch: Sequence[Point]) -> CalibrationMatrix:
    """Solve the matrix from three screen points and their touch readings."""
    if len(lcd) != 3 or len(touch) != 3:
        raise ValueError("calibration needs exactly three point pairs")
    (x1, y1), (x2, y2), (x3, y3) = touch
    (X1, Y1), (X2, Y2), (X3, Y3) = lcd

    w = x1 * y2 + y1 * x3 + x2 * y3 - y2 * x3 - x1 * y3 - x2 * y1
    if w == 0:
        raise ValueError("touch points are collinear")

    wa = X1 * y1 + y1 * X3 + X2 * y3 - y2 * X3 - X1 * y3 - X2 * y1
    wb = x1 * X2 + X1 * x3 + x2 * X3 - X2 * x3 - x1 * X3 - x2 * X1
    wc = (x1 * y2 * X3 + y1 * X2 * x3 + X1 * x2 * y3
          - X1 * y2 * x3 - y3 * X2 * x1 - X3 * x2 * y1)
    wd = Y1 * y1 + y1 * Y3 + Y2 * y3 - y2 * Y3 - Y1 * y3 - Y2 * y1
    we = x1 * Y2 + Y1 * x3 + x2 * Y3 - Y2 * x3 - x1 * Y3 - x2 * Y1
    wf = (x1 * y2 * Y3 + y1 * Y2 * x3 + Y1 * x2 * y3
          - Y1 * y2 * x3 - y3 * Y2 * x1 - Y3 * x2 * y1)

    return CalibrationMatrix(wa / w, wb / w, wc / w, wd / w, we / w, wf / w)