import pytest

from statki.calibration import CalibrationMatrix, Point, calibrate, sum_touch


def test_sum_touch():
    assert sum_touch([1, 2, 3, 4, 5], [10, 20, 30, 40, 50]) == (15, 150)


def test_sum_touch_requires_five_samples():
    with pytest.raises(ValueError):
        sum_touch([1, 2, 3, 4], [1, 2, 3, 4, 5])
    with pytest.raises(ValueError):
        sum_touch([1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6])


def test_identity_transform():
    matrix = CalibrationMatrix(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)
    assert matrix.transform(7, 9) == Point(7, 9)


def test_transform_truncates_toward_zero():
    matrix = CalibrationMatrix(1.0, 0.0, 0.9, 0.0, 1.0, -0.5)
    assert matrix.transform(2, 0) == Point(2, 0)


def test_calibrate_maps_touch_points_onto_screen():
    touch = [Point(0, 0), Point(10, 0), Point(0, 10)]
    lcd = [Point(5, 7), Point(25, 7), Point(5, 27)]
    matrix = calibrate(lcd, touch)
    assert [matrix.transform(p.x, p.y) for p in touch] == lcd
    assert matrix.b == 0.0
    assert matrix.d == 0.0


def test_calibrate_rejects_collinear_points():
    touch = [Point(0, 0), Point(1, 1), Point(2, 2)]
    lcd = [Point(70, 30), Point(120, 150), Point(250, 80)]
    with pytest.raises(ValueError):
        calibrate(lcd, touch)


def test_calibrate_requires_three_pairs():
    with pytest.raises(ValueError):
        calibrate([Point(0, 0), Point(1, 0)], [Point(0, 0), Point(1, 0)])