import pytest

from roofmetrics.core.waste import (
    apply_waste, waste_multiplier, with_waste, shingle_squares,
    shingle_bundles, waste_table, ceil_quantity,
)


def test_apply_waste():
    assert apply_waste(1000, 10) == 1100
    assert apply_waste(500, 15) == pytest.approx(575)
    assert apply_waste(123.4, 0) == pytest.approx(123.4)


def test_waste_multiplier():
    assert waste_multiplier(10) == pytest.approx(1.10)
    assert waste_multiplier(0) == 1


def test_with_waste():
    result = with_waste(1000, 10)
    assert result.raw == 1000
    assert result.with_waste == 1100
    assert result.waste_amount == 100


def test_ceil_quantity_ignores_float_residue():
    assert ceil_quantity(1000 * 1.1) == 1100
    assert ceil_quantity(1100.2) == 1101


def test_shingle_squares_and_bundles():
    assert shingle_squares(1000, 10) == 11
    assert shingle_bundles(1000, 10) == 33
    assert shingle_bundles(1000, 0) == 30


def test_waste_table_rows():
    rows = waste_table(1000)
    assert [r.waste_percent for r in rows] == [0, 10, 15, 20]
    assert rows[1].total_area == 1100
    assert rows[1].squares == 11.0
    assert rows[1].bundles == 33
    assert rows[2].squares == 11.5
    assert rows[2].bundles == 35  # ceil(11.5 * 3)


def test_waste_table_custom_percents():
    rows = waste_table(200, [5])
    assert len(rows) == 1
    assert rows[0].total_area == 210


def test_zero_waste_never_orders_less_than_raw():
    result = with_waste(100.0000000004, 0)
    assert result.with_waste == 101
    assert result.with_waste >= result.raw


def test_shingle_squares_cover_raw_area():
    assert shingle_squares(1000.0000000004, 0) == 11
    assert shingle_squares(1000, 0) == 10
