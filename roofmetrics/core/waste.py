"""Waste-factor arithmetic for material ordering.

Waste is applied before the final rounding step and the result is
rounded up exactly once.
"""

from __future__ import annotations
import math
from typing import Iterable

from roofmetrics.models import WasteResult, WasteTableRow
from roofmetrics.core.units import SQUARE_FEET_PER_SQUARE


BUNDLES_PER_SQUARE = 3
REPORT_WASTE_PERCENTS = (0, 10, 15, 20)

# Digits kept before ceiling, drops float residue like 1100.0000000000002
_CEIL_PRECISION = 9


def waste_multiplier(waste_percent: float) -> float:
    return 1 + waste_percent / 100


def apply_waste(raw: float, waste_percent: float) -> float:
    return raw * (100 + waste_percent) / 100


def ceil_quantity(value: float) -> int:
    """Round an order quantity up to a whole unit."""
    return math.ceil(round(value, _CEIL_PRECISION))


def ceil_with_waste(raw: float, waste_percent: float) -> int:
    """Waste-adjusted order quantity, never below the raw quantity."""
    return max(ceil_quantity(apply_waste(raw, waste_percent)), math.ceil(raw))


def with_waste(raw: float, waste_percent: float) -> WasteResult:
    adjusted = apply_waste(raw, waste_percent)
    return WasteResult(
        raw=raw,
        with_waste=ceil_with_waste(raw, waste_percent),
        waste_amount=ceil_quantity(adjusted - raw),
    )


def shingle_squares(area_ft2: float, waste_percent: float) -> int:
    return max(
        ceil_quantity(apply_waste(area_ft2, waste_percent) / SQUARE_FEET_PER_SQUARE),
        math.ceil(area_ft2 / SQUARE_FEET_PER_SQUARE),
    )


def shingle_bundles(area_ft2: float, waste_percent: float) -> int:
    return shingle_squares(area_ft2, waste_percent) * BUNDLES_PER_SQUARE


def waste_table(
    area_ft2: float,
    waste_percents: Iterable[float] = REPORT_WASTE_PERCENTS,
) -> list[WasteTableRow]:
    """Overage scenarios for a report: area, squares and bundles per waste %."""
    rows: list[WasteTableRow] = []
    for pct in waste_percents:
        total = apply_waste(area_ft2, pct)
        squares = total / SQUARE_FEET_PER_SQUARE
        rows.append(WasteTableRow(
            waste_percent=pct,
            total_area=round(total),
            squares=round(squares, 2),
            bundles=ceil_quantity(squares * BUNDLES_PER_SQUARE),
        ))
    return rows
