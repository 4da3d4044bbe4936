"""Shingles — ordered by area, squares and bundles."""

from __future__ import annotations

from roofmetrics.rules.base import MaterialRule
from roofmetrics.models import RoofMetrics, AreaRequirement
from roofmetrics.core.waste import (
    ceil_with_waste, shingle_squares, BUNDLES_PER_SQUARE,
)


class ShingleRule(MaterialRule):
    """Field shingles covering the total roof area."""

    priority = 5  # Main line item, listed first
    source = "Total Roof Area"

    def get_id(self) -> str:
        return "shingles"

    def get_name(self) -> str:
        return "Shingles"

    def estimate(self, metrics: RoofMetrics, waste_percent: float) -> AreaRequirement:
        area = metrics.total_area
        squares = shingle_squares(area, waste_percent)
        return AreaRequirement(
            source=self.source,
            raw_area=area,
            with_waste=ceil_with_waste(area, waste_percent),
            squares=squares,
            bundles=squares * BUNDLES_PER_SQUARE,
        )
