"""Packaging and coverage data for ordered roofing products.

Coverage is per package (bundle, roll, piece, box). Waste factors are
multipliers keyed by roof complexity.
"""

from __future__ import annotations
import math
from types import MappingProxyType
from typing import Mapping

from roofmetrics.models import CoverageRule, RoofComplexity, NailPattern
from roofmetrics.core.waste import ceil_quantity


def _tiers(simple: float, moderate: float, complex_: float) -> dict[RoofComplexity, float]:
    return {
        RoofComplexity.SIMPLE: simple,
        RoofComplexity.MODERATE: moderate,
        RoofComplexity.COMPLEX: complex_,
    }


COVERAGE_RULES: Mapping[str, CoverageRule] = MappingProxyType({
    "architectural_shingles": CoverageRule(
        name="Architectural Shingles",
        coverage=100 / 3, coverage_unit="sq ft per bundle", package_unit="bundle",
        waste_factor=_tiers(1.07, 1.12, 1.17),
    ),
    "starter_strip": CoverageRule(
        name="Starter Strip Shingles",
        coverage=100, coverage_unit="linear ft per bundle", package_unit="bundle",
        waste_factor=_tiers(1.05, 1.08, 1.10),
    ),
    "hip_ridge_cap": CoverageRule(
        name="Hip & Ridge Cap",
        coverage=25, coverage_unit="linear ft per bundle", package_unit="bundle",
        waste_factor=_tiers(1.05, 1.08, 1.10),
    ),
    "deck_underlayment": CoverageRule(
        name="Synthetic Underlayment",
        coverage=1000, coverage_unit="sq ft per roll", package_unit="roll",
        waste_factor=_tiers(1.05, 1.08, 1.10),
    ),
    "ice_water_underlayment": CoverageRule(
        name="Ice & Water Underlayment",
        coverage=200, coverage_unit="sq ft per roll", package_unit="roll",
        waste_factor=_tiers(1.10, 1.15, 1.20),
    ),
    "drip_edge": CoverageRule(
        name="Drip Edge",
        coverage=10, coverage_unit="ft per piece", package_unit="piece",
        waste_factor=_tiers(1.05, 1.08, 1.10),
    ),
    "valley_metal": CoverageRule(
        name="Valley Metal",
        coverage=10, coverage_unit="ft per piece", package_unit="piece",
        waste_factor=_tiers(1.10, 1.15, 1.20),
    ),
    "roofing_nails": CoverageRule(
        name="Roofing Nails (Coil)",
        coverage=7200, coverage_unit="nails per box", package_unit="box",
        waste_factor=_tiers(1.05, 1.05, 1.05),
    ),
})

NAILS_PER_SQUARE: Mapping[NailPattern, int] = MappingProxyType({
    NailPattern.STANDARD_4_NAIL: 320,
    NailPattern.HURRICANE_6_NAIL: 480,
    NailPattern.HIGH_WIND_8_NAIL: 640,
})

# Width of ice & water membrane laid along eaves and valleys, feet
ICE_WATER_WIDTH_FT = 3


def coverage_rule(key: str) -> CoverageRule:
    return COVERAGE_RULES[key]


def packages_needed(amount: float, rule: CoverageRule) -> int:
    """Whole packages covering `amount` (already waste-adjusted)."""
    return ceil_quantity(amount / rule.coverage)


def nails_needed(squares: float, pattern: NailPattern) -> tuple[int, int]:
    """(total nails, coil boxes) for a number of squares."""
    rule = COVERAGE_RULES["roofing_nails"]
    waste = rule.waste_for(RoofComplexity.MODERATE)
    total = ceil_quantity(squares * NAILS_PER_SQUARE[pattern] * waste)
    return total, math.ceil(total / rule.coverage)
