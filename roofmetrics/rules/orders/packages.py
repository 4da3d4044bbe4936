"""Order rules — convert roof metrics into purchasable packages.

Each rule takes a length or area, applies the product's complexity
waste factor and divides by the per-package coverage, rounding up.
"""

from __future__ import annotations
from abc import abstractmethod

from roofmetrics.rules.base import OrderRule
from roofmetrics.models import RoofMetrics, OrderParams, OrderLineItem, CoverageRule
from roofmetrics.core.coverage import (
    coverage_rule, packages_needed, nails_needed, NAILS_PER_SQUARE, ICE_WATER_WIDTH_FT,
)
from roofmetrics.core.units import SQUARE_FEET_PER_SQUARE
from roofmetrics.core.waste import ceil_quantity, BUNDLES_PER_SQUARE


class CoveragePackageRule(OrderRule):
    """Waste-adjusted amount divided by package coverage."""

    coverage_key: str = ""
    amount_unit: str = "ft"

    @property
    def coverage(self) -> CoverageRule:
        return coverage_rule(self.coverage_key)

    def get_name(self) -> str:
        return self.coverage.name

    @abstractmethod
    def raw_amount(self, metrics: RoofMetrics) -> float:
        """Length or area to cover before waste."""
        ...

    def order(
        self, metrics: RoofMetrics, squares: float, params: OrderParams,
    ) -> OrderLineItem:
        rule = self.coverage
        amount = self.raw_amount(metrics) * rule.waste_for(params.complexity)
        return OrderLineItem(
            material_id=self.get_id(),
            product_name=rule.name,
            quantity=packages_needed(amount, rule),
            unit=f"{rule.package_unit}s",
            coverage=rule.coverage,
            coverage_unit=rule.coverage_unit,
            calculation=f"{amount:.0f} {self.amount_unit} / {rule.coverage:g} per {rule.package_unit}",
        )


class ShingleBundleRule(OrderRule):
    """Shingle bundles: three per square of waste-adjusted area."""

    priority = 5

    def get_id(self) -> str:
        return "shingle_bundles"

    def get_name(self) -> str:
        return coverage_rule("architectural_shingles").name

    def order(
        self, metrics: RoofMetrics, squares: float, params: OrderParams,
    ) -> OrderLineItem:
        rule = coverage_rule("architectural_shingles")
        return OrderLineItem(
            material_id=self.get_id(),
            product_name=rule.name,
            quantity=ceil_quantity(squares * BUNDLES_PER_SQUARE),
            unit="bundles",
            coverage=rule.coverage,
            coverage_unit=rule.coverage_unit,
            calculation=f"{squares:.1f} squares x {BUNDLES_PER_SQUARE} bundles/sq",
        )


class StarterBundleRule(CoveragePackageRule):
    """Starter runs along eaves and rakes."""

    priority = 10
    coverage_key = "starter_strip"

    def get_id(self) -> str:
        return "starter_bundles"

    def raw_amount(self, metrics: RoofMetrics) -> float:
        return metrics.eaves + metrics.rakes


class HipCapBundleRule(CoveragePackageRule):
    priority = 20
    coverage_key = "hip_ridge_cap"

    def get_id(self) -> str:
        return "hip_cap_bundles"

    def get_name(self) -> str:
        return "Hip Cap Shingles"

    def raw_amount(self, metrics: RoofMetrics) -> float:
        return metrics.hips


class RidgeCapBundleRule(CoveragePackageRule):
    priority = 30
    coverage_key = "hip_ridge_cap"

    def get_id(self) -> str:
        return "ridge_cap_bundles"

    def get_name(self) -> str:
        return "Ridge Cap Shingles"

    def raw_amount(self, metrics: RoofMetrics) -> float:
        return metrics.ridges


class IceWaterRollRule(CoveragePackageRule):
    """Membrane strip along eaves and valleys."""

    priority = 40
    coverage_key = "ice_water_underlayment"
    amount_unit = "sq ft"

    def get_id(self) -> str:
        return "ice_water_rolls"

    def raw_amount(self, metrics: RoofMetrics) -> float:
        return (metrics.eaves + metrics.valleys) * ICE_WATER_WIDTH_FT


class DeckUnderlaymentRollRule(OrderRule):
    """Full-deck underlayment sized from the waste-adjusted squares."""

    priority = 50

    def get_id(self) -> str:
        return "underlayment_rolls"

    def get_name(self) -> str:
        return coverage_rule("deck_underlayment").name

    def order(
        self, metrics: RoofMetrics, squares: float, params: OrderParams,
    ) -> OrderLineItem:
        rule = coverage_rule("deck_underlayment")
        area = squares * SQUARE_FEET_PER_SQUARE
        return OrderLineItem(
            material_id=self.get_id(),
            product_name=rule.name,
            quantity=packages_needed(area, rule),
            unit="rolls",
            coverage=rule.coverage,
            coverage_unit=rule.coverage_unit,
            calculation=f"{squares:.1f} squares / {rule.coverage / SQUARE_FEET_PER_SQUARE:g} sq per roll",
        )


class DripEdgePieceRule(CoveragePackageRule):
    priority = 60
    coverage_key = "drip_edge"

    def get_id(self) -> str:
        return "drip_edge_pieces"

    def raw_amount(self, metrics: RoofMetrics) -> float:
        return metrics.eaves + metrics.rakes


class ValleyMetalPieceRule(CoveragePackageRule):
    """Only ordered when the roof has valleys."""

    priority = 70
    coverage_key = "valley_metal"

    def get_id(self) -> str:
        return "valley_metal_pieces"

    def applies(self, metrics: RoofMetrics) -> bool:
        return metrics.valleys > 0

    def raw_amount(self, metrics: RoofMetrics) -> float:
        return metrics.valleys


class NailBoxRule(OrderRule):
    priority = 80

    def get_id(self) -> str:
        return "nail_boxes"

    def get_name(self) -> str:
        return coverage_rule("roofing_nails").name

    def order(
        self, metrics: RoofMetrics, squares: float, params: OrderParams,
    ) -> OrderLineItem:
        rule = coverage_rule("roofing_nails")
        total, boxes = nails_needed(squares, params.nail_pattern)
        return OrderLineItem(
            material_id=self.get_id(),
            product_name=rule.name,
            quantity=boxes,
            unit="boxes",
            coverage=rule.coverage,
            coverage_unit=rule.coverage_unit,
            calculation=(
                f"{total:,} nails needed "
                f"({NAILS_PER_SQUARE[params.nail_pattern]} nails/sq)"
            ),
        )
