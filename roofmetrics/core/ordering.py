"""Material order builder — RoofMetrics into purchasable line items."""

from __future__ import annotations

from roofmetrics.models import (
    RoofMetrics, MaterialOrder, OrderParams, OrderLineItem,
)
from roofmetrics.core.coverage import coverage_rule
from roofmetrics.core.registry import OrderRegistry, create_order_registry
from roofmetrics.core.units import SQUARE_FEET_PER_SQUARE


class MaterialOrderBuilder:
    """
    Stateless order builder.

    Computes waste-adjusted squares for the roof complexity once, runs
    the applicable order rules and appends manual accessories.
    """

    def __init__(self, registry: OrderRegistry | None = None) -> None:
        self.registry = registry or create_order_registry()

    def build(
        self,
        metrics: RoofMetrics,
        params: OrderParams | None = None,
    ) -> MaterialOrder:
        if params is None:
            params = OrderParams()

        squares = self.squares_with_waste(metrics, params)
        rules = self.registry.get_applicable_rules(metrics, params)
        items = [rule.order(metrics, squares, params) for rule in rules]

        for accessory in params.accessories:
            items.append(OrderLineItem(
                material_id="accessory",
                product_name=accessory.name,
                quantity=accessory.quantity,
                unit="pieces",
                calculation="Manual entry",
            ))

        return MaterialOrder(
            complexity=params.complexity,
            total_squares=round(squares, 1),
            line_items=items,
        )

    @staticmethod
    def squares_with_waste(metrics: RoofMetrics, params: OrderParams) -> float:
        waste = coverage_rule("architectural_shingles").waste_for(params.complexity)
        return metrics.total_area / SQUARE_FEET_PER_SQUARE * waste


def calculate_material_order(
    metrics: RoofMetrics, params: OrderParams | None = None,
) -> MaterialOrder:
    """Purchasable order for all standard products."""
    return MaterialOrderBuilder().build(metrics, params)
