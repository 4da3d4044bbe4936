"""High-level roof takeoff service — facade for the API layer."""

from __future__ import annotations
from typing import Any

from roofmetrics.models import (
    RoofMetrics, MaterialRequirements, EstimationParams, RoofReport,
    MaterialOrder, OrderParams,
)
from roofmetrics.core.aggregator import RoofMetricsAggregator
from roofmetrics.core.estimator import MaterialEstimator
from roofmetrics.core.ordering import MaterialOrderBuilder
from roofmetrics.core.registry import (
    MaterialRegistry, OrderRegistry, create_default_registry, create_order_registry,
)
from roofmetrics.core.units import sq_feet_to_squares, rise_label, PITCH_MULTIPLIERS
from roofmetrics.core.waste import waste_table


class RoofService:
    """Measures survey payloads and estimates materials."""

    def __init__(
        self,
        registry: MaterialRegistry | None = None,
        order_registry: OrderRegistry | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.order_registry = order_registry or create_order_registry()
        self.aggregator = RoofMetricsAggregator()
        self.estimator = MaterialEstimator(self.registry)
        self.orderer = MaterialOrderBuilder(self.order_registry)

    def measure(self, insight: Any) -> RoofMetrics:
        return self.aggregator.aggregate(insight)

    def estimate(
        self,
        metrics: RoofMetrics,
        params: EstimationParams | None = None,
    ) -> MaterialRequirements:
        return self.estimator.estimate(metrics, params)

    def report(
        self,
        insight: Any,
        params: EstimationParams | None = None,
    ) -> RoofReport:
        """Metrics, materials and the waste table for one building."""
        metrics = self.measure(insight)
        materials = self.estimate(metrics, params)
        return RoofReport(
            metrics=metrics,
            materials=materials,
            waste_table=waste_table(metrics.total_area),
            pitch_label=rise_label(metrics.predominant_pitch),
            squares=sq_feet_to_squares(metrics.total_area),
        )

    def order(
        self,
        metrics: RoofMetrics,
        params: OrderParams | None = None,
    ) -> MaterialOrder:
        """Purchasable packages for the roof at the given complexity."""
        return self.orderer.build(metrics, params)

    def list_materials(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]

    def list_pitches(self) -> dict[str, float]:
        return dict(PITCH_MULTIPLIERS)
