"""Material estimator — turns RoofMetrics into material requirements."""

from __future__ import annotations

from roofmetrics.models import RoofMetrics, MaterialRequirements, EstimationParams
from roofmetrics.core.registry import MaterialRegistry, create_default_registry


class MaterialEstimator:
    """
    Stateless material estimator.

    Takes metrics + params, runs the applicable material rules,
    and returns one requirement per material.
    """

    def __init__(self, registry: MaterialRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def estimate(
        self,
        metrics: RoofMetrics,
        params: EstimationParams | None = None,
    ) -> MaterialRequirements:
        if params is None:
            params = EstimationParams()

        rules = self.registry.get_applicable_rules(metrics, params)
        items = {
            rule.get_id(): rule.estimate(metrics, params.waste_percent)
            for rule in rules
        }
        return MaterialRequirements(waste_percent=params.waste_percent, items=items)


def calculate_material_requirements(
    metrics: RoofMetrics, waste_percent: float = 10,
) -> MaterialRequirements:
    """Material requirements for all standard materials at one waste %."""
    params = EstimationParams(waste_percent=waste_percent)
    return MaterialEstimator().estimate(metrics, params)
