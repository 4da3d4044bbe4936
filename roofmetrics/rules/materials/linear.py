"""Linear-foot materials — edge trims, caps and underlayment strips.

Each one sums one or more edge-type totals from RoofMetrics and applies
waste once, rounding the order quantity up.
"""

from __future__ import annotations
from abc import abstractmethod

from roofmetrics.rules.base import MaterialRule
from roofmetrics.models import RoofMetrics, LinearRequirement
from roofmetrics.core.waste import ceil_with_waste


class LinearMaterialRule(MaterialRule):
    """Shared estimate for materials measured along roof edges."""

    source: str = ""

    @abstractmethod
    def raw_quantity(self, metrics: RoofMetrics) -> float:
        """Length in feet this material has to cover."""
        ...

    def estimate(self, metrics: RoofMetrics, waste_percent: float) -> LinearRequirement:
        raw = self.raw_quantity(metrics)
        return LinearRequirement(
            source=self.source,
            raw_footage=raw,
            with_waste=ceil_with_waste(raw, waste_percent),
        )


class StarterStripRule(LinearMaterialRule):
    """Starter strip runs along the eaves."""

    priority = 10
    source = "Total Eaves"

    def get_id(self) -> str:
        return "starter_strip"

    def get_name(self) -> str:
        return "Starter Strip"

    def raw_quantity(self, metrics: RoofMetrics) -> float:
        return metrics.eaves


class DripEdgeRule(LinearMaterialRule):
    priority = 20
    source = "Eaves + Rakes"

    def get_id(self) -> str:
        return "drip_edge"

    def get_name(self) -> str:
        return "Drip Edge"

    def raw_quantity(self, metrics: RoofMetrics) -> float:
        return metrics.eaves + metrics.rakes


class HipRidgeCapRule(LinearMaterialRule):
    priority = 30
    source = "Ridges + Hips"

    def get_id(self) -> str:
        return "hip_ridge_cap"

    def get_name(self) -> str:
        return "Hip & Ridge Cap"

    def raw_quantity(self, metrics: RoofMetrics) -> float:
        return metrics.ridges + metrics.hips


class ValleyMetalRule(LinearMaterialRule):
    """Valley metal. Always 0 while the classifier never emits valleys."""

    priority = 40
    source = "Valleys"

    def get_id(self) -> str:
        return "valley_metal"

    def get_name(self) -> str:
        return "Valley Metal"

    def raw_quantity(self, metrics: RoofMetrics) -> float:
        return metrics.valleys


class IceWaterShieldRule(LinearMaterialRule):
    """Ice & water shield: eaves plus both sides of every valley."""

    priority = 50
    source = "Valleys (2x) + Eaves"

    def get_id(self) -> str:
        return "ice_water_shield"

    def get_name(self) -> str:
        return "Ice & Water Shield"

    def raw_quantity(self, metrics: RoofMetrics) -> float:
        return 2 * metrics.valleys + metrics.eaves
