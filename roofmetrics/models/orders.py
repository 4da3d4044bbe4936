"""Material order models — purchasable packages from roof metrics."""

from __future__ import annotations
from enum import Enum
from pydantic import Field

from .geometry import CamelModel


class RoofComplexity(str, Enum):
    SIMPLE = "simple"        # Gable roof
    MODERATE = "moderate"    # Hip roof
    COMPLEX = "complex"      # Cut-up roof, many valleys


class NailPattern(str, Enum):
    STANDARD_4_NAIL = "standard_4_nail"
    HURRICANE_6_NAIL = "hurricane_6_nail"
    HIGH_WIND_8_NAIL = "high_wind_8_nail"


class CoverageRule(CamelModel):
    """How one product is packaged and how far one package reaches."""
    name: str
    coverage: float            # Per package, in coverage_unit
    coverage_unit: str
    package_unit: str
    waste_factor: dict[RoofComplexity, float]

    def waste_for(self, complexity: RoofComplexity) -> float:
        return self.waste_factor[complexity]


class Accessory(CamelModel):
    """Manually counted item (pipe boots, vents) added to an order as-is."""
    name: str
    quantity: int = Field(ge=0)


class OrderParams(CamelModel):
    """User-adjustable parameters for a material order."""
    complexity: RoofComplexity = RoofComplexity.MODERATE
    nail_pattern: NailPattern = NailPattern.STANDARD_4_NAIL
    accessories: list[Accessory] = []
    enabled_materials: list[str] = []    # Empty = use all registered order rules
    disabled_materials: list[str] = []


class OrderLineItem(CamelModel):
    material_id: str
    product_name: str
    quantity: int
    unit: str
    coverage: float = 0.0
    coverage_unit: str = ""
    calculation: str = ""


class MaterialOrder(CamelModel):
    """Line items to purchase for one roof."""
    complexity: RoofComplexity
    total_squares: float       # Squares including shingle waste, one decimal
    line_items: list[OrderLineItem] = []

    def quantity_of(self, material_id: str) -> int:
        """Ordered quantity for a material id, 0 when it is not on the order."""
        for item in self.line_items:
            if item.material_id == material_id:
                return item.quantity
        return 0

    @property
    def summary(self) -> dict[str, int]:
        return {item.material_id: item.quantity for item in self.line_items}
