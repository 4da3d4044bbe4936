"""Material requirement output models."""

from __future__ import annotations
from typing import Optional, Union

from .geometry import CamelModel


LINEAR_FEET = "linear feet"
SQUARE_FEET = "square feet"


class MaterialRequirement(CamelModel):
    """One material line: raw quantity and the waste-adjusted order quantity."""
    source: str
    with_waste: int
    unit: str


class LinearRequirement(MaterialRequirement):
    """Material ordered by the linear foot (starter, drip edge, ...)."""
    raw_footage: float
    unit: str = LINEAR_FEET

    @property
    def raw(self) -> float:
        return self.raw_footage


class AreaRequirement(MaterialRequirement):
    """Material ordered by area, with roofing squares and bundles."""
    raw_area: float
    unit: str = SQUARE_FEET
    squares: Optional[int] = None
    bundles: Optional[int] = None

    @property
    def raw(self) -> float:
        return self.raw_area


AnyRequirement = Union[AreaRequirement, LinearRequirement]


class MaterialRequirements(CamelModel):
    """All material lines for one roof at one waste percentage."""
    waste_percent: float
    items: dict[str, AnyRequirement] = {}

    def __getitem__(self, material_id: str) -> AnyRequirement:
        return self.items[material_id]

    def __contains__(self, material_id: str) -> bool:
        return material_id in self.items

    def ids(self) -> list[str]:
        return list(self.items)


class WasteResult(CamelModel):
    raw: float
    with_waste: int
    waste_amount: int


class WasteTableRow(CamelModel):
    """One overage scenario for the report waste table."""
    waste_percent: float
    total_area: float
    squares: float
    bundles: int
