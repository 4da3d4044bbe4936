"""Combined takeoff output handed to report renderers."""

from __future__ import annotations

from .geometry import CamelModel
from .measurement import RoofMetrics
from .materials import MaterialRequirements, WasteTableRow


class RoofReport(CamelModel):
    metrics: RoofMetrics
    materials: MaterialRequirements
    waste_table: list[WasteTableRow]
    pitch_label: str
    squares: int
