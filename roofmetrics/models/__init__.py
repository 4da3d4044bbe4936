from .geometry import LatLng, BoundingBox, CamelModel, EARTH_RADIUS_M
from .insight import BuildingInsight, SolarPotential, RoofSegmentStat, SegmentStats
from .measurement import EdgeType, ClassifiedEdge, RoofMetrics
from .materials import (
    MaterialRequirement, LinearRequirement, AreaRequirement, AnyRequirement,
    MaterialRequirements, WasteResult, WasteTableRow, LINEAR_FEET, SQUARE_FEET,
)
from .parameters import EstimationParams, WastePreset
from .report import RoofReport
from .orders import (
    RoofComplexity, NailPattern, CoverageRule, Accessory, OrderParams,
    OrderLineItem, MaterialOrder,
)

__all__ = [
    "LatLng", "BoundingBox", "CamelModel", "EARTH_RADIUS_M",
    "BuildingInsight", "SolarPotential", "RoofSegmentStat", "SegmentStats",
    "EdgeType", "ClassifiedEdge", "RoofMetrics",
    "MaterialRequirement", "LinearRequirement", "AreaRequirement", "AnyRequirement",
    "MaterialRequirements", "WasteResult", "WasteTableRow", "LINEAR_FEET", "SQUARE_FEET",
    "EstimationParams", "WastePreset",
    "RoofReport",
    "RoofComplexity", "NailPattern", "CoverageRule", "Accessory", "OrderParams",
    "OrderLineItem", "MaterialOrder",
]
