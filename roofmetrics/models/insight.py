"""Building-insight survey models (input side)."""

from __future__ import annotations
from typing import Optional
from pydantic import Field

from .geometry import CamelModel, BoundingBox


class SegmentStats(CamelModel):
    area_meters2: float = Field(default=0.0, ge=0)


class RoofSegmentStat(CamelModel):
    """One planar roof section of uniform pitch and azimuth."""
    pitch_degrees: Optional[float] = Field(default=None, ge=0, le=90)
    azimuth_degrees: Optional[float] = None
    bounding_box: Optional[BoundingBox] = None
    stats: SegmentStats = Field(default_factory=SegmentStats)

    @property
    def area_meters2(self) -> float:
        return self.stats.area_meters2


class SolarPotential(CamelModel):
    max_array_area_meters2: Optional[float] = None
    roof_segment_stats: Optional[list[RoofSegmentStat]] = None


class BuildingInsight(CamelModel):
    """
    Aerial survey payload for one building.

    Every field is optional; consumers degrade to estimates when
    segment data is missing. `total_area` is already in square feet.
    """
    solar_potential: Optional[SolarPotential] = None
    total_area: Optional[float] = None

    @property
    def segments(self) -> list[RoofSegmentStat]:
        if self.solar_potential is None:
            return []
        return self.solar_potential.roof_segment_stats or []
