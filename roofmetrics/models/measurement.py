"""Roof measurement output models."""

from __future__ import annotations
from enum import Enum

from .geometry import CamelModel


class EdgeType(str, Enum):
    EAVE = "eave"
    RAKE = "rake"
    RIDGE = "ridge"
    VALLEY = "valley"
    HIP = "hip"


class ClassifiedEdge(CamelModel):
    """A single bounding-box edge with its architectural classification."""
    type: EdgeType
    length: float                                # Feet
    coordinates: tuple[tuple[float, float], tuple[float, float]]  # (lng, lat) pairs
    azimuth: float                               # Degrees
    pitch: float                                 # Degrees


class RoofMetrics(CamelModel):
    """
    Aggregated roof measurements.

    `is_estimated` is True only when no usable segment data existed and
    the linear values were derived from area alone.
    """
    total_area: float = 0.0          # Square feet
    predominant_pitch: int = 0       # Rise per 12
    perimeter: float = 0.0           # Feet
    eaves: float = 0.0
    rakes: float = 0.0
    ridges: float = 0.0
    valleys: float = 0.0
    hips: float = 0.0
    segments: list[ClassifiedEdge] = []
    is_estimated: bool = False

    @classmethod
    def zero(cls) -> RoofMetrics:
        """Empty estimate used when nothing at all is known."""
        return cls(is_estimated=True)

    @property
    def linear_total(self) -> float:
        return self.eaves + self.rakes + self.ridges + self.valleys + self.hips
