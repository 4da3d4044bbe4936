"""Estimation parameters and configuration."""

from __future__ import annotations
from enum import IntEnum
from pydantic import Field

from .geometry import CamelModel


class WastePreset(IntEnum):
    """Recommended waste percentages. Not enforced as a closed set."""
    MINIMAL = 5      # Simple roofs with few cuts
    STANDARD = 10    # Most common default
    MODERATE = 15    # Complex roofs with valleys
    HIGH = 20        # Very complex roofs


class EstimationParams(CamelModel):
    """User-adjustable parameters for material estimation."""
    waste_percent: float = Field(default=float(WastePreset.STANDARD), ge=0)
    enabled_materials: list[str] = []    # Empty = use all registered materials
    disabled_materials: list[str] = []   # Explicitly skip specific materials
