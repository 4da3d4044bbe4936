"""Unit conversion and the pitch model.

All functions are pure. Invalid numeric input (NaN) propagates through
the arithmetic unchanged; callers validate raw survey values.
"""

from __future__ import annotations
import math
from types import MappingProxyType
from typing import Mapping


SQ_METERS_TO_SQ_FEET = 10.764
METERS_TO_FEET = 3.28084
SQUARE_FEET_PER_SQUARE = 100

FLAT = "flat"
DEFAULT_PITCH = "6/12"
MAX_TABLE_RISE = 12


def _build_pitch_table() -> Mapping[str, float]:
    table: dict[str, float] = {FLAT: 1.0}
    for rise in range(2, MAX_TABLE_RISE + 1):
        table[f"{rise}/12"] = math.sqrt(1 + (rise / 12) ** 2)
    return MappingProxyType(table)


# Pitch label -> surface-area multiplier, sqrt(1 + (rise/12)^2)
PITCH_MULTIPLIERS: Mapping[str, float] = _build_pitch_table()


def sq_meters_to_sq_feet(m2: float) -> float:
    return m2 * SQ_METERS_TO_SQ_FEET


def meters_to_feet(m: float) -> float:
    return m * METERS_TO_FEET


def sq_feet_to_squares(ft2: float) -> int:
    """Roofing squares (100 sq ft each), rounded up."""
    return math.ceil(ft2 / SQUARE_FEET_PER_SQUARE)


def pitch_multiplier(label: str) -> float:
    """Surface multiplier for a pitch label. Unknown labels use 6/12."""
    return PITCH_MULTIPLIERS.get(label, PITCH_MULTIPLIERS[DEFAULT_PITCH])


def degrees_to_pitch_rise(degrees: float) -> int:
    """Rise per 12 inches of run for a slope angle, rounded."""
    return round(math.tan(math.radians(degrees)) * 12)


def rise_label(rise: int) -> str:
    """Label such as "6/12", or "flat" for no rise."""
    if rise <= 0:
        return FLAT
    return f"{rise}/12"


def pitch_label(degrees: float) -> str:
    return rise_label(degrees_to_pitch_rise(degrees))


def roof_surface_area(footprint_ft2: float, label: str) -> float:
    """Sloped surface area from the horizontal footprint."""
    return footprint_ft2 * pitch_multiplier(label)


def is_valid_pitch(label: str) -> bool:
    return label in PITCH_MULTIPLIERS


def available_pitches() -> list[str]:
    return list(PITCH_MULTIPLIERS)


def round_to(value: float, decimals: int = 2) -> float:
    return round(value, decimals)


def format_linear_feet(feet: float) -> str:
    """Display a length as feet and inches, e.g. 12' 6"."""
    whole = math.floor(feet)
    inches = round((feet - whole) * 12)
    if inches == 12:
        whole += 1
        inches = 0
    if inches == 0:
        return f"{whole}'"
    return f"{whole}' {inches}\""
