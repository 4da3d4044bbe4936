"""Edge classification for a single roof segment.

The survey only supplies a lat/lng bounding box per segment, so the four
rectangle edges are the classification candidates. Each edge's
great-circle bearing is compared with the segment azimuth (downslope
direction) to guess its architectural role.
"""

from __future__ import annotations
import logging

from roofmetrics.models import (
    RoofSegmentStat, BoundingBox, ClassifiedEdge, EdgeType,
)
from roofmetrics.core.units import meters_to_feet


logger = logging.getLogger(__name__)

# Below this pitch a segment is treated as flat: every edge is an eave.
FLAT_PITCH_DEGREES = 5.0

# Bearing-difference bands, degrees
RAKE_MAX_DIFF = 30.0
RAKE_MIN_DIFF = 330.0
RIDGE_MIN_DIFF = 60.0
RIDGE_MAX_DIFF = 120.0
EAVE_MIN_DIFF = 150.0
EAVE_MAX_DIFF = 210.0


def bearing_difference(bearing: float, azimuth: float) -> float:
    """|bearing - azimuth| normalized to [0, 360)."""
    return abs(bearing % 360.0 - azimuth % 360.0) % 360.0


def classify_bearing_diff(bearing_diff: float, pitch_degrees: float) -> EdgeType:
    """
    Map a bearing difference to an edge type.

    Perpendicular edges resolve to RIDGE: without neighbouring-segment
    adjacency a peak cannot be told apart from a trough, so VALLEY is
    never produced here.
    """
    if pitch_degrees < FLAT_PITCH_DEGREES:
        return EdgeType.EAVE
    if bearing_diff < RAKE_MAX_DIFF or bearing_diff > RAKE_MIN_DIFF:
        return EdgeType.RAKE
    if EAVE_MIN_DIFF < bearing_diff < EAVE_MAX_DIFF:
        return EdgeType.EAVE
    if RIDGE_MIN_DIFF < bearing_diff < RIDGE_MAX_DIFF:
        return EdgeType.RIDGE
    return EdgeType.HIP


class EdgeClassifier:
    """Classifies the four bounding-box edges of one roof segment."""

    def classify(self, segment: RoofSegmentStat) -> list[ClassifiedEdge]:
        """Return one ClassifiedEdge per rectangle edge; [] without a bounding box."""
        box = segment.bounding_box
        if box is None:
            return []

        pitch = segment.pitch_degrees or 0.0
        azimuth = segment.azimuth_degrees or 0.0

        edges: list[ClassifiedEdge] = []
        for start, end in box.edges():
            bearing = start.bearing_to(end)
            edge_type = classify_bearing_diff(bearing_difference(bearing, azimuth), pitch)
            length = meters_to_feet(start.distance_to(end))
            logger.debug(
                "edge bearing=%.1f azimuth=%.1f pitch=%.1f -> %s (%.1f ft)",
                bearing, azimuth, pitch, edge_type.value, length,
            )
            edges.append(ClassifiedEdge(
                type=edge_type,
                length=length,
                coordinates=(start.as_pair(), end.as_pair()),
                azimuth=azimuth,
                pitch=pitch,
            ))
        return edges

    def perimeter(self, box: BoundingBox) -> float:
        """Great-circle perimeter of the rectangle in feet."""
        return sum(meters_to_feet(a.distance_to(b)) for a, b in box.edges())
