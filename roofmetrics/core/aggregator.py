"""Roof metrics aggregation — segments in, RoofMetrics out."""

from __future__ import annotations
import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from roofmetrics.models import (
    BuildingInsight, SolarPotential, RoofSegmentStat, RoofMetrics,
    ClassifiedEdge, EdgeType,
)
from roofmetrics.core.classifier import EdgeClassifier
from roofmetrics.core.units import sq_meters_to_sq_feet, degrees_to_pitch_rise


logger = logging.getLogger(__name__)

# Share of the estimated perimeter assigned to each edge type
# when only an area is known.
EAVE_RATIO = 0.5
RAKE_RATIO = 0.3
RIDGE_RATIO = 0.2

_BUCKETS = {
    EdgeType.EAVE: "eaves",
    EdgeType.RAKE: "rakes",
    EdgeType.RIDGE: "ridges",
    EdgeType.VALLEY: "valleys",
    EdgeType.HIP: "hips",
}


def coerce_insight(payload: Any) -> BuildingInsight:
    """
    Build a BuildingInsight from a raw payload without raising.

    Accepts a BuildingInsight, a bare insight mapping or one wrapped as
    {"buildingInsights": {...}}. Segments that fail validation are
    dropped one by one so the rest of the payload still counts.
    """
    if isinstance(payload, BuildingInsight):
        return payload
    if not isinstance(payload, Mapping):
        logger.warning("Building insight is not a mapping (%s); using empty insight",
                       type(payload).__name__)
        return BuildingInsight()

    outer = payload
    wrapped = payload.get("buildingInsights")
    if isinstance(wrapped, Mapping):
        payload = wrapped

    total_area = _optional_float(_first(payload, "totalArea", "total_area"))
    if total_area is None and payload is not outer:
        total_area = _optional_float(_first(outer, "totalArea", "total_area"))

    raw_potential = _first(payload, "solarPotential", "solar_potential")
    if not isinstance(raw_potential, Mapping):
        return BuildingInsight(total_area=total_area)

    max_array = _optional_float(
        _first(raw_potential, "maxArrayAreaMeters2", "max_array_area_meters2"))

    raw_segments = _first(raw_potential, "roofSegmentStats", "roof_segment_stats") or []
    if not isinstance(raw_segments, list):
        logger.warning("roofSegmentStats is not a list; ignoring it")
        raw_segments = []

    segments: list[RoofSegmentStat] = []
    for index, raw in enumerate(raw_segments):
        try:
            segments.append(RoofSegmentStat.model_validate(raw))
        except ValidationError as exc:
            logger.warning("Skipping malformed roof segment %d: %s",
                           index, exc.errors()[0].get("msg", "invalid"))

    return BuildingInsight(
        solar_potential=SolarPotential(
            max_array_area_meters2=max_array,
            roof_segment_stats=segments,
        ),
        total_area=total_area,
    )


def _first(mapping: Mapping, *keys: str) -> Any:
    for key in keys:
        if mapping.get(key) is not None:
            return mapping[key]
    return None


def _optional_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric area value %r", value)
        return None


class RoofMetricsAggregator:
    """
    Stateless aggregator.

    Classifies every segment that has a bounding box, sums lengths and
    areas, and falls back to an area-only estimate when no segment is
    usable.
    """

    def __init__(self, classifier: EdgeClassifier | None = None) -> None:
        self.classifier = classifier or EdgeClassifier()

    def aggregate(self, payload: Any) -> RoofMetrics:
        insight = coerce_insight(payload)
        segments = insight.segments
        usable = [s for s in segments if s.bounding_box is not None]

        skipped = len(segments) - len(usable)
        if skipped:
            logger.info("Skipping %d roof segment(s) without a bounding box", skipped)

        pitch = self.predominant_pitch(segments)

        if not usable:
            logger.warning("No usable roof segments found; estimating from area")
            return self.estimate_from_area(self.fallback_area(insight), pitch)

        totals = dict.fromkeys(_BUCKETS.values(), 0.0)
        perimeter = 0.0
        total_area = 0.0
        edges: list[ClassifiedEdge] = []

        for segment in usable:
            segment_edges = self.classifier.classify(segment)
            for edge in segment_edges:
                totals[_BUCKETS[edge.type]] += edge.length
            edges.extend(segment_edges)
            perimeter += self.classifier.perimeter(segment.bounding_box)
            total_area += sq_meters_to_sq_feet(segment.area_meters2)

        return RoofMetrics(
            total_area=total_area,
            predominant_pitch=pitch,
            perimeter=perimeter,
            segments=edges,
            is_estimated=False,
            **totals,
        )

    @staticmethod
    def predominant_pitch(segments: list[RoofSegmentStat]) -> int:
        """Unweighted mean of segment pitches as rise per 12 (not area-weighted)."""
        pitches = [s.pitch_degrees for s in segments if s.pitch_degrees is not None]
        if not pitches:
            return 0
        return degrees_to_pitch_rise(sum(pitches) / len(pitches))

    @staticmethod
    def fallback_area(insight: BuildingInsight) -> float:
        """Known area in sq ft: top-level totalArea, else maxArrayAreaMeters2."""
        if insight.total_area is not None:
            return insight.total_area
        potential = insight.solar_potential
        if potential is not None and potential.max_array_area_meters2 is not None:
            return sq_meters_to_sq_feet(potential.max_array_area_meters2)
        return 0.0

    @staticmethod
    def estimate_from_area(total_area: float, pitch: int = 0) -> RoofMetrics:
        """Approximate linear measurements from area using fixed perimeter ratios."""
        if not total_area > 0:
            return RoofMetrics.zero()

        perimeter = 4 * math.sqrt(total_area)
        return RoofMetrics(
            total_area=total_area,
            predominant_pitch=pitch,
            perimeter=round(perimeter),
            eaves=round(perimeter * EAVE_RATIO),
            rakes=round(perimeter * RAKE_RATIO),
            ridges=round(perimeter * RIDGE_RATIO),
            is_estimated=True,
        )


def calculate_roof_metrics(payload: Any) -> RoofMetrics:
    """Aggregate a building-insight payload into RoofMetrics."""
    return RoofMetricsAggregator().aggregate(payload)
