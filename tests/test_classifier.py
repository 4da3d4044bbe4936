import math

import pytest

from roofmetrics.core.classifier import (
    EdgeClassifier, classify_bearing_diff, bearing_difference,
)
from roofmetrics.core.units import meters_to_feet
from roofmetrics.models import RoofSegmentStat, EdgeType, LatLng, EARTH_RADIUS_M

from conftest import make_segment


@pytest.mark.parametrize("diff, expected", [
    (0.0, EdgeType.RAKE),
    (29.9, EdgeType.RAKE),
    (30.0, EdgeType.HIP),
    (45.0, EdgeType.HIP),
    (60.0, EdgeType.HIP),
    (90.0, EdgeType.RIDGE),
    (120.0, EdgeType.HIP),
    (150.0, EdgeType.HIP),
    (180.0, EdgeType.EAVE),
    (210.0, EdgeType.HIP),
    (270.0, EdgeType.HIP),
    (330.0, EdgeType.HIP),
    (330.1, EdgeType.RAKE),
    (359.9, EdgeType.RAKE),
])
def test_classify_bearing_diff_bands(diff, expected):
    assert classify_bearing_diff(diff, pitch_degrees=20.0) == expected


def test_flat_pitch_is_always_eave():
    for diff in (0.0, 45.0, 90.0, 180.0, 300.0):
        assert classify_bearing_diff(diff, pitch_degrees=4.9) == EdgeType.EAVE


def test_perpendicular_never_resolves_to_valley():
    types = {classify_bearing_diff(d / 2, 30.0) for d in range(0, 720)}
    assert EdgeType.VALLEY not in types


def test_bearing_difference_normalizes():
    assert bearing_difference(10.0, 350.0) == pytest.approx(340.0)
    assert bearing_difference(90.0, -90.0) == pytest.approx(180.0)
    assert bearing_difference(360.0, 0.0) == pytest.approx(0.0)


def test_bearings_of_meridian_and_parallel():
    sw = LatLng(latitude=40.0, longitude=-75.0)
    north = LatLng(latitude=40.001, longitude=-75.0)
    east = LatLng(latitude=40.0, longitude=-74.999)
    assert sw.bearing_to(north) == pytest.approx(0.0, abs=1e-9)
    assert north.bearing_to(sw) == pytest.approx(180.0)
    assert sw.bearing_to(east) == pytest.approx(90.0, abs=0.01)
    assert east.bearing_to(sw) == pytest.approx(270.0, abs=0.01)


def test_classify_south_facing_segment():
    segment = RoofSegmentStat.model_validate(make_segment(azimuth=180.0))
    edges = EdgeClassifier().classify(segment)

    assert [e.type for e in edges] == [
        EdgeType.RIDGE, EdgeType.EAVE, EdgeType.RIDGE, EdgeType.RAKE,
    ]
    assert all(e.azimuth == 180.0 and e.pitch == 26.6 for e in edges)


def test_classify_north_facing_segment():
    segment = RoofSegmentStat.model_validate(make_segment(azimuth=0.0))
    edges = EdgeClassifier().classify(segment)

    assert [e.type for e in edges] == [
        EdgeType.RIDGE, EdgeType.RAKE, EdgeType.HIP, EdgeType.EAVE,
    ]


def test_classify_flat_segment():
    segment = RoofSegmentStat.model_validate(make_segment(pitch=2.0))
    edges = EdgeClassifier().classify(segment)
    assert len(edges) == 4
    assert all(e.type == EdgeType.EAVE for e in edges)


def test_missing_pitch_and_azimuth_default_to_zero():
    raw = make_segment()
    del raw["pitchDegrees"]
    del raw["azimuthDegrees"]
    edges = EdgeClassifier().classify(RoofSegmentStat.model_validate(raw))
    assert all(e.type == EdgeType.EAVE for e in edges)
    assert all(e.pitch == 0.0 and e.azimuth == 0.0 for e in edges)


def test_segment_without_bounding_box_yields_no_edges():
    segment = RoofSegmentStat.model_validate(make_segment(with_box=False))
    assert EdgeClassifier().classify(segment) == []


def test_edge_lengths_are_geodesic_feet():
    segment = RoofSegmentStat.model_validate(
        make_segment(sw=(40.0, -75.0), ne=(40.001, -74.999))
    )
    edges = EdgeClassifier().classify(segment)

    # SE -> NE runs along a meridian: exactly the latitude arc
    expected = meters_to_feet(EARTH_RADIUS_M * math.radians(0.001))
    assert edges[1].length == pytest.approx(expected, rel=1e-9)
    # East-west edge is shortened by cos(latitude)
    assert edges[0].length == pytest.approx(expected * math.cos(math.radians(40.0)), rel=1e-3)


def test_edge_coordinates_form_closed_ring():
    segment = RoofSegmentStat.model_validate(make_segment())
    edges = EdgeClassifier().classify(segment)
    for prev, nxt in zip(edges, edges[1:] + edges[:1]):
        assert prev.coordinates[1] == nxt.coordinates[0]
    assert edges[0].coordinates[0] == (-75.0, 40.0)


def test_perimeter_matches_sum_of_edges():
    segment = RoofSegmentStat.model_validate(make_segment())
    classifier = EdgeClassifier()
    edges = classifier.classify(segment)
    assert classifier.perimeter(segment.bounding_box) == pytest.approx(
        sum(e.length for e in edges)
    )
