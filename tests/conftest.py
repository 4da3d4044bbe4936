import pytest

from roofmetrics.models import RoofMetrics


def make_segment(pitch=26.6, azimuth=180.0, area=92.9,
                 sw=(40.0, -75.0), ne=(40.0001, -74.99988), with_box=True):
    segment = {
        "pitchDegrees": pitch,
        "azimuthDegrees": azimuth,
        "stats": {"areaMeters2": area},
    }
    if with_box:
        segment["boundingBox"] = {
            "sw": {"latitude": sw[0], "longitude": sw[1]},
            "ne": {"latitude": ne[0], "longitude": ne[1]},
        }
    return segment


def make_insight(*segments, **extra):
    payload = {"solarPotential": {"roofSegmentStats": list(segments)}}
    payload.update(extra)
    return payload


@pytest.fixture
def south_segment():
    return make_segment()


@pytest.fixture
def single_segment_insight(south_segment):
    return make_insight(south_segment)


@pytest.fixture
def sample_metrics():
    return RoofMetrics(
        total_area=1000.0,
        predominant_pitch=6,
        perimeter=200.0,
        eaves=80.0,
        rakes=40.0,
        ridges=30.0,
        valleys=10.0,
        hips=20.0,
    )
