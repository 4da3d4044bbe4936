"""Geodesic primitives used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Mean earth radius in meters (great-circle model)
EARTH_RADIUS_M = 6371008.8


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )


class LatLng(CamelModel):
    """Point on the earth's surface in decimal degrees."""
    latitude: float
    longitude: float

    def distance_to(self, other: LatLng) -> float:
        """Haversine distance to `other` in meters."""
        phi1 = math.radians(self.latitude)
        phi2 = math.radians(other.latitude)
        d_phi = math.radians(other.latitude - self.latitude)
        d_lambda = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(d_phi / 2) ** 2
            + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_M * c

    def bearing_to(self, other: LatLng) -> float:
        """Initial great-circle bearing to `other`, normalized to [0, 360)."""
        phi1 = math.radians(self.latitude)
        phi2 = math.radians(other.latitude)
        d_lambda = math.radians(other.longitude - self.longitude)

        y = math.sin(d_lambda) * math.cos(phi2)
        x = (
            math.cos(phi1) * math.sin(phi2)
            - math.sin(phi1) * math.cos(phi2) * math.cos(d_lambda)
        )
        bearing = math.degrees(math.atan2(y, x))
        return (bearing + 360.0) % 360.0

    def as_pair(self) -> tuple[float, float]:
        """(longitude, latitude), GeoJSON order."""
        return (self.longitude, self.latitude)


class BoundingBox(CamelModel):
    """Axis-aligned lat/lng rectangle reported for a roof segment."""
    sw: LatLng
    ne: LatLng

    def corners(self) -> list[LatLng]:
        """Closed ring SW -> SE -> NE -> NW -> SW."""
        sw, ne = self.sw, self.ne
        se = LatLng(latitude=sw.latitude, longitude=ne.longitude)
        nw = LatLng(latitude=ne.latitude, longitude=sw.longitude)
        return [sw, se, ne, nw, sw]

    def edges(self) -> list[tuple[LatLng, LatLng]]:
        ring = self.corners()
        return [(ring[i], ring[i + 1]) for i in range(len(ring) - 1)]
