"""
Sign Guard - Geofencing.

Great-circle distance and zone matching.

Distances use the haversine formula on a sphere of radius
6371 km. Zone radii are at most a few hundred kilometres,
well inside the range where the spherical model holds.
"""

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .types import GeoZone, InvalidRequestError


EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class ZoneMatch:
    """A zone that contains a point, with the point's distance to its center."""

    zone: GeoZone
    distance_km: float


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points in kilometres.

    Args:
        lat1, lon1: First point, decimal degrees
        lat2, lon2: Second point, decimal degrees

    Returns:
        Distance in km
    """
    d_lat = to_radians(lat2 - lat1)
    d_lon = to_radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(to_radians(lat1)) * math.cos(to_radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def validate_coordinates(latitude: float, longitude: float) -> None:
    """
    Reject coordinates that cannot be placed on the globe.

    Raises:
        InvalidRequestError: If either value is non-numeric,
            non-finite or out of range
    """
    for name, value in (("latitude", latitude), ("longitude", longitude)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidRequestError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidRequestError(f"{name} is not finite: {value!r}")

    if not -90.0 <= latitude <= 90.0:
        raise InvalidRequestError(f"latitude {latitude} out of range [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidRequestError(f"longitude {longitude} out of range [-180, 180]")


def nearest_zone_within_radius(
    latitude: float,
    longitude: float,
    zones: Iterable[GeoZone],
    exclude: Optional[Callable[[GeoZone], bool]] = None,
) -> Optional[ZoneMatch]:
    """
    Find the nearest zone whose radius contains the point.

    The radius boundary is inclusive. Ties keep the zone
    listed first.

    Args:
        latitude, longitude: Point to test
        zones: Candidate zones
        exclude: Optional predicate; zones it accepts are skipped

    Returns:
        ZoneMatch or None when no zone contains the point
    """
    best: Optional[ZoneMatch] = None

    for zone in zones:
        if exclude is not None and exclude(zone):
            continue
        distance = haversine_km(latitude, longitude, zone.latitude, zone.longitude)
        if distance > zone.radius_km:
            continue
        if best is None or distance < best.distance_km:
            best = ZoneMatch(zone=zone, distance_km=distance)

    return best
