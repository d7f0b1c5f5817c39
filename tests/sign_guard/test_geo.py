"""
Tests for geofencing helpers.
"""

import math

import pytest

from sign_guard import GeoZone, InvalidRequestError, RiskTier, ZoneLabel
from sign_guard.geo import (
    EARTH_RADIUS_KM,
    haversine_km,
    nearest_zone_within_radius,
    validate_coordinates,
)


def zone(lat, lng, radius_km, city):
    return GeoZone(
        latitude=lat,
        longitude=lng,
        radius_km=radius_km,
        risk_tier=RiskTier.MEDIUM,
        label=ZoneLabel(city=city, country="XX"),
    )


class TestHaversine:
    """Great-circle distance."""

    def test_same_point_is_zero(self):
        assert haversine_km(39.9042, 116.4074, 39.9042, 116.4074) == 0.0

    def test_one_degree_of_latitude(self):
        expected = EARTH_RADIUS_KM * math.pi / 180.0

        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected, rel=1e-9)

    def test_london_to_paris(self):
        assert haversine_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)

    def test_symmetric(self):
        a = haversine_km(-15.7801, -47.9292, -23.5505, -46.6333)
        b = haversine_km(-23.5505, -46.6333, -15.7801, -47.9292)

        assert a == pytest.approx(b)

    def test_antipodes(self):
        assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(
            math.pi * EARTH_RADIUS_KM
        )


class TestValidateCoordinates:
    """Coordinate validation."""

    @pytest.mark.parametrize("lat, lng", [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0)])
    def test_valid(self, lat, lng):
        validate_coordinates(lat, lng)

    @pytest.mark.parametrize("lat, lng", [
        (90.1, 0.0),
        (0.0, -180.5),
        (float("nan"), 0.0),
        (0.0, float("inf")),
        ("10", 0.0),
        (True, 0.0),
    ])
    def test_invalid(self, lat, lng):
        with pytest.raises(InvalidRequestError):
            validate_coordinates(lat, lng)


class TestNearestZone:
    """Zone matching."""

    def test_no_zones(self):
        assert nearest_zone_within_radius(0.0, 0.0, []) is None

    def test_boundary_inclusive(self):
        distance = haversine_km(0.3, 0.0, 0.0, 0.0)

        match = nearest_zone_within_radius(0.3, 0.0, [zone(0.0, 0.0, distance, "Edge")])

        assert match is not None
        assert match.distance_km == distance

    def test_just_outside(self):
        distance = haversine_km(0.3, 0.0, 0.0, 0.0)

        assert nearest_zone_within_radius(
            0.3, 0.0, [zone(0.0, 0.0, distance - 1e-6, "Edge")]
        ) is None

    def test_ties_keep_first_listed(self):
        zones = [zone(1.0, 0.0, 500.0, "First"), zone(-1.0, 0.0, 500.0, "Second")]

        match = nearest_zone_within_radius(0.0, 0.0, zones)

        assert match.zone.label.city == "First"

    def test_exclude_predicate(self):
        zones = [zone(0.0, 0.0, 100.0, "Skip"), zone(0.5, 0.0, 100.0, "Keep")]

        match = nearest_zone_within_radius(
            0.0, 0.0, zones, exclude=lambda z: z.label.city == "Skip"
        )

        assert match.zone.label.city == "Keep"
        assert match.distance_km == pytest.approx(55.6, abs=0.1)
