"""
Tests for the Threat Intelligence Store.

============================================================
PURPOSE
============================================================
1. Bundled data loads and answers queries
2. Dictionary / YAML loading with default radii
3. Malformed data is a ConfigurationError, never a skip

============================================================
"""

import pytest
import yaml

from sign_guard import (
    BlockType,
    ConfigurationError,
    GeofenceConfig,
    GeoZone,
    RiskTier,
    ThreatIntelStore,
    ZoneLabel,
)


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def store():
    return ThreatIntelStore.default()


@pytest.fixture
def sample_data():
    return {
        "suspicious_ips": ["6.6.6.6", " 7.7.7.7 "],
        "malicious_ips": ["9.9.9.9"],
        "high_risk_countries": ["xx"],
        "high_risk_zones": [
            {"lat": 10.0, "lng": 20.0, "city": "Alpha", "country": "XX", "risk": "high"},
            {"lat": 11.0, "lng": 21.0, "city": "Beta", "country": "XX"},
            {"lat": 12.0, "lng": 22.0, "city": "Gamma", "country": "YY",
             "risk": "MEDIUM", "radius_km": 25},
        ],
        "blocked_zones": [
            {"lat": 30.0, "lng": 40.0, "city": "Delta", "country": "XX",
             "reason": "Embargo", "block_type": "EMBARGO"},
        ],
    }


# ============================================================
# TEST: Bundled Data
# ============================================================

class TestDefaultStore:
    """Bundled example data."""

    def test_lists_are_populated(self, store):
        summary = store.summary()

        assert summary["suspicious_ips"] > 0
        assert summary["malicious_ips"] == 2
        assert summary["high_risk_zones"] > 0
        assert summary["blocked_zones"] > 0

    def test_known_entries(self, store):
        assert store.is_suspicious_ip("192.168.1.100")
        assert store.is_suspicious_ip("8.8.8.8")
        assert not store.is_suspicious_ip("203.0.113.1")
        assert store.is_malicious_ip("1.2.3.4")

    def test_blocked_zones_are_critical_with_reason(self, store):
        for zone in store.blocked_zones():
            assert zone.risk_tier == RiskTier.CRITICAL
            assert zone.block_reason
            assert zone.radius_km == 50.0

    def test_high_risk_zones_get_default_radius(self, store):
        assert all(z.radius_km == 100.0 for z in store.high_risk_zones())

    def test_beijing_is_high_risk_not_blocked(self, store):
        assert [z.label.city for z in store.high_risk_zones_by_country("CN")][0] == "Beijing"
        assert not store.is_country_blocked("CN")

    def test_country_queries(self, store):
        assert store.is_country_blocked("kp")
        assert not store.is_country_blocked("BR")
        assert store.is_high_risk_country("ir")
        assert not store.is_high_risk_country("BR")
        assert {z.label.city for z in store.blocked_zones_by_country("CU")} == {
            "Havana", "Santiago de Cuba", "Santa Clara",
        }

    def test_zone_type_and_tier_queries(self, store):
        embargo = store.blocked_zones_by_type(BlockType.EMBARGO)
        critical = store.high_risk_zones_by_tier(RiskTier.CRITICAL)

        assert embargo and all(z.label.country == "CU" for z in embargo)
        assert "Moscow" in {z.label.city for z in critical}

    def test_custom_geofence_radii(self):
        store = ThreatIntelStore.default(
            geofence=GeofenceConfig(blocked_radius_km=75.0, high_risk_radius_km=120.0)
        )

        assert all(z.radius_km == 75.0 for z in store.blocked_zones())
        assert all(z.radius_km == 120.0 for z in store.high_risk_zones())

    def test_collections_are_immutable(self, store):
        assert isinstance(store.suspicious_ips(), frozenset)
        assert isinstance(store.blocked_zones(), tuple)

        with pytest.raises(AttributeError):
            store.suspicious_ips().add("6.6.6.6")


# ============================================================
# TEST: Loading
# ============================================================

class TestLoading:
    """Dictionary and YAML loading."""

    def test_from_dict(self, sample_data):
        store = ThreatIntelStore.from_dict(sample_data)

        assert store.is_suspicious_ip("7.7.7.7")
        assert store.is_malicious_ip("9.9.9.9")
        assert store.is_high_risk_country("XX")

        alpha, beta, gamma = store.high_risk_zones()
        assert alpha.risk_tier == RiskTier.HIGH
        assert beta.risk_tier is None
        assert gamma.radius_km == 25
        assert alpha.radius_km == 100.0

        (delta,) = store.blocked_zones()
        assert delta.block_type == BlockType.EMBARGO
        assert delta.block_reason == "Embargo"
        assert delta.radius_km == 50.0

    def test_empty_dict(self):
        store = ThreatIntelStore.from_dict({})

        assert store.blocked_zones() == ()
        assert store.suspicious_ips() == frozenset()

    def test_from_yaml(self, tmp_path, sample_data):
        path = tmp_path / "threat_intel.yaml"
        path.write_text(yaml.safe_dump(sample_data), encoding="utf-8")

        store = ThreatIntelStore.from_yaml(path)

        assert len(store.high_risk_zones()) == 3
        assert store.is_country_blocked("XX")

    def test_missing_yaml_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_yaml(tmp_path / "missing.yaml")

    def test_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1.2.3.4\n- 5.6.7.8\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_yaml(path)

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("suspicious_ips: [1.2.3.4\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_yaml(path)


# ============================================================
# TEST: Malformed Data
# ============================================================

class TestMalformedData:
    """Malformed entries refuse to load."""

    @pytest.mark.parametrize("zone", [
        {"lat": 95.0, "lng": 0.0, "city": "A", "country": "XX"},
        {"lat": 0.0, "lng": 181.0, "city": "A", "country": "XX"},
        {"lat": "north", "lng": 0.0, "city": "A", "country": "XX"},
        {"lat": 0.0, "lng": 0.0, "city": "A", "country": "XX", "radius_km": 0},
        {"lat": 0.0, "lng": 0.0, "city": "A", "country": "XX", "unexpected": 1},
        {"lng": 0.0, "city": "A", "country": "XX"},
    ])
    def test_bad_high_risk_zone(self, zone):
        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_dict({"high_risk_zones": [zone]})

    def test_unknown_risk_tier(self):
        data = {"high_risk_zones": [
            {"lat": 0.0, "lng": 0.0, "city": "A", "country": "XX", "risk": "EXTREME"}
        ]}

        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_dict(data)

    def test_blocked_zone_without_reason(self):
        data = {"blocked_zones": [{"lat": 0.0, "lng": 0.0, "city": "A", "country": "XX"}]}

        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_dict(data)

    def test_blocked_zone_unknown_type(self):
        data = {"blocked_zones": [
            {"lat": 0.0, "lng": 0.0, "city": "A", "country": "XX",
             "reason": "X", "block_type": "ALIENS"}
        ]}

        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_dict(data)

    def test_unknown_top_level_key(self):
        with pytest.raises(ConfigurationError):
            ThreatIntelStore.from_dict({"bad_ips": []})

    def test_constructor_rejects_non_critical_blocked_zone(self):
        zone = GeoZone(
            latitude=0.0,
            longitude=0.0,
            radius_km=50.0,
            risk_tier=RiskTier.HIGH,
            label=ZoneLabel(city="A", country="XX"),
            block_reason="X",
        )

        with pytest.raises(ConfigurationError):
            ThreatIntelStore(blocked_zones=[zone])

    def test_constructor_rejects_blocked_zone_without_reason(self):
        zone = GeoZone(
            latitude=0.0,
            longitude=0.0,
            radius_km=50.0,
            risk_tier=RiskTier.CRITICAL,
            label=ZoneLabel(city="A", country="XX"),
        )

        with pytest.raises(ConfigurationError):
            ThreatIntelStore(blocked_zones=[zone])

    def test_constructor_rejects_non_zone(self):
        with pytest.raises(ConfigurationError):
            ThreatIntelStore(high_risk_zones=[{"lat": 0.0}])

    @pytest.mark.parametrize("kwargs", [
        {"latitude": 91.0},
        {"longitude": float("nan")},
        {"radius_km": -1.0},
        {"radius_km": 0.0},
    ])
    def test_geo_zone_validation(self, kwargs):
        params = {
            "latitude": 0.0,
            "longitude": 0.0,
            "radius_km": 10.0,
            "risk_tier": RiskTier.MEDIUM,
            "label": ZoneLabel(city="A", country="XX"),
        }
        params.update(kwargs)

        with pytest.raises(ConfigurationError):
            GeoZone(**params)
