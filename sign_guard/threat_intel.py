"""
Sign Guard - Threat Intelligence Store.

============================================================
PURPOSE
============================================================
Immutable lookup data used by the checks:

- Suspicious IP addresses
- Known-malicious IP addresses
- High-risk countries
- High-risk geographic zones (tiered, ~100 km)
- Blocked geographic zones (always CRITICAL, ~50 km)

============================================================
LIFECYCLE
============================================================
Loaded once, ahead of evaluation. Malformed data raises
ConfigurationError so the engine refuses to start instead
of silently skipping checks. After construction nothing
is mutable, so one store may be shared by any number of
threads without locking.

============================================================
"""

import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from .config import GeofenceConfig
from .schemas import ThreatIntelSchema
from .threat_data import DEFAULT_THREAT_INTEL
from .types import (
    BlockType,
    ConfigurationError,
    GeoZone,
    RiskTier,
    ZoneLabel,
)


logger = logging.getLogger(__name__)


class ThreatIntelStore:
    """
    Read-only threat intelligence.

    Usage:
        store = ThreatIntelStore.default()
        store = ThreatIntelStore.from_yaml("threat_intel.yaml")
        store = ThreatIntelStore(suspicious_ips=["6.6.6.6"], blocked_zones=[...])
    """

    def __init__(
        self,
        suspicious_ips: Iterable[str] = (),
        malicious_ips: Iterable[str] = (),
        high_risk_zones: Iterable[GeoZone] = (),
        blocked_zones: Iterable[GeoZone] = (),
        high_risk_countries: Iterable[str] = (),
    ):
        self._suspicious_ips: FrozenSet[str] = frozenset(
            ip.strip() for ip in suspicious_ips
        )
        self._malicious_ips: FrozenSet[str] = frozenset(
            ip.strip() for ip in malicious_ips
        )
        self._high_risk_countries: FrozenSet[str] = frozenset(
            code.upper() for code in high_risk_countries
        )
        self._high_risk_zones: Tuple[GeoZone, ...] = tuple(high_risk_zones)
        self._blocked_zones: Tuple[GeoZone, ...] = tuple(blocked_zones)

        for zone in self._high_risk_zones + self._blocked_zones:
            if not isinstance(zone, GeoZone):
                raise ConfigurationError(f"Expected GeoZone, got {type(zone).__name__}")

        for zone in self._blocked_zones:
            if zone.risk_tier != RiskTier.CRITICAL or not zone.is_blocked:
                raise ConfigurationError(
                    f"Blocked zone {zone.label} must be CRITICAL and carry a block reason"
                )

        logger.debug(
            "ThreatIntelStore loaded: %d suspicious IPs, %d malicious IPs, "
            "%d high-risk zones, %d blocked zones",
            len(self._suspicious_ips),
            len(self._malicious_ips),
            len(self._high_risk_zones),
            len(self._blocked_zones),
        )

    # --------------------------------------------------------
    # CONSTRUCTION
    # --------------------------------------------------------

    @classmethod
    def default(cls, geofence: Optional[GeofenceConfig] = None) -> "ThreatIntelStore":
        """Store built from the bundled example data."""
        return cls.from_dict(DEFAULT_THREAT_INTEL, geofence=geofence)

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        geofence: Optional[GeofenceConfig] = None,
    ) -> "ThreatIntelStore":
        """
        Build a store from raw data.

        Zones without an explicit radius get the geofence
        default for their kind.

        Raises:
            ConfigurationError: If any entry is malformed
        """
        geofence = geofence or GeofenceConfig()

        try:
            doc = ThreatIntelSchema.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid threat intelligence data: {e}") from e

        high_risk_zones = [
            GeoZone(
                latitude=z.lat,
                longitude=z.lng,
                radius_km=z.radius_km or geofence.high_risk_radius_km,
                risk_tier=RiskTier.parse(z.risk) if z.risk is not None else None,
                label=ZoneLabel(city=z.city, country=z.country),
            )
            for z in doc.high_risk_zones
        ]

        blocked_zones = [
            GeoZone(
                latitude=z.lat,
                longitude=z.lng,
                radius_km=z.radius_km or geofence.blocked_radius_km,
                risk_tier=RiskTier.CRITICAL,
                label=ZoneLabel(city=z.city, country=z.country),
                block_reason=z.reason,
                block_type=z.block_type,
            )
            for z in doc.blocked_zones
        ]

        return cls(
            suspicious_ips=doc.suspicious_ips,
            malicious_ips=doc.malicious_ips,
            high_risk_zones=high_risk_zones,
            blocked_zones=blocked_zones,
            high_risk_countries=doc.high_risk_countries,
        )

    @classmethod
    def from_yaml(
        cls,
        path: Union[str, Path],
        geofence: Optional[GeofenceConfig] = None,
    ) -> "ThreatIntelStore":
        """
        Load a store from a YAML file.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load threat data from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Threat data file {path} must contain a mapping")

        logger.info(f"Loading threat intelligence from {path}")
        return cls.from_dict(data, geofence=geofence)

    # --------------------------------------------------------
    # ACCESSORS
    # --------------------------------------------------------

    def suspicious_ips(self) -> FrozenSet[str]:
        return self._suspicious_ips

    def malicious_ips(self) -> FrozenSet[str]:
        return self._malicious_ips

    def blocked_zones(self) -> Tuple[GeoZone, ...]:
        return self._blocked_zones

    def high_risk_zones(self) -> Tuple[GeoZone, ...]:
        return self._high_risk_zones

    def high_risk_countries(self) -> FrozenSet[str]:
        return self._high_risk_countries

    # --------------------------------------------------------
    # QUERIES
    # --------------------------------------------------------

    def is_suspicious_ip(self, ip: str) -> bool:
        return ip in self._suspicious_ips

    def is_malicious_ip(self, ip: str) -> bool:
        return ip in self._malicious_ips

    def is_high_risk_country(self, country_code: str) -> bool:
        return country_code.upper() in self._high_risk_countries

    def is_country_blocked(self, country_code: str) -> bool:
        """Whether any blocked zone lies in the given country."""
        code = country_code.upper()
        return any(z.label.country == code for z in self._blocked_zones)

    def blocked_zones_by_country(self, country_code: str) -> Tuple[GeoZone, ...]:
        code = country_code.upper()
        return tuple(z for z in self._blocked_zones if z.label.country == code)

    def blocked_zones_by_type(self, block_type: BlockType) -> Tuple[GeoZone, ...]:
        return tuple(z for z in self._blocked_zones if z.block_type == block_type)

    def high_risk_zones_by_country(self, country_code: str) -> Tuple[GeoZone, ...]:
        code = country_code.upper()
        return tuple(z for z in self._high_risk_zones if z.label.country == code)

    def high_risk_zones_by_tier(self, tier: RiskTier) -> Tuple[GeoZone, ...]:
        return tuple(z for z in self._high_risk_zones if z.risk_tier == tier)

    def summary(self) -> Dict[str, int]:
        """Entry counts, for health checks."""
        return {
            "suspicious_ips": len(self._suspicious_ips),
            "malicious_ips": len(self._malicious_ips),
            "high_risk_countries": len(self._high_risk_countries),
            "high_risk_zones": len(self._high_risk_zones),
            "blocked_zones": len(self._blocked_zones),
        }
