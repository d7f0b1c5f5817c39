"""
Sign Guard - Location Checks.

CHECKS:
- Blocked location: inside a blocked zone, always CRITICAL
- High-risk location: inside a high-risk zone, tier from the zone

Both checks only run when the request carries both
coordinates. Out-of-range coordinates raise, which the
engine resolves to a rejection.
"""

from typing import List, Optional, Tuple

from ..config import CheckWeights
from ..geo import nearest_zone_within_radius, validate_coordinates
from ..threat_intel import ThreatIntelStore
from ..types import GeoZone, RiskTier, SecurityCheck, SignRequest
from .base import BaseCheck, CheckContext, CheckMeta


class BlockedLocationCheck(BaseCheck):
    """
    Rejects attempts made from inside a blocked zone.

    At most one finding per request: the nearest blocked zone.
    """

    def __init__(self, threat_intel: ThreatIntelStore, weights: CheckWeights):
        self._threat_intel = threat_intel
        self._weight = weights.blocked_location

    @property
    def meta(self) -> CheckMeta:
        return CheckMeta(
            name="BlockedLocationCheck",
            description="Coordinates inside a sanctioned or blocked zone",
        )

    def _evaluate(self, request: SignRequest, context: CheckContext) -> List[SecurityCheck]:
        if not request.has_coordinates:
            return []

        validate_coordinates(request.latitude, request.longitude)

        match = nearest_zone_within_radius(
            request.latitude,
            request.longitude,
            self._threat_intel.blocked_zones(),
        )
        if match is None:
            return []

        context.blocked_match = match
        zone = match.zone
        return [
            self.finding(
                RiskTier.CRITICAL,
                f"Location completely blocked ({zone.label}) - {zone.block_reason}",
                self._weight,
            )
        ]


class HighRiskLocationCheck(BaseCheck):
    """
    Flags attempts made near a high-risk location.

    Zones at the same place as an already-hit blocked zone
    are skipped.

    Tier mapping:
        CRITICAL -> CRITICAL, weight 4
        HIGH     -> HIGH, weight 3
        MEDIUM / unset -> MEDIUM, weight 2
    """

    def __init__(self, threat_intel: ThreatIntelStore, weights: CheckWeights):
        self._threat_intel = threat_intel
        self._weights = weights

    @property
    def meta(self) -> CheckMeta:
        return CheckMeta(
            name="HighRiskLocationCheck",
            description="Coordinates near a high-risk location",
        )

    def _evaluate(self, request: SignRequest, context: CheckContext) -> List[SecurityCheck]:
        if not request.has_coordinates:
            return []

        validate_coordinates(request.latitude, request.longitude)

        blocked = context.blocked_match.zone if context.blocked_match else None

        def same_family(zone: GeoZone) -> bool:
            return blocked is not None and zone.same_place(blocked)

        match = nearest_zone_within_radius(
            request.latitude,
            request.longitude,
            self._threat_intel.high_risk_zones(),
            exclude=same_family,
        )
        if match is None:
            return []

        tier, weight = self._tier_and_weight(match.zone.risk_tier)
        return [
            self.finding(
                tier,
                f"Suspicious location detected ({match.zone.label}) - "
                f"{match.distance_km:.1f}km distance",
                weight,
            )
        ]

    def _tier_and_weight(self, declared: Optional[RiskTier]) -> Tuple[RiskTier, int]:
        if declared == RiskTier.CRITICAL:
            return RiskTier.CRITICAL, self._weights.high_risk_location_critical
        if declared == RiskTier.HIGH:
            return RiskTier.HIGH, self._weights.high_risk_location_high
        return RiskTier.MEDIUM, self._weights.high_risk_location_medium
