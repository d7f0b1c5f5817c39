"""
Pydantic Schemas for Threat Intelligence and Configuration Data.

Raw threat data (bundled defaults, dictionaries, YAML files)
is validated here before the store builds its immutable
zone and address collections. Configuration documents are
validated before they are applied to SignGuardConfig.
"""

from typing import List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)

from .types import BlockType


class ZoneSchema(BaseModel):
    """A high-risk location."""
    model_config = ConfigDict(extra="forbid")

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)
    city: str = Field(min_length=1)
    country: str = Field(min_length=1)
    risk: Optional[str] = None
    radius_km: Optional[float] = Field(default=None, gt=0)


class BlockedZoneSchema(BaseModel):
    """A location where every sign attempt is rejected."""
    model_config = ConfigDict(extra="forbid")

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)
    city: str = Field(min_length=1)
    country: str = Field(min_length=1)
    reason: str = Field(min_length=1)
    block_type: BlockType = BlockType.SECURITY_THREAT
    radius_km: Optional[float] = Field(default=None, gt=0)


class ThreatIntelSchema(BaseModel):
    """Complete threat intelligence document."""
    model_config = ConfigDict(extra="forbid")

    suspicious_ips: List[str] = Field(default_factory=list)
    malicious_ips: List[str] = Field(default_factory=list)
    high_risk_countries: List[str] = Field(default_factory=list)
    high_risk_zones: List[ZoneSchema] = Field(default_factory=list)
    blocked_zones: List[BlockedZoneSchema] = Field(default_factory=list)


# ============================================================
# CONFIGURATION DOCUMENT
# ============================================================
# Omitted or null keys keep their defaults. Types are strict:
# "false" is not a boolean and "5" is not a threshold.

class AggregationSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    medium_weight_threshold: Optional[StrictInt] = Field(default=None, gt=0)
    high_weight_threshold: Optional[StrictInt] = Field(default=None, gt=0)
    critical_weight_threshold: Optional[StrictInt] = Field(default=None, gt=0)


class WeightsSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    suspicious_ip: Optional[StrictInt] = Field(default=None, ge=0)
    blocked_location: Optional[StrictInt] = Field(default=None, ge=0)
    high_risk_location_critical: Optional[StrictInt] = Field(default=None, ge=0)
    high_risk_location_high: Optional[StrictInt] = Field(default=None, ge=0)
    high_risk_location_medium: Optional[StrictInt] = Field(default=None, ge=0)
    terms_not_accepted: Optional[StrictInt] = Field(default=None, ge=0)
    suspicious_username: Optional[StrictInt] = Field(default=None, ge=0)
    suspicious_user_agent: Optional[StrictInt] = Field(default=None, ge=0)


class GeofenceSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    blocked_radius_km: Optional[Union[StrictInt, StrictFloat]] = Field(default=None, gt=0)
    high_risk_radius_km: Optional[Union[StrictInt, StrictFloat]] = Field(default=None, gt=0)


class LeniencySchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    permissive_mode: Optional[StrictBool] = None
    exempt_private_ips: Optional[StrictBool] = None
    exempt_cli_user_agents: Optional[StrictBool] = None
    private_ip_exemptions: Optional[List[StrictStr]] = None


class SignGuardConfigSchema(BaseModel):
    """Complete configuration document."""
    model_config = ConfigDict(extra="forbid")

    aggregation: Optional[AggregationSchema] = None
    weights: Optional[WeightsSchema] = None
    geofence: Optional[GeofenceSchema] = None
    leniency: Optional[LeniencySchema] = None
    reserved_usernames: Optional[List[StrictStr]] = None
    bot_user_agent_patterns: Optional[List[StrictStr]] = None
    cli_user_agent_patterns: Optional[List[StrictStr]] = None
