"""
Sign Guard - Configuration.

============================================================
PURPOSE
============================================================
Configuration for check weights, escalation thresholds,
geofence radii and non-production leniency.

The aggregation thresholds are engine constants: identical
across deployments so verdicts are reproducible. They are
exposed by name so tests can assert exact boundaries.

============================================================
CONFIGURATION PHILOSOPHY
============================================================
1. All thresholds are explicit and documented
2. Leniency is injected by the caller, never read from
   the process environment
3. Conservative defaults (production behaviour)
4. Externally configurable via dictionary or YAML

============================================================
"""

import ipaddress
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml
from pydantic import ValidationError

from .schemas import SignGuardConfigSchema
from .types import ConfigurationError


# ============================================================
# ESCALATION THRESHOLDS
# ============================================================

MEDIUM_WEIGHT_THRESHOLD = 2
"""Total weight at or above which the overall risk is at least MEDIUM."""

HIGH_WEIGHT_THRESHOLD = 5
"""Total weight at or above which the overall risk is at least HIGH."""

CRITICAL_WEIGHT_THRESHOLD = 8
"""Total weight at or above which the overall risk is CRITICAL."""

PRIVATE_NETWORKS: Tuple[str, ...] = (
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
    "127.0.0.0/8",
)
"""Address ranges treated as suspicious outside permissive mode."""


@dataclass
class AggregationConfig:
    """
    Weight thresholds used by the aggregator.

    Do not change these in production: verdict parity
    across services depends on them.
    """

    medium_weight_threshold: int = MEDIUM_WEIGHT_THRESHOLD
    high_weight_threshold: int = HIGH_WEIGHT_THRESHOLD
    critical_weight_threshold: int = CRITICAL_WEIGHT_THRESHOLD

    def validate(self) -> None:
        for name, value in vars(self).items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"Weight threshold '{name}' must be an integer, got {value!r}"
                )
        if not (
            0 < self.medium_weight_threshold
            < self.high_weight_threshold
            < self.critical_weight_threshold
        ):
            raise ConfigurationError(
                "Weight thresholds must be positive and strictly increasing: "
                f"{self.medium_weight_threshold}, {self.high_weight_threshold}, "
                f"{self.critical_weight_threshold}"
            )


# ============================================================
# CHECK WEIGHTS
# ============================================================

@dataclass
class CheckWeights:
    """Weight contributed by each check when it fires."""

    suspicious_ip: int = 3
    blocked_location: int = 10
    high_risk_location_critical: int = 4
    high_risk_location_high: int = 3
    high_risk_location_medium: int = 2
    terms_not_accepted: int = 2
    suspicious_username: int = 2
    suspicious_user_agent: int = 3

    def validate(self) -> None:
        for name, value in vars(self).items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"Check weight '{name}' must be a non-negative integer, got {value!r}"
                )


# ============================================================
# GEOFENCE
# ============================================================

@dataclass
class GeofenceConfig:
    """
    Default radii applied to zones loaded without one.
    """

    blocked_radius_km: float = 50.0
    """
    Radius around a blocked location.
    Any sign attempt inside it is rejected.
    """

    high_risk_radius_km: float = 100.0
    """Radius around a high-risk location."""

    def validate(self) -> None:
        for name, value in vars(self).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"Geofence radius '{name}' must be a number, got {value!r}"
                )
        if self.blocked_radius_km <= 0 or self.high_risk_radius_km <= 0:
            raise ConfigurationError("Geofence radii must be positive")


# ============================================================
# LENIENCY
# ============================================================

@dataclass
class LeniencyConfig:
    """
    Exemptions intended for non-production environments.

    Private-address and command-line agent exemptions are
    separate switches. permissive_mode turns both on.
    """

    permissive_mode: bool = False
    """Development mode. Implies both exemptions below."""

    exempt_private_ips: bool = False
    """Do not flag private-range client addresses."""

    exempt_cli_user_agents: bool = False
    """Do not flag curl / wget user agents."""

    private_ip_exemptions: List[str] = field(default_factory=list)
    """
    CIDR networks never flagged as private, even in production.
    Use for trusted reverse proxies that forward internal addresses.
    """

    @property
    def private_ips_exempt(self) -> bool:
        return self.permissive_mode or self.exempt_private_ips

    @property
    def cli_user_agents_exempt(self) -> bool:
        return self.permissive_mode or self.exempt_cli_user_agents

    def validate(self) -> None:
        for name in ("permissive_mode", "exempt_private_ips", "exempt_cli_user_agents"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Leniency flag '{name}' must be a boolean, got {value!r}"
                )

        for network in self.private_ip_exemptions:
            if not isinstance(network, str):
                raise ConfigurationError(f"Invalid private IP exemption {network!r}")
            try:
                ipaddress.ip_network(network, strict=False)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid private IP exemption {network!r}: {e}"
                ) from e


# ============================================================
# MASTER CONFIGURATION
# ============================================================

@dataclass
class SignGuardConfig:
    """
    Master configuration for Sign Guard.

    Aggregates all configuration sections.
    """

    aggregation: AggregationConfig = field(default_factory=AggregationConfig)
    """Escalation thresholds."""

    weights: CheckWeights = field(default_factory=CheckWeights)
    """Per-check weights."""

    geofence: GeofenceConfig = field(default_factory=GeofenceConfig)
    """Default zone radii."""

    leniency: LeniencyConfig = field(default_factory=LeniencyConfig)
    """Non-production exemptions."""

    reserved_usernames: List[str] = field(
        default_factory=lambda: ["admin", "root", "test", "guest"]
    )
    """Usernames that are suspicious on an exact, case-insensitive match."""

    bot_user_agent_patterns: List[str] = field(
        default_factory=lambda: ["bot", "crawler", "spider", "scraper"]
    )
    """Automation signatures, matched case-insensitively."""

    cli_user_agent_patterns: List[str] = field(
        default_factory=lambda: ["curl", "wget"]
    )
    """Command-line client signatures, unless exempt."""

    def validate(self) -> None:
        """
        Validate the whole configuration.

        Raises:
            ConfigurationError: On the first invalid section
        """
        self.aggregation.validate()
        self.weights.validate()
        self.geofence.validate()
        self.leniency.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "aggregation": {
                "medium_weight_threshold": self.aggregation.medium_weight_threshold,
                "high_weight_threshold": self.aggregation.high_weight_threshold,
                "critical_weight_threshold": self.aggregation.critical_weight_threshold,
            },
            "weights": dict(vars(self.weights)),
            "geofence": {
                "blocked_radius_km": self.geofence.blocked_radius_km,
                "high_risk_radius_km": self.geofence.high_risk_radius_km,
            },
            "leniency": {
                "permissive_mode": self.leniency.permissive_mode,
                "exempt_private_ips": self.leniency.exempt_private_ips,
                "exempt_cli_user_agents": self.leniency.exempt_cli_user_agents,
                "private_ip_exemptions": list(self.leniency.private_ip_exemptions),
            },
            "reserved_usernames": list(self.reserved_usernames),
            "bot_user_agent_patterns": list(self.bot_user_agent_patterns),
            "cli_user_agent_patterns": list(self.cli_user_agent_patterns),
        }


# ============================================================
# PRESET FACTORIES
# ============================================================

def get_default_config() -> SignGuardConfig:
    """
    Get default configuration.

    Production behaviour: no exemptions.
    """
    return SignGuardConfig()


def get_development_config() -> SignGuardConfig:
    """
    Get development configuration.

    Private addresses and curl/wget are allowed.
    NOT FOR PRODUCTION.
    """
    config = SignGuardConfig()
    config.leniency.permissive_mode = True
    return config


def get_strict_config() -> SignGuardConfig:
    """
    Get strict configuration.

    Wider geofences, no allow-listed networks.
    """
    config = SignGuardConfig()
    config.geofence.blocked_radius_km = 100.0
    config.geofence.high_risk_radius_km = 150.0
    config.leniency.private_ip_exemptions = []
    return config


def load_config_from_dict(data: Dict[str, Any]) -> SignGuardConfig:
    """
    Load configuration from dictionary.

    Missing or null keys keep their defaults. Unknown keys and
    values of the wrong type are rejected.

    Args:
        data: Configuration dictionary

    Returns:
        Validated SignGuardConfig instance

    Raises:
        ConfigurationError: If the document or the resulting
            configuration is invalid
    """
    try:
        doc = SignGuardConfigSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    overrides = doc.model_dump(exclude_none=True)
    config = get_default_config()

    for section in ("aggregation", "weights", "geofence", "leniency"):
        for name, value in overrides.pop(section, {}).items():
            setattr(getattr(config, section), name, value)

    for name, value in overrides.items():
        setattr(config, name, list(value))

    config.validate()
    return config


def load_config_from_yaml(path: Union[str, Path]) -> SignGuardConfig:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    return load_config_from_dict(data)
