"""
Sign Guard - Type Definitions.

============================================================
PURPOSE
============================================================
Data contracts for the Sign Guard risk engine.

The engine receives one SignRequest, produces a list of
SecurityCheck findings, and returns exactly one Verdict.

============================================================
DESIGN PRINCIPLES
============================================================
1. Requests, findings and verdicts are immutable
2. Risk tiers are totally ordered (LOW < ... < CRITICAL)
3. Status is derived from the overall risk tier only
4. Default to REJECTED on any uncertainty

============================================================
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple


# ============================================================
# ENUMS
# ============================================================

class RiskTier(IntEnum):
    """
    Ordinal severity of a single finding or of a verdict.

    Higher values indicate more serious conditions.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @classmethod
    def parse(cls, value: Any) -> "RiskTier":
        """
        Parse a tier from its name (case-insensitive) or value.

        Raises:
            ConfigurationError: If the value names no tier
        """
        if isinstance(value, RiskTier):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ConfigurationError(f"Unknown risk tier: {value!r}")


class SignStatus(str, Enum):
    """Decision status of a sign attempt."""

    APPROVED = "APPROVED"
    """Proceed with normal authentication."""

    SUSPICIOUS = "SUSPICIOUS"
    """Reject until additional verification is provided."""

    REJECTED = "REJECTED"
    """Reject immediately. No session, no account."""


class SignPurpose(str, Enum):
    """What the caller is trying to do."""

    SIGNIN = "SIGNIN"
    SIGNUP = "SIGNUP"


class BlockType(str, Enum):
    """Why a geographic zone is blocked outright."""

    SANCTIONS = "SANCTIONS"
    EMBARGO = "EMBARGO"
    SECURITY_THREAT = "SECURITY_THREAT"
    TERRORISM = "TERRORISM"
    CYBER_WARFARE = "CYBER_WARFARE"


# ============================================================
# INPUT TYPES
# ============================================================

@dataclass(frozen=True)
class SignRequest:
    """
    One sign-in or sign-up attempt.

    Created fresh by the caller for each attempt and never
    mutated afterwards. Credentials never enter the engine.
    """

    username: str
    """Username the attempt is made for."""

    ip_address: str
    """Client IP address as seen by the caller."""

    user_agent: Optional[str] = None
    """Raw User-Agent header."""

    machine_id: Optional[str] = None
    """Device identifier, if the client sent one."""

    latitude: Optional[float] = None
    """Client latitude in decimal degrees."""

    longitude: Optional[float] = None
    """Client longitude in decimal degrees."""

    timezone: Optional[str] = None
    """Client timezone name (e.g. 'America/Sao_Paulo')."""

    terms_accepted: bool = False
    """Whether the terms of use were accepted."""

    sign_purpose: SignPurpose = SignPurpose.SIGNIN
    """Sign-in or sign-up."""

    @property
    def has_coordinates(self) -> bool:
        """Both coordinates present. Partial coordinates count as absent."""
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "username": self.username,
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
            "machine_id": self.machine_id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "timezone": self.timezone,
            "terms_accepted": self.terms_accepted,
            "sign_purpose": self.sign_purpose.value,
        }


# ============================================================
# THREAT INTELLIGENCE TYPES
# ============================================================

@dataclass(frozen=True)
class ZoneLabel:
    """Human-readable place name of a zone."""

    city: str
    country: str

    def __str__(self) -> str:
        return f"{self.city}, {self.country}"


@dataclass(frozen=True)
class GeoZone:
    """
    A named geographic circle used for proximity checks.

    Blocked zones are always CRITICAL and carry a block reason.
    High-risk zones carry their declared tier (or None).
    """

    latitude: float
    longitude: float
    radius_km: float
    risk_tier: Optional[RiskTier]
    label: ZoneLabel
    block_reason: Optional[str] = None
    block_type: Optional[BlockType] = None

    def __post_init__(self) -> None:
        for name in ("latitude", "longitude", "radius_km"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"Zone {self.label}: {name} must be a number, got {value!r}"
                )
            if not math.isfinite(value):
                raise ConfigurationError(f"Zone {self.label}: {name} is not finite")

        if not -90.0 <= self.latitude <= 90.0:
            raise ConfigurationError(
                f"Zone {self.label}: latitude {self.latitude} out of range"
            )
        if not -180.0 <= self.longitude <= 180.0:
            raise ConfigurationError(
                f"Zone {self.label}: longitude {self.longitude} out of range"
            )
        if self.radius_km <= 0:
            raise ConfigurationError(
                f"Zone {self.label}: radius must be positive, got {self.radius_km}"
            )

    @property
    def is_blocked(self) -> bool:
        return self.block_reason is not None

    @property
    def center(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def same_place(self, other: "GeoZone") -> bool:
        """Whether two zones describe the same city."""
        return self.label == other.label

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius_km": self.radius_km,
            "risk_tier": self.risk_tier.name if self.risk_tier else None,
            "city": self.label.city,
            "country": self.label.country,
            "block_reason": self.block_reason,
            "block_type": self.block_type.value if self.block_type else None,
        }


# ============================================================
# OUTPUT TYPES
# ============================================================

@dataclass(frozen=True)
class SecurityCheck:
    """
    A single finding raised by one check.

    Weights are additive across findings and drive
    threshold-based escalation in the aggregator.
    """

    risk_tier: RiskTier
    """Severity of this finding."""

    reason: str
    """Human-readable reason."""

    weight: int
    """Severity contribution, never negative."""

    check_name: str = ""
    """Name of the check that produced this finding."""

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"Check weight must be >= 0, got {self.weight}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "risk": self.risk_tier.name,
            "reason": self.reason,
            "weight": self.weight,
            "check": self.check_name,
        }


@dataclass(frozen=True)
class AggregateResult:
    """Outcome of combining all findings of one evaluation."""

    overall_risk: RiskTier
    status: SignStatus
    reason: Optional[str] = None
    total_weight: int = 0


@dataclass(frozen=True)
class Verdict:
    """
    Final output of one evaluation.

    Owned by the caller once returned.
    """

    # Core Decision
    approved: bool
    """True only when status is APPROVED."""

    message: str
    """Message suitable for the client."""

    overall_risk: RiskTier
    """Aggregated risk tier."""

    status: SignStatus
    """Decision status."""

    reason: Optional[str] = None
    """Aggregator reason, if any."""

    # Evidence
    checks: Tuple[SecurityCheck, ...] = ()
    """Every finding that fired, in declaration order."""

    total_weight: int = 0
    """Sum of check weights."""

    # Audit
    evaluated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    """When the verdict was produced."""

    evaluation_id: str = ""
    """Unique evaluation identifier."""

    def is_rejected(self) -> bool:
        return self.status == SignStatus.REJECTED

    def requires_verification(self) -> bool:
        return self.status == SignStatus.SUSPICIOUS

    def format_summary(self) -> str:
        """Format a one-line summary for logs."""
        return (
            f"{self.status.value} | risk={self.overall_risk.name} | "
            f"weight={self.total_weight} | checks={len(self.checks)} | "
            f"{self.message}"
        )

    def to_security_info(self) -> Dict[str, Any]:
        """The security block a sign-up response exposes to the client."""
        return {
            "risk_level": self.overall_risk.name,
            "status": self.status.value,
            "message": self.message,
            "checks": [c.to_dict() for c in self.checks],
            "timestamp": self.evaluated_at.isoformat(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "approved": self.approved,
            "message": self.message,
            "overall_risk": self.overall_risk.name,
            "status": self.status.value,
            "reason": self.reason,
            "checks": [c.to_dict() for c in self.checks],
            "total_weight": self.total_weight,
            "evaluated_at": self.evaluated_at.isoformat(),
            "evaluation_id": self.evaluation_id,
        }


# ============================================================
# ERROR TYPES
# ============================================================

class SignGuardError(Exception):
    """Base exception for Sign Guard errors."""
    pass


class ConfigurationError(SignGuardError):
    """Raised when threat data or configuration is malformed."""
    pass


class MissingRequestError(SignGuardError):
    """Raised when processing is requested before a request is set."""
    pass


class InvalidRequestError(SignGuardError):
    """Raised when a check finds request data it cannot evaluate."""
    pass


class CheckError(SignGuardError):
    """Raised when a check fails unexpectedly."""

    def __init__(self, check_name: str, cause: Exception):
        self.check_name = check_name
        self.cause = cause
        super().__init__(f"{check_name} failed: {cause.__class__.__name__}: {cause}")


class SecurityRiskError(SignGuardError):
    """
    Raised by caller policy helpers when a sign attempt must not proceed.

    The engine itself never raises this.
    """

    def __init__(self, message: str, verdict: Verdict):
        self.verdict = verdict
        self.risk_tier = verdict.overall_risk
        super().__init__(message)


class SignRejectedError(SecurityRiskError):
    """The attempt was rejected outright."""
    pass


class AdditionalVerificationRequiredError(SecurityRiskError):
    """The attempt is suspicious and needs extra verification."""
    pass
