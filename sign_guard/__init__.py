"""
Sign Guard.

============================================================
THE SIGN ATTEMPT RISK GATE
============================================================

Evaluates one sign-in or sign-up attempt and decides
whether it may proceed, needs additional verification,
or must be rejected.

Sign-in / Sign-up use case -> SIGN GUARD -> Authentication
                                  ↑
                        YOU ARE HERE

============================================================
OUTPUT
============================================================

- APPROVED: proceed (overall risk LOW or MEDIUM)
- SUSPICIOUS: reject until additionally verified (HIGH)
- REJECTED: reject, create nothing (CRITICAL)

============================================================
FAIL-CLOSED BEHAVIOR
============================================================

- Any error -> REJECTED
- Missing request -> REJECTED
- Malformed request data -> REJECTED

============================================================
USAGE
============================================================

```python
from sign_guard import SignGuard, SignRequest, SignStatus

guard = SignGuard()

verdict = guard.evaluate(SignRequest(
    username="john_doe",
    ip_address="203.0.113.1",
    user_agent="Mozilla/5.0",
    latitude=-15.7801,
    longitude=-47.9292,
    terms_accepted=True,
))

if verdict.status == SignStatus.APPROVED:
    ...
```

============================================================
"""

# Types
from .types import (
    # Enums
    RiskTier,
    SignStatus,
    SignPurpose,
    BlockType,
    # Input types
    SignRequest,
    # Threat data types
    ZoneLabel,
    GeoZone,
    # Output types
    SecurityCheck,
    AggregateResult,
    Verdict,
    # Errors
    SignGuardError,
    ConfigurationError,
    MissingRequestError,
    InvalidRequestError,
    CheckError,
    SecurityRiskError,
    SignRejectedError,
    AdditionalVerificationRequiredError,
)

# Configuration
from .config import (
    MEDIUM_WEIGHT_THRESHOLD,
    HIGH_WEIGHT_THRESHOLD,
    CRITICAL_WEIGHT_THRESHOLD,
    PRIVATE_NETWORKS,
    AggregationConfig,
    CheckWeights,
    GeofenceConfig,
    LeniencyConfig,
    SignGuardConfig,
    get_default_config,
    get_development_config,
    get_strict_config,
    load_config_from_dict,
    load_config_from_yaml,
)

# Threat intelligence
from .threat_intel import ThreatIntelStore

# Geofencing
from .geo import (
    EARTH_RADIUS_KM,
    ZoneMatch,
    haversine_km,
    nearest_zone_within_radius,
)

# Evaluation
from .evaluator import RiskEvaluator
from .aggregator import RiskAggregator, primary_check, status_for
from .response import build_verdict, build_fail_closed_verdict

# Engine
from .engine import (
    SignGuard,
    SignRequestProcessor,
    ProcessorState,
    create_guard,
    evaluate_sign_request,
    is_sign_allowed,
)

# Caller policy
from .policy import enforce_verdict, guard_sign_attempt


__all__ = [
    # Enums
    "RiskTier",
    "SignStatus",
    "SignPurpose",
    "BlockType",
    # Types
    "SignRequest",
    "ZoneLabel",
    "GeoZone",
    "SecurityCheck",
    "AggregateResult",
    "Verdict",
    # Errors
    "SignGuardError",
    "ConfigurationError",
    "MissingRequestError",
    "InvalidRequestError",
    "CheckError",
    "SecurityRiskError",
    "SignRejectedError",
    "AdditionalVerificationRequiredError",
    # Configuration
    "MEDIUM_WEIGHT_THRESHOLD",
    "HIGH_WEIGHT_THRESHOLD",
    "CRITICAL_WEIGHT_THRESHOLD",
    "PRIVATE_NETWORKS",
    "AggregationConfig",
    "CheckWeights",
    "GeofenceConfig",
    "LeniencyConfig",
    "SignGuardConfig",
    "get_default_config",
    "get_development_config",
    "get_strict_config",
    "load_config_from_dict",
    "load_config_from_yaml",
    # Threat intelligence
    "ThreatIntelStore",
    # Geofencing
    "EARTH_RADIUS_KM",
    "ZoneMatch",
    "haversine_km",
    "nearest_zone_within_radius",
    # Evaluation
    "RiskEvaluator",
    "RiskAggregator",
    "primary_check",
    "status_for",
    "build_verdict",
    "build_fail_closed_verdict",
    # Engine
    "SignGuard",
    "SignRequestProcessor",
    "ProcessorState",
    "create_guard",
    "evaluate_sign_request",
    "is_sign_allowed",
    # Caller policy
    "enforce_verdict",
    "guard_sign_attempt",
]


__version__ = "1.0.0"
