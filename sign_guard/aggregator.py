"""
Sign Guard - Risk Aggregator.

============================================================
RULES
============================================================
No findings                              -> LOW
Any CRITICAL finding, or weight >= 8     -> CRITICAL
Any HIGH finding, or weight >= 5         -> HIGH
Weight >= 2                              -> MEDIUM
Otherwise                                -> LOW

Status follows the overall risk only:
LOW / MEDIUM -> APPROVED, HIGH -> SUSPICIOUS, CRITICAL -> REJECTED

============================================================
"""

from typing import Dict, Optional, Sequence, Tuple

from .config import AggregationConfig
from .types import AggregateResult, RiskTier, SecurityCheck, SignStatus


STATUS_BY_RISK: Dict[RiskTier, Tuple[SignStatus, str]] = {
    RiskTier.CRITICAL: (SignStatus.REJECTED, "Multiple critical security checks failed"),
    RiskTier.HIGH: (
        SignStatus.SUSPICIOUS,
        "Suspicious activity detected - requires additional verification",
    ),
    RiskTier.MEDIUM: (SignStatus.APPROVED, "Approved with minor security alerts"),
    RiskTier.LOW: (SignStatus.APPROVED, "Approved without security issues"),
}


class RiskAggregator:
    """Combines findings into one overall risk tier and status."""

    def __init__(self, config: Optional[AggregationConfig] = None):
        self._config = config or AggregationConfig()
        self._config.validate()

    @property
    def config(self) -> AggregationConfig:
        return self._config

    def aggregate(self, checks: Sequence[SecurityCheck]) -> AggregateResult:
        """
        Aggregate findings.

        Args:
            checks: Findings of one evaluation

        Returns:
            AggregateResult with overall risk, status and reason
        """
        if not checks:
            return AggregateResult(
                overall_risk=RiskTier.LOW,
                status=SignStatus.APPROVED,
                reason=None,
                total_weight=0,
            )

        overall_risk, total_weight = self.overall_risk(checks)
        status, reason = STATUS_BY_RISK[overall_risk]

        return AggregateResult(
            overall_risk=overall_risk,
            status=status,
            reason=reason,
            total_weight=total_weight,
        )

    def overall_risk(self, checks: Sequence[SecurityCheck]) -> Tuple[RiskTier, int]:
        """Overall risk tier and total weight of the findings."""
        total_weight = sum(c.weight for c in checks)
        has_critical = any(c.risk_tier == RiskTier.CRITICAL for c in checks)
        has_high_or_above = any(c.risk_tier >= RiskTier.HIGH for c in checks)

        if has_critical or total_weight >= self._config.critical_weight_threshold:
            return RiskTier.CRITICAL, total_weight
        if has_high_or_above or total_weight >= self._config.high_weight_threshold:
            return RiskTier.HIGH, total_weight
        if total_weight >= self._config.medium_weight_threshold:
            return RiskTier.MEDIUM, total_weight
        return RiskTier.LOW, total_weight


def status_for(risk: RiskTier) -> SignStatus:
    """Decision status for an overall risk tier."""
    return STATUS_BY_RISK[risk][0]


def primary_check(checks: Sequence[SecurityCheck]) -> Optional[SecurityCheck]:
    """
    The most severe finding.

    Ties go to the earliest finding in declaration order.
    """
    primary: Optional[SecurityCheck] = None
    for check in checks:
        if primary is None or check.risk_tier > primary.risk_tier:
            primary = check
    return primary
