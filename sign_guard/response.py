"""
Sign Guard - Response Builder.

Assembles Verdict objects. Every path out of the engine,
including the failure path, ends here.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Sequence
from uuid import uuid4

from .types import AggregateResult, RiskTier, SecurityCheck, SignStatus, Verdict


DEFAULT_MESSAGES: Dict[SignStatus, str] = {
    SignStatus.APPROVED: "Login approved successfully",
    SignStatus.SUSPICIOUS: "Suspicious login - requires additional verification",
    SignStatus.REJECTED: "Login rejected due to security issues",
}

INTERNAL_ERROR_MESSAGE = "Internal error processing request"
INTERNAL_ERROR_REASON = "Internal system error"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_evaluation_id(now: datetime) -> str:
    """Unique, time-sortable evaluation ID."""
    return f"SIGN-{now.strftime('%Y%m%d%H%M%S%f')}-{uuid4().hex[:8]}"


def status_message(status: SignStatus, reason: Optional[str] = None) -> str:
    """Aggregator reason if present, else the default message for the status."""
    return reason or DEFAULT_MESSAGES[status]


def build_verdict(
    result: AggregateResult,
    checks: Sequence[SecurityCheck],
    clock: Clock = utc_now,
) -> Verdict:
    """
    Build the verdict of a completed evaluation.

    Args:
        result: Aggregated risk and status
        checks: Findings that fired
        clock: Time source for evaluated_at

    Returns:
        Verdict
    """
    now = clock()
    return Verdict(
        approved=result.status == SignStatus.APPROVED,
        message=status_message(result.status, result.reason),
        overall_risk=result.overall_risk,
        status=result.status,
        reason=result.reason,
        checks=tuple(checks),
        total_weight=result.total_weight,
        evaluated_at=now,
        evaluation_id=new_evaluation_id(now),
    )


def build_fail_closed_verdict(clock: Clock = utc_now) -> Verdict:
    """
    The safest possible outcome.

    Used whenever the engine cannot reach a decision.
    """
    now = clock()
    return Verdict(
        approved=False,
        message=INTERNAL_ERROR_MESSAGE,
        overall_risk=RiskTier.CRITICAL,
        status=SignStatus.REJECTED,
        reason=INTERNAL_ERROR_REASON,
        checks=(),
        total_weight=0,
        evaluated_at=now,
        evaluation_id=new_evaluation_id(now),
    )
