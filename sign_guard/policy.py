"""
Sign Guard - Caller Policy.

How sign-in and sign-up flows must act on a verdict:

- REJECTED   -> stop immediately; never create a session or account
- SUSPICIOUS -> stop with a distinguishable error asking for
                additional verification
- APPROVED   -> continue; risk and message may be shown to the client
"""

from .engine import SignGuard
from .types import (
    AdditionalVerificationRequiredError,
    SignRejectedError,
    SignRequest,
    SignStatus,
    Verdict,
)


REJECTED_FALLBACK = "Request rejected by security system"
VERIFICATION_FALLBACK = "Additional verification required"


def enforce_verdict(verdict: Verdict) -> Verdict:
    """
    Apply the caller policy to a verdict.

    Returns:
        The verdict, when the attempt may proceed

    Raises:
        SignRejectedError: Status is REJECTED
        AdditionalVerificationRequiredError: Status is SUSPICIOUS
    """
    if verdict.status == SignStatus.REJECTED:
        raise SignRejectedError(verdict.reason or REJECTED_FALLBACK, verdict)

    if verdict.status == SignStatus.SUSPICIOUS:
        raise AdditionalVerificationRequiredError(
            verdict.reason or VERIFICATION_FALLBACK,
            verdict,
        )

    return verdict


def guard_sign_attempt(guard: SignGuard, request: SignRequest) -> Verdict:
    """Evaluate a sign attempt and enforce the caller policy in one call."""
    return enforce_verdict(guard.evaluate(request))
