"""
Sign Guard - Main Engine.

============================================================
PURPOSE
============================================================
SignGuard decides whether one sign-in or sign-up attempt
may proceed, needs extra verification, or is rejected.

============================================================
CRITICAL BEHAVIOR
============================================================
1. ONE VERDICT PER CALL
   - evaluate(request) -> Verdict
   - No request state is kept between calls

2. FAIL-CLOSED
   - Missing request = REJECTED
   - Any check error = REJECTED
   - Any unexpected exception = REJECTED
   evaluate() never raises.

3. DETERMINISTIC
   - Same request = same findings, risk and status
   - Only evaluated_at and evaluation_id differ

4. THREAD-SAFE
   - Configuration and threat data are fixed at construction
   - One instance may serve any number of threads

============================================================
"""

import logging
import threading
from enum import Enum
from typing import List, Optional

from .aggregator import RiskAggregator, primary_check
from .config import SignGuardConfig
from .evaluator import RiskEvaluator
from .response import Clock, build_fail_closed_verdict, build_verdict, utc_now
from .threat_intel import ThreatIntelStore
from .types import (
    MissingRequestError,
    SignRequest,
    SignStatus,
    Verdict,
)


logger = logging.getLogger(__name__)


class SignGuard:
    """
    The sign attempt risk engine.

    Usage:
        guard = SignGuard(config, threat_intel)
        verdict = guard.evaluate(request)

        if verdict.status == SignStatus.APPROVED:
            # Proceed with authentication
            pass
        elif verdict.status == SignStatus.SUSPICIOUS:
            # Ask for additional verification
            pass
        else:
            # Reject, create nothing
            pass
    """

    def __init__(
        self,
        config: Optional[SignGuardConfig] = None,
        threat_intel: Optional[ThreatIntelStore] = None,
        clock: Clock = utc_now,
    ):
        """
        Initialize Sign Guard.

        Args:
            config: Guard configuration (uses defaults if None)
            threat_intel: Threat data (bundled defaults if None)
            clock: Time source for verdict timestamps

        Raises:
            ConfigurationError: If configuration or threat data is invalid
        """
        self._config = config or SignGuardConfig()
        self._config.validate()

        if threat_intel is None:
            threat_intel = ThreatIntelStore.default(geofence=self._config.geofence)
        self._threat_intel = threat_intel
        self._evaluator = RiskEvaluator(self._config, self._threat_intel)
        self._aggregator = RiskAggregator(self._config.aggregation)
        self._clock = clock

        if self._config.leniency.permissive_mode:
            logger.warning("SignGuard running in permissive mode - NOT FOR PRODUCTION")

        logger.info("SignGuard initialized")

    @property
    def config(self) -> SignGuardConfig:
        """Get current configuration."""
        return self._config

    @property
    def threat_intel(self) -> ThreatIntelStore:
        return self._threat_intel

    def evaluate(self, request: Optional[SignRequest]) -> Verdict:
        """
        Evaluate a sign attempt.

        This is the main entry point.

        CRITICAL: This method NEVER throws exceptions.
        Any exception results in REJECTED.

        Args:
            request: The sign attempt

        Returns:
            Verdict
        """
        try:
            return self._evaluate_internal(request)

        except Exception as e:
            # CRITICAL: Any exception = REJECTED
            logger.error(
                f"SignGuard internal error: {e}",
                exc_info=True,
            )
            return build_fail_closed_verdict(self._clock)

    def _evaluate_internal(self, request: Optional[SignRequest]) -> Verdict:
        if request is None:
            raise MissingRequestError("Sign request not set")

        checks = self._evaluator.evaluate(request)
        result = self._aggregator.aggregate(checks)
        verdict = build_verdict(result, checks, clock=self._clock)

        if verdict.status != SignStatus.APPROVED:
            primary = primary_check(checks)
            primary_reason = primary.reason if primary else None
            logger.warning(
                f"Sign attempt {verdict.status.value} for {request.username!r} "
                f"from {request.ip_address}: risk={verdict.overall_risk.name} "
                f"weight={verdict.total_weight} primary={primary_reason!r}"
            )
        else:
            logger.debug(verdict.format_summary())

        return verdict

    def get_check_info(self) -> List[dict]:
        """
        Get information about registered checks.

        Useful for diagnostics and monitoring.
        """
        return [
            {
                "name": c.meta.name,
                "description": c.meta.description,
            }
            for c in self._evaluator.checks
        ]

    def health_check(self) -> dict:
        """Report configuration and threat data status."""
        return {
            "status": "OK",
            "timestamp": self._clock().isoformat(),
            "check_count": len(self._evaluator.checks),
            "checks": [c.meta.name for c in self._evaluator.checks],
            "threat_intel": self._threat_intel.summary(),
            "config": {
                "permissive_mode": self._config.leniency.permissive_mode,
                "critical_weight_threshold": self._config.aggregation.critical_weight_threshold,
            },
        }


# ============================================================
# REQUEST-SCOPED TWO-STEP PROTOCOL
# ============================================================

class ProcessorState(str, Enum):
    """States of a SignRequestProcessor."""

    IDLE = "IDLE"
    REQUEST_SET = "REQUEST_SET"
    EVALUATED = "EVALUATED"


class SignRequestProcessor:
    """
    Set-then-process wrapper around a shared SignGuard.

    Create one per incoming request. The held request is
    the only mutable field and is guarded by a lock.

    Usage:
        processor = SignRequestProcessor(guard)
        processor.set_request(request)
        verdict = processor.process()
    """

    def __init__(self, guard: SignGuard):
        self._guard = guard
        self._lock = threading.Lock()
        self._request: Optional[SignRequest] = None
        self._state = ProcessorState.IDLE

    @property
    def state(self) -> ProcessorState:
        with self._lock:
            return self._state

    def set_request(self, request: SignRequest) -> None:
        """Hold a request for processing. Replaces any earlier one."""
        with self._lock:
            self._request = request
            self._state = ProcessorState.REQUEST_SET

    def process(self) -> Verdict:
        """
        Evaluate the held request once.

        The request is released after evaluation. Without a
        held request (never set, or already processed) the
        fail-closed verdict is returned and the state does
        not change.
        """
        with self._lock:
            request = self._request
            if request is None:
                logger.error("process() called without a pending request")
                return self._guard.evaluate(None)

            verdict = self._guard.evaluate(request)
            self._request = None
            self._state = ProcessorState.EVALUATED
            return verdict


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def create_guard(
    config: Optional[SignGuardConfig] = None,
    threat_intel: Optional[ThreatIntelStore] = None,
) -> SignGuard:
    """
    Create a new Sign Guard instance.

    Args:
        config: Optional configuration
        threat_intel: Optional threat data

    Returns:
        Configured SignGuard instance
    """
    return SignGuard(config=config, threat_intel=threat_intel)


def evaluate_sign_request(
    guard: SignGuard,
    request: SignRequest,
) -> Verdict:
    """Evaluate a sign attempt using the guard."""
    return guard.evaluate(request)


def is_sign_allowed(
    guard: SignGuard,
    request: SignRequest,
) -> bool:
    """
    Quick check if a sign attempt may proceed.

    Returns True only if APPROVED.
    """
    return guard.evaluate(request).status == SignStatus.APPROVED
