"""
Sign Guard - Risk Evaluator.

Runs the fixed battery of checks against one request and
collects their findings in declaration order.
"""

import logging
from typing import List

from .checks import (
    BaseCheck,
    BlockedLocationCheck,
    CheckContext,
    HighRiskLocationCheck,
    IpReputationCheck,
    TermsAcceptedCheck,
    UserAgentCheck,
    UsernamePatternCheck,
)
from .config import SignGuardConfig
from .threat_intel import ThreatIntelStore
from .types import SecurityCheck, SignRequest


logger = logging.getLogger(__name__)


class RiskEvaluator:
    """
    Evaluates one sign request against every check.

    Holds configuration only; safe to share across threads.
    """

    def __init__(
        self,
        config: SignGuardConfig,
        threat_intel: ThreatIntelStore,
    ):
        self._config = config
        self._threat_intel = threat_intel
        self._checks: List[BaseCheck] = []

        self._init_checks()

    def _init_checks(self) -> None:
        """Initialize all checks in declaration order."""
        # Order matters: the high-risk check reads the blocked-zone hit,
        # and ties between equal tiers surface the earliest reason.
        weights = self._config.weights
        leniency = self._config.leniency
        self._checks = [
            IpReputationCheck(self._threat_intel, weights, leniency),
            BlockedLocationCheck(self._threat_intel, weights),
            HighRiskLocationCheck(self._threat_intel, weights),
            TermsAcceptedCheck(weights),
            UsernamePatternCheck(weights, self._config.reserved_usernames),
            UserAgentCheck(
                weights,
                leniency,
                bot_patterns=self._config.bot_user_agent_patterns,
                cli_patterns=self._config.cli_user_agent_patterns,
            ),
        ]

    @property
    def checks(self) -> List[BaseCheck]:
        return list(self._checks)

    def evaluate(self, request: SignRequest) -> List[SecurityCheck]:
        """
        Run every check against the request.

        Args:
            request: The sign attempt

        Returns:
            Findings in check declaration order

        Raises:
            CheckError: If any check fails
        """
        context = CheckContext()
        findings: List[SecurityCheck] = []

        for check in self._checks:
            findings.extend(check.run(request, context))

        logger.debug(
            f"Evaluated {request.username!r} from {request.ip_address}: "
            f"{len(findings)} finding(s)"
        )
        return findings
