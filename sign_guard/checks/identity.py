"""
Sign Guard - Identity Checks.

CHECKS:
- Terms of use not accepted
- Suspicious username pattern
"""

import re
from typing import List, Sequence

from ..config import CheckWeights
from ..types import RiskTier, SecurityCheck, SignRequest
from .base import BaseCheck, CheckContext, CheckMeta


CONSECUTIVE_DIGITS = re.compile(r"\d{4,}")
DISALLOWED_CHARACTER = re.compile(r"[^A-Za-z0-9_.\-]")


class TermsAcceptedCheck(BaseCheck):
    """Flags attempts that did not accept the terms of use."""

    def __init__(self, weights: CheckWeights):
        self._weight = weights.terms_not_accepted

    @property
    def meta(self) -> CheckMeta:
        return CheckMeta(
            name="TermsAcceptedCheck",
            description="Terms of use not accepted",
        )

    def _evaluate(self, request: SignRequest, context: CheckContext) -> List[SecurityCheck]:
        if request.terms_accepted:
            return []
        return [self.finding(RiskTier.MEDIUM, "Terms of use not accepted", self._weight)]


class UsernamePatternCheck(BaseCheck):
    """
    Flags usernames that look automated or privileged.

    Suspicious when the username:
    1. Equals a reserved name (case-insensitive)
    2. Contains 4 or more consecutive digits
    3. Contains a character outside [A-Za-z0-9_.-]
    """

    def __init__(self, weights: CheckWeights, reserved_usernames: Sequence[str]):
        self._weight = weights.suspicious_username
        self._reserved = frozenset(name.lower() for name in reserved_usernames)

    @property
    def meta(self) -> CheckMeta:
        return CheckMeta(
            name="UsernamePatternCheck",
            description="Reserved names, digit runs and disallowed characters",
        )

    def _evaluate(self, request: SignRequest, context: CheckContext) -> List[SecurityCheck]:
        if self.is_suspicious(request.username or ""):
            return [self.finding(RiskTier.MEDIUM, "Suspicious pattern in username", self._weight)]
        return []

    def is_suspicious(self, username: str) -> bool:
        return (
            username.lower() in self._reserved
            or CONSECUTIVE_DIGITS.search(username) is not None
            or DISALLOWED_CHARACTER.search(username) is not None
        )
