"""
Sign Guard - Base Check.

============================================================
PURPOSE
============================================================
Abstract base class for all security checks.

Each check looks at one aspect of a sign request. Checks are:
- Fast (no I/O)
- Stateless (configuration only, fixed at construction)
- Deterministic (same input = same findings)
- Fail-closed (errors propagate as CheckError, which the
  engine turns into a rejection)

============================================================
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from ..geo import ZoneMatch
from ..types import (
    CheckError,
    RiskTier,
    SecurityCheck,
    SignRequest,
)


# ============================================================
# CHECK INTERFACE
# ============================================================

@dataclass
class CheckMeta:
    """
    Metadata about a check.
    """
    name: str
    """Check name."""

    description: str
    """What this check looks for."""


@dataclass
class CheckContext:
    """
    Scratch state shared by the checks of ONE evaluation.

    Created by the evaluator per call and discarded with it.
    """

    blocked_match: Optional[ZoneMatch] = None
    """Blocked zone hit by the blocked-location check, if any."""


class BaseCheck(ABC):
    """
    Abstract base class for security checks.

    Each check:
    1. Receives the SignRequest and the per-call CheckContext
    2. Performs its category-specific test
    3. Returns zero or more SecurityCheck findings
    """

    @property
    @abstractmethod
    def meta(self) -> CheckMeta:
        """Get check metadata."""
        pass

    @abstractmethod
    def _evaluate(
        self,
        request: SignRequest,
        context: CheckContext,
    ) -> List[SecurityCheck]:
        """
        Internal check logic.

        Subclasses implement this method.
        """
        pass

    def run(
        self,
        request: SignRequest,
        context: CheckContext,
    ) -> List[SecurityCheck]:
        """
        Execute the check.

        Any exception is wrapped in CheckError so the engine
        knows which check failed.

        Raises:
            CheckError: If the check could not complete
        """
        try:
            return list(self._evaluate(request, context))
        except CheckError:
            raise
        except Exception as e:
            raise CheckError(self.meta.name, e) from e

    def finding(
        self,
        risk_tier: RiskTier,
        reason: str,
        weight: int,
    ) -> SecurityCheck:
        """Create a finding attributed to this check."""
        return SecurityCheck(
            risk_tier=risk_tier,
            reason=reason,
            weight=weight,
            check_name=self.meta.name,
        )
