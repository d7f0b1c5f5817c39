"""
Sign Guard - Checks Package.

============================================================
CHECKS
============================================================
Run in this declaration order:

1. IpReputationCheck: suspicious, malicious, private addresses
2. BlockedLocationCheck: coordinates inside a blocked zone
3. HighRiskLocationCheck: coordinates near a high-risk zone
4. TermsAcceptedCheck: terms of use not accepted
5. UsernamePatternCheck: reserved names and odd characters
6. UserAgentCheck: bots, crawlers, command-line clients

============================================================
"""

from .base import (
    BaseCheck,
    CheckMeta,
    CheckContext,
)
from .network import IpReputationCheck, UserAgentCheck
from .location import BlockedLocationCheck, HighRiskLocationCheck
from .identity import TermsAcceptedCheck, UsernamePatternCheck

__all__ = [
    # Base
    "BaseCheck",
    "CheckMeta",
    "CheckContext",
    # Checks
    "IpReputationCheck",
    "BlockedLocationCheck",
    "HighRiskLocationCheck",
    "TermsAcceptedCheck",
    "UsernamePatternCheck",
    "UserAgentCheck",
]
