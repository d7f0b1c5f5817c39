"""
Sign Guard - Network Checks.

CHECKS:
- IP reputation: suspicious list, malicious list, private ranges
- User agent: bots, crawlers, scrapers and command-line clients
"""

import ipaddress
import logging
import re
from typing import List, Optional, Sequence, Union

from ..config import PRIVATE_NETWORKS, CheckWeights, LeniencyConfig
from ..threat_intel import ThreatIntelStore
from ..types import RiskTier, SecurityCheck, SignRequest
from .base import BaseCheck, CheckContext, CheckMeta


logger = logging.getLogger(__name__)

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


def _compile_any(patterns: Sequence[str]) -> Optional["re.Pattern[str]"]:
    if not patterns:
        return None
    return re.compile("|".join(re.escape(p) for p in patterns), re.IGNORECASE)


class IpReputationCheck(BaseCheck):
    """
    Flags addresses with a bad reputation.

    An address is suspicious if it is on the suspicious list,
    on the known-malicious list, or (unless private addresses
    are exempt) inside a private range.
    """

    def __init__(
        self,
        threat_intel: ThreatIntelStore,
        weights: CheckWeights,
        leniency: LeniencyConfig,
    ):
        self._threat_intel = threat_intel
        self._weight = weights.suspicious_ip
        self._private_exempt = leniency.private_ips_exempt
        self._private_networks: List[IPNetwork] = [
            ipaddress.ip_network(n) for n in PRIVATE_NETWORKS
        ]
        self._exempt_networks: List[IPNetwork] = [
            ipaddress.ip_network(n, strict=False) for n in leniency.private_ip_exemptions
        ]

    @property
    def meta(self) -> CheckMeta:
        return CheckMeta(
            name="IpReputationCheck",
            description="Suspicious, malicious and private-range client addresses",
        )

    def _evaluate(self, request: SignRequest, context: CheckContext) -> List[SecurityCheck]:
        ip = (request.ip_address or "").strip()

        if (
            self._threat_intel.is_suspicious_ip(ip)
            or (not self._private_exempt and self.is_private_ip(ip))
            or self._threat_intel.is_malicious_ip(ip)
        ):
            return [self.finding(RiskTier.HIGH, "Suspicious IP detected", self._weight)]

        return []

    def is_private_ip(self, ip: str) -> bool:
        """
        Whether the address lies in a private range and is not
        covered by an exemption network.

        Unparseable addresses are not private.
        """
        try:
            address = ipaddress.ip_address(ip)
        except ValueError:
            logger.debug(f"Unparseable client address: {ip!r}")
            return False

        if any(address in network for network in self._exempt_networks):
            return False

        return any(address in network for network in self._private_networks)


class UserAgentCheck(BaseCheck):
    """
    Flags automation signatures in the user agent.

    curl and wget are only flagged when command-line agents
    are not exempt.
    """

    def __init__(
        self,
        weights: CheckWeights,
        leniency: LeniencyConfig,
        bot_patterns: Sequence[str],
        cli_patterns: Sequence[str],
    ):
        self._weight = weights.suspicious_user_agent
        patterns = list(bot_patterns)
        if not leniency.cli_user_agents_exempt:
            patterns.extend(cli_patterns)
        self._pattern = _compile_any(patterns)

    @property
    def meta(self) -> CheckMeta:
        return CheckMeta(
            name="UserAgentCheck",
            description="Bot, crawler, scraper and command-line user agents",
        )

    def _evaluate(self, request: SignRequest, context: CheckContext) -> List[SecurityCheck]:
        if not request.user_agent or self._pattern is None:
            return []

        if self._pattern.search(request.user_agent):
            return [self.finding(RiskTier.HIGH, "Suspicious user agent detected", self._weight)]

        return []
