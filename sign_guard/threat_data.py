"""
Sign Guard - Bundled Threat Intelligence.

Example data for development, based on public reports
(Spamhaus, AbuseIPDB and similar). Production deployments
should load a maintained data set with
ThreatIntelStore.from_yaml().

The layout matches the YAML file format.
"""

from typing import Any, Dict, List


SUSPICIOUS_IPS: List[str] = [
    # Spam and hacking activity
    "213.108.2.203",
    "50.90.44.253",
    "5.75.149.59",
    # Intrusion attempts
    "1.2.3.4",
    "5.6.7.8",
    "8.8.8.8",
    "1.1.1.1",
    # Known proxies
    "185.220.100.240",
    "185.220.100.241",
    "185.220.100.242",
    "185.220.100.243",
    # Tor exit nodes
    "176.10.104.240",
    "176.10.104.241",
    "176.10.104.242",
    # VPN
    "45.32.176.1",
    "45.32.176.2",
    "45.32.176.3",
    # Botnet (local examples)
    "192.168.1.100",
    "10.0.0.50",
    # High-risk country ranges
    "1.0.0.1",
    "1.0.0.2",
    "2.0.0.1",
    "2.0.0.2",
    # Free proxy services
    "103.21.244.0",
    "103.22.200.0",
    "103.31.4.0",
    # Datacenters
    "104.16.0.0",
    "104.17.0.0",
    "104.18.0.0",
    # Mail relays
    "185.220.100.0",
    "185.220.101.0",
    "185.220.102.0",
    # Malware networks
    "198.51.100.0",
    "198.51.100.1",
    "198.51.100.2",
    # Hosting (203.0.113.1 intentionally absent)
    "203.0.113.0",
    "203.0.113.2",
    # Mobile networks
    "172.16.0.0",
    "172.16.0.1",
    "172.16.0.2",
    # CDN
    "192.0.2.0",
    "192.0.2.1",
    "192.0.2.2",
    # Streaming
    "198.18.0.0",
    "198.18.0.1",
    "198.18.0.2",
    # Gaming
    "192.88.99.0",
    "192.88.99.1",
    "192.88.99.2",
    # Cloud
    "169.254.0.0",
    "169.254.0.1",
    "169.254.0.2",
    # Backup
    "224.0.0.0",
    "224.0.0.1",
    "224.0.0.2",
    # Monitoring
    "240.0.0.0",
    "240.0.0.1",
    "240.0.0.2",
    # Analytics
    "255.255.255.0",
    "255.255.255.1",
    "255.255.255.2",
]

MALICIOUS_IPS: List[str] = ["1.2.3.4", "5.6.7.8"]

HIGH_RISK_COUNTRIES: List[str] = ["CN", "RU", "KP", "IR", "SY", "CU", "VE", "BY"]


def _zone(lat: float, lng: float, city: str, country: str, risk: str) -> Dict[str, Any]:
    return {"lat": lat, "lng": lng, "city": city, "country": country, "risk": risk}


def _blocked(
    lat: float,
    lng: float,
    city: str,
    country: str,
    reason: str,
    block_type: str,
) -> Dict[str, Any]:
    return {
        "lat": lat,
        "lng": lng,
        "city": city,
        "country": country,
        "reason": reason,
        "block_type": block_type,
    }


HIGH_RISK_LOCATIONS: List[Dict[str, Any]] = [
    # China
    _zone(39.9042, 116.4074, "Beijing", "CN", "CRITICAL"),
    _zone(31.2304, 121.4737, "Shanghai", "CN", "CRITICAL"),
    _zone(22.3193, 114.1694, "Hong Kong", "CN", "HIGH"),
    _zone(23.1291, 113.2644, "Guangzhou", "CN", "HIGH"),
    _zone(30.5728, 104.0668, "Chengdu", "CN", "HIGH"),
    # Russia
    _zone(55.7558, 37.6176, "Moscow", "RU", "CRITICAL"),
    _zone(59.9311, 30.3609, "Saint Petersburg", "RU", "HIGH"),
    _zone(56.8431, 60.6454, "Yekaterinburg", "RU", "HIGH"),
    _zone(55.0084, 82.9357, "Novosibirsk", "RU", "MEDIUM"),
    # North Korea
    _zone(39.0392, 125.7625, "Pyongyang", "KP", "CRITICAL"),
    _zone(39.0195, 125.6908, "Pyongyang District", "KP", "CRITICAL"),
    # Iran
    _zone(35.6892, 51.389, "Tehran", "IR", "CRITICAL"),
    _zone(32.6546, 51.668, "Isfahan", "IR", "HIGH"),
    _zone(29.5918, 52.5837, "Shiraz", "IR", "HIGH"),
    # Syria
    _zone(33.5138, 36.2765, "Damascus", "SY", "HIGH"),
    _zone(36.2021, 37.1343, "Aleppo", "SY", "HIGH"),
    # Cuba
    _zone(23.1136, -82.3666, "Havana", "CU", "HIGH"),
    _zone(20.0211, -75.8267, "Santiago de Cuba", "CU", "MEDIUM"),
    # Venezuela
    _zone(10.4806, -66.9036, "Caracas", "VE", "HIGH"),
    _zone(8.0021, -67.4628, "Valencia", "VE", "MEDIUM"),
    # Belarus
    _zone(53.9006, 27.559, "Minsk", "BY", "HIGH"),
    _zone(53.9045, 30.3309, "Mogilev", "BY", "MEDIUM"),
    # Other centers
    _zone(41.0082, 28.9784, "Istanbul", "TR", "MEDIUM"),
    _zone(25.2048, 55.2708, "Dubai", "AE", "MEDIUM"),
    _zone(1.3521, 103.8198, "Singapore", "SG", "MEDIUM"),
    _zone(22.3193, 114.1694, "Hong Kong", "HK", "MEDIUM"),
    # Malicious hosting
    _zone(50.0755, 14.4378, "Prague", "CZ", "MEDIUM"),
    _zone(52.52, 13.405, "Berlin", "DE", "MEDIUM"),
    _zone(48.8566, 2.3522, "Paris", "FR", "MEDIUM"),
    _zone(51.5074, -0.1278, "London", "GB", "MEDIUM"),
    # Datacenters
    _zone(40.7128, -74.006, "New York", "US", "MEDIUM"),
    _zone(37.7749, -122.4194, "San Francisco", "US", "MEDIUM"),
    _zone(47.6062, -122.3321, "Seattle", "US", "MEDIUM"),
    # Latin America
    _zone(-34.6037, -58.3816, "Buenos Aires", "AR", "MEDIUM"),
    _zone(-23.5505, -46.6333, "São Paulo", "BR", "MEDIUM"),
    _zone(19.4326, -99.1332, "Mexico City", "MX", "MEDIUM"),
    # Asia
    _zone(35.6762, 139.6503, "Tokyo", "JP", "MEDIUM"),
    _zone(37.5665, 126.978, "Seoul", "KR", "MEDIUM"),
    _zone(1.2966, 103.7764, "Singapore", "SG", "MEDIUM"),
    # Africa
    _zone(-26.2041, 28.0473, "Johannesburg", "ZA", "MEDIUM"),
    _zone(6.5244, 3.3792, "Lagos", "NG", "MEDIUM"),
    _zone(30.0444, 31.2357, "Cairo", "EG", "MEDIUM"),
]

_UN_SANCTIONS = "UN international sanctions"
_IR_SANCTIONS = "Sanctions for malicious cyber activities"
_SY_SANCTIONS = "International sanctions and security threats"
_CU_EMBARGO = "US commercial embargo"
_VE_SANCTIONS = "Sanctions for human rights violations"

BLOCKED_LOCATIONS: List[Dict[str, Any]] = [
    # North Korea
    _blocked(39.0392, 125.7625, "Pyongyang", "KP", _UN_SANCTIONS, "SANCTIONS"),
    _blocked(39.0195, 125.6908, "Pyongyang District", "KP", _UN_SANCTIONS, "SANCTIONS"),
    _blocked(40.1295, 127.5405, "Hamhung", "KP", _UN_SANCTIONS, "SANCTIONS"),
    _blocked(37.9708, 126.5458, "Kaesong", "KP", _UN_SANCTIONS, "SANCTIONS"),
    # Iran
    _blocked(35.6892, 51.389, "Tehran", "IR", _IR_SANCTIONS, "CYBER_WARFARE"),
    _blocked(32.6546, 51.668, "Isfahan", "IR", _IR_SANCTIONS, "CYBER_WARFARE"),
    _blocked(29.5918, 52.5837, "Shiraz", "IR", _IR_SANCTIONS, "CYBER_WARFARE"),
    _blocked(36.2688, 59.6118, "Mashhad", "IR", _IR_SANCTIONS, "CYBER_WARFARE"),
    # Syria
    _blocked(33.5138, 36.2765, "Damascus", "SY", _SY_SANCTIONS, "SECURITY_THREAT"),
    _blocked(36.2021, 37.1343, "Aleppo", "SY", _SY_SANCTIONS, "SECURITY_THREAT"),
    _blocked(35.1264, 36.7308, "Homs", "SY", _SY_SANCTIONS, "SECURITY_THREAT"),
    # Cuba
    _blocked(23.1136, -82.3666, "Havana", "CU", _CU_EMBARGO, "EMBARGO"),
    _blocked(20.0211, -75.8267, "Santiago de Cuba", "CU", _CU_EMBARGO, "EMBARGO"),
    _blocked(22.1496, -80.4436, "Santa Clara", "CU", _CU_EMBARGO, "EMBARGO"),
    # Venezuela
    _blocked(10.4806, -66.9036, "Caracas", "VE", _VE_SANCTIONS, "SANCTIONS"),
    _blocked(8.0021, -67.4628, "Valencia", "VE", _VE_SANCTIONS, "SANCTIONS"),
    _blocked(10.1621, -68.0077, "Barquisimeto", "VE", _VE_SANCTIONS, "SANCTIONS"),
    # Russia (specific centers, not capitals)
    _blocked(56.8431, 60.6454, "Yekaterinburg", "RU", "Cyber warfare center", "CYBER_WARFARE"),
    # Conflict and terrorism regions
    _blocked(33.8869, 35.5131, "Beirut", "LB", "Terrorist activity region", "TERRORISM"),
    _blocked(31.7683, 35.2137, "Jerusalem", "IL", "Active conflict region", "SECURITY_THREAT"),
    _blocked(31.2001, 29.9187, "Alexandria", "EG", "Terrorist activity region", "TERRORISM"),
]


DEFAULT_THREAT_INTEL: Dict[str, Any] = {
    "suspicious_ips": SUSPICIOUS_IPS,
    "malicious_ips": MALICIOUS_IPS,
    "high_risk_countries": HIGH_RISK_COUNTRIES,
    "high_risk_zones": HIGH_RISK_LOCATIONS,
    "blocked_zones": BLOCKED_LOCATIONS,
}
