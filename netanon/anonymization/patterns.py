"""Built-in identifier categories, in the order they are applied.

Ordering matters. Addresses, account IDs and resource IDs run before the
ARN-scoped name categories, and custom rules (applied by the engine) run
after all of them.
"""

import re
from dataclasses import dataclass

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"

# A dotted quad followed by "/<len>" is a CIDR block, not a host address.
IPV4_RE = re.compile(rf"\b(?:{_OCTET}\.){{3}}{_OCTET}\b(?!/[0-9])", re.ASCII)
IPV6_RE = re.compile(r"\b(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}\b", re.ASCII)
ACCOUNT_ID_RE = re.compile(r"\b\d{12}\b", re.ASCII)

USER_NAME_RE = re.compile(
    r"(?<=arn:aws:iam::\d{12}:user/)[A-Za-z0-9+=,.@_-]+\b", re.ASCII
)
ROLE_NAME_RE = re.compile(
    r"(?<=arn:aws:iam::\d{12}:role/)[A-Za-z0-9+=,.@_-]+\b", re.ASCII
)

EMAIL_RE = re.compile(
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII
)
DOMAIN_RE = re.compile(
    r"\b(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}\b",
    re.ASCII,
)

# Resource prefix -> sequential-mode category prefix.
RESOURCE_PREFIXES: dict[str, str] = {
    "i": "instance",
    "vpc": "vpc",
    "subnet": "subnet",
    "sg": "sg",
    "tgw": "tgw",
    "rtb": "rtb",
    "igw": "igw",
    "nat": "nat",
    "vpn": "vpn",
    "vgw": "vgw",
}


def resource_id_pattern(resource_prefix: str) -> re.Pattern[str]:
    """Matcher for ``<prefix>-`` followed by 8-17 lowercase hex digits."""
    return re.compile(rf"\b{re.escape(resource_prefix)}-[0-9a-f]{{8,17}}\b", re.ASCII)


@dataclass(frozen=True)
class PatternCategory:
    """One identifier class: what to match and how to label replacements."""

    name: str
    pattern: re.Pattern[str]
    prefix: str  # sequential-mode prefix, e.g. "instance" -> "instance-001"
    toggle: str  # AnonymizationConfig attribute enabling this category


INSTANCE_ID = PatternCategory("instance", resource_id_pattern("i"), "instance", "anonymize_instance_ids")
VPC_ID = PatternCategory("vpc", resource_id_pattern("vpc"), "vpc", "anonymize_vpc_ids")
SUBNET_ID = PatternCategory("subnet", resource_id_pattern("subnet"), "subnet", "anonymize_subnet_ids")
SECURITY_GROUP_ID = PatternCategory("sg", resource_id_pattern("sg"), "sg", "anonymize_security_group_ids")
ACCOUNT_ID = PatternCategory("account", ACCOUNT_ID_RE, "account", "anonymize_account_ids")

BUILTIN_CATEGORIES: tuple[PatternCategory, ...] = (
    PatternCategory("ip", IPV4_RE, "ip", "anonymize_ips"),
    PatternCategory("ipv6", IPV6_RE, "ipv6", "anonymize_ips"),
    ACCOUNT_ID,
    INSTANCE_ID,
    VPC_ID,
    SUBNET_ID,
    SECURITY_GROUP_ID,
    PatternCategory("tgw", resource_id_pattern("tgw"), "tgw", "anonymize_transit_gateway_ids"),
    PatternCategory("rtb", resource_id_pattern("rtb"), "rtb", "anonymize_route_table_ids"),
    PatternCategory("igw", resource_id_pattern("igw"), "igw", "anonymize_internet_gateway_ids"),
    PatternCategory("nat", resource_id_pattern("nat"), "nat", "anonymize_nat_gateway_ids"),
    PatternCategory("vpn", resource_id_pattern("vpn"), "vpn", "anonymize_vpn_connection_ids"),
    PatternCategory("vgw", resource_id_pattern("vgw"), "vgw", "anonymize_vpn_gateway_ids"),
    PatternCategory("user", USER_NAME_RE, "user", "anonymize_usernames"),
    PatternCategory("role", ROLE_NAME_RE, "role", "anonymize_role_names"),
    PatternCategory("email", EMAIL_RE, "email", "anonymize_emails"),
    PatternCategory("domain", DOMAIN_RE, "domain", "anonymize_domains"),
)

# Literal identifiers that qualify a dict key for anonymization.
KEY_SENSITIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    INSTANCE_ID.pattern,
    VPC_ID.pattern,
    SUBNET_ID.pattern,
    SECURITY_GROUP_ID.pattern,
    ACCOUNT_ID.pattern,
)


def enabled_categories(config: object) -> list[PatternCategory]:
    """Built-in categories whose toggle is on in *config*, in apply order."""
    return [c for c in BUILTIN_CATEGORIES if getattr(config, c.toggle)]
