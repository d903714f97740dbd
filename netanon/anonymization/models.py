import datetime
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from netanon.anonymization.exceptions import AnonymizationConfigError
from netanon.config.settings import DEFAULT_HASH_SALT

CIRCULAR_REFERENCE = "[Circular Reference]"

JSONScalar = bool | int | float | str | datetime.date | datetime.time | None
JSONValue = JSONScalar | list[Any] | tuple[Any, ...] | dict[Any, Any]


@dataclass(frozen=True)
class LiteralReplacement:
    """Fixed replacement text, inserted verbatim."""

    text: str

    def render(self, matched: str) -> str:
        return self.text


@dataclass(frozen=True)
class ComputedReplacement:
    """Replacement computed from the matched text by a caller-supplied function."""

    fn: Callable[[str], str]

    def render(self, matched: str) -> str:
        return self.fn(matched)


Replacement = LiteralReplacement | ComputedReplacement


@dataclass(frozen=True)
class CustomRule:
    """Caller-supplied matcher applied after every built-in category."""

    pattern: re.Pattern[str]
    replacement: Replacement

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))
        if not isinstance(self.replacement, (LiteralReplacement, ComputedReplacement)):
            raise AnonymizationConfigError(
                "CustomRule.replacement must be a LiteralReplacement or ComputedReplacement"
            )

    @classmethod
    def literal(cls, pattern: str | re.Pattern[str], text: str) -> "CustomRule":
        return cls(pattern, LiteralReplacement(text))  # type: ignore[arg-type]

    @classmethod
    def computed(
        cls, pattern: str | re.Pattern[str], fn: Callable[[str], str]
    ) -> "CustomRule":
        return cls(pattern, ComputedReplacement(fn))  # type: ignore[arg-type]

    def apply(self, text: str) -> str:
        return self.pattern.sub(lambda m: self.replacement.render(m.group(0)), text)


@dataclass(frozen=True)
class AnonymizationConfig:
    """Per-engine options. Construct a new engine to change them."""

    anonymize_ips: bool = True
    anonymize_account_ids: bool = True
    anonymize_instance_ids: bool = True
    anonymize_vpc_ids: bool = True
    anonymize_subnet_ids: bool = True
    anonymize_security_group_ids: bool = True
    anonymize_transit_gateway_ids: bool = True
    anonymize_route_table_ids: bool = False
    anonymize_internet_gateway_ids: bool = False
    anonymize_nat_gateway_ids: bool = False
    anonymize_vpn_connection_ids: bool = False
    anonymize_vpn_gateway_ids: bool = False
    anonymize_usernames: bool = False
    anonymize_role_names: bool = False
    anonymize_emails: bool = False
    anonymize_domains: bool = False
    preserve_structure: bool = True
    hash_salt: str = DEFAULT_HASH_SALT
    custom_rules: tuple[CustomRule, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.hash_salt, str):
            raise AnonymizationConfigError("hash_salt must be a string")
        if not self.hash_salt:
            object.__setattr__(self, "hash_salt", DEFAULT_HASH_SALT)
        rules = tuple(self.custom_rules)
        for i, rule in enumerate(rules):
            if not isinstance(rule, CustomRule):
                raise AnonymizationConfigError(
                    f"custom_rules[{i}] must be a CustomRule, got {type(rule).__name__}"
                )
        object.__setattr__(self, "custom_rules", rules)


@dataclass
class AnonymizedResult:
    """Output of a structured-data anonymization call."""

    original: Any
    anonymized: Any
    mappings: dict[str, str] = field(default_factory=dict)
