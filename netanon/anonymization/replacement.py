"""Replacement values for matched identifiers.

Structure-preserving mode derives a value from a salted SHA-256 digest and
shapes it like the original. It is a pure function of (original, salt), so
engines sharing a salt agree without sharing state. Sequential mode numbers
replacements per category prefix and depends on what the store already
holds.
"""

import hashlib
import re
from collections.abc import Iterable
from typing import ClassVar

from netanon.anonymization.patterns import RESOURCE_PREFIXES


def short_hash(original: str, salt: str) -> str:
    """First 8 lowercase hex characters of sha256(original + salt)."""
    return hashlib.sha256((original + salt).encode("utf-8")).hexdigest()[:8]


class ReplacementGenerator:
    _RESOURCE_ID_RE: ClassVar[re.Pattern[str]] = re.compile(
        rf"^({'|'.join(RESOURCE_PREFIXES)})-[0-9a-f]+$"
    )
    _DOTTED_QUAD_RE: ClassVar[re.Pattern[str]] = re.compile(r"^\d+\.\d+\.\d+\.\d+$", re.ASCII)
    _ACCOUNT_ID_RE: ClassVar[re.Pattern[str]] = re.compile(r"^\d{12}$", re.ASCII)

    def __init__(self, preserve_structure: bool, salt: str) -> None:
        self._preserve_structure = preserve_structure
        self._salt = salt

    @property
    def preserve_structure(self) -> bool:
        return self._preserve_structure

    def generate(self, original: str, prefix: str, existing: Iterable[object]) -> str:
        """Build a replacement for *original*.

        Args:
            original: Exact matched substring.
            prefix: Category prefix, e.g. "instance" or "ip".
            existing: Values already in the mapping store. Only sequential
                mode reads them.
        """
        if self._preserve_structure:
            return self.structured(original, prefix, self._salt)
        return self.sequential(prefix, existing)

    @classmethod
    def structured(cls, original: str, prefix: str, salt: str) -> str:
        digest = short_hash(original, salt)

        resource = cls._RESOURCE_ID_RE.match(original)
        if resource:
            return f"{resource.group(1)}-{digest}"

        if cls._DOTTED_QUAD_RE.match(original):
            # Always inside 10.0.0.0/8 so the value reads as anonymized.
            n = int(digest[:6], 16)
            return f"10.{(n >> 16) & 0xFF}.{(n >> 8) & 0xFF}.{n & 0xFF}"

        if cls._ACCOUNT_ID_RE.match(original):
            return str(int(digest, 16)).zfill(12)[:12]

        return f"{prefix}-{digest}"

    @staticmethod
    def sequential(prefix: str, existing: Iterable[object]) -> str:
        marker = f"{prefix}-"
        taken = sum(1 for v in existing if isinstance(v, str) and v.startswith(marker))
        return f"{prefix}-{taken + 1:03d}"
