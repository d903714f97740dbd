"""Deterministic, format-preserving anonymizer for cloud network data.

Processing flow for text:
1. Apply each enabled built-in category in a fixed order (addresses,
   account IDs, resource IDs, IAM names, then emails and domains).
2. Route every match through ``create_mapping``. The same substring
   reuses its stored replacement, and a new one is generated and stored.
3. Apply custom rules last, as plain substitutions.

Structured data is walked by ``ValueProcessor``, which sends every string
leaf (and identifier-like dict keys) through the same text pipeline.

Note the clearing asymmetry: ``anonymize_data`` starts a fresh mapping
session on every call, while ``anonymize_text``, ``anonymize_flow_logs``
and ``anonymize_network_topology`` keep accumulating into the current one.
Callers mixing both on one engine should clear or export explicitly.
"""

import json
from typing import Any

from netanon.anonymization.base import BaseAnonymizer
from netanon.anonymization.mapping_store import MappingStore
from netanon.anonymization.models import AnonymizationConfig, AnonymizedResult, JSONValue
from netanon.anonymization.patterns import (
    KEY_SENSITIVE_PATTERNS,
    PatternCategory,
    enabled_categories,
)
from netanon.anonymization.replacement import ReplacementGenerator
from netanon.anonymization.value_processor import ValueProcessor
from netanon.logging.logger import Log


class DataAnonymizer(BaseAnonymizer):
    """Rewrites IPs, account IDs, resource IDs and principal names.

    Not thread-safe: the mapping store is mutable state owned by this
    instance. Use one engine per request or serialize access.
    """

    def __init__(self, config: AnonymizationConfig | None = None) -> None:
        self._config = config or AnonymizationConfig()
        self._categories: list[PatternCategory] = enabled_categories(self._config)
        self._mappings = MappingStore()
        self._generator = ReplacementGenerator(
            preserve_structure=self._config.preserve_structure,
            salt=self._config.hash_salt,
        )
        self._processor = ValueProcessor(self.anonymize_text, KEY_SENSITIVE_PATTERNS)

    @property
    def config(self) -> AnonymizationConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize_text(self, text: str) -> str:
        """Replace sensitive identifiers in *text*.

        Exceptions raised by custom replacement functions propagate as-is.
        """
        if not text:
            return text

        result = text
        for category in self._categories:
            result = self._apply_category(result, category)
        for rule in self._config.custom_rules:
            result = rule.apply(result)
        return result

    def anonymize_data(self, data: JSONValue) -> AnonymizedResult:
        self._mappings.clear()
        anonymized = self._processor.process(data)
        mappings = self._mappings.snapshot()
        Log.info("Anonymized structured data", identifiers=len(mappings))
        return AnonymizedResult(original=data, anonymized=anonymized, mappings=mappings)

    def anonymize_flow_logs(self, records: list[JSONValue]) -> list[JSONValue]:
        anonymized = [self._processor.process(record) for record in records]
        Log.debug(
            "Anonymized flow log records",
            records=len(anonymized),
            identifiers=len(self._mappings),
        )
        return anonymized

    def anonymize_network_topology(self, topology: JSONValue) -> JSONValue:
        anonymized = self._processor.process(topology)
        Log.debug("Anonymized network topology", identifiers=len(self._mappings))
        return anonymized

    def create_mapping(self, original: str, prefix: str) -> str:
        """Return the replacement for *original*, generating it on first use."""
        if original in self._mappings:
            return self._mappings.get(original)  # type: ignore[return-value]
        anonymized = self._generator.generate(original, prefix, self._mappings.values())
        self._mappings.set(original, anonymized)
        return anonymized

    # ------------------------------------------------------------------
    # Mapping store
    # ------------------------------------------------------------------

    def get_mappings(self) -> dict[str, str]:
        return self._mappings.snapshot()

    def clear_mappings(self) -> None:
        self._mappings.clear()
        Log.debug("Cleared anonymization mappings")

    def export_mappings(self) -> str:
        return self._mappings.export_json()

    def import_mappings(self, mappings_json: str) -> None:
        self._mappings.import_json(mappings_json)

    # ------------------------------------------------------------------
    # Text pipeline
    # ------------------------------------------------------------------

    def _apply_category(self, text: str, category: PatternCategory) -> str:
        return category.pattern.sub(
            lambda m: _as_text(self.create_mapping(m.group(0), category.prefix)),
            text,
        )


def _as_text(value: Any) -> str:
    # Imported mappings may hold non-string JSON values.
    if isinstance(value, str):
        return value
    return json.dumps(value)
