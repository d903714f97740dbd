from collections.abc import Iterable
from dataclasses import fields
from typing import Any

from netanon.anonymization.anonymizer import DataAnonymizer
from netanon.anonymization.base import BaseAnonymizer
from netanon.anonymization.exceptions import AnonymizationConfigError
from netanon.anonymization.models import AnonymizationConfig, CustomRule
from netanon.config.settings import Settings


class AnonymizerFactory:
    """Creates an anonymization engine from application settings."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        custom_rules: Iterable[CustomRule] = (),
        **overrides: Any,
    ) -> BaseAnonymizer:
        """Build a fresh engine with its own empty mapping store.

        Args:
            settings: Environment-driven defaults.
            custom_rules: Rules applied after every built-in category.
            **overrides: Per-request AnonymizationConfig values (for example
                ``preserve_structure=False``) that win over *settings*.

        Raises:
            AnonymizationConfigError: on an unknown override name or an
                invalid resulting config.
        """
        return DataAnonymizer(cls.build_config(settings, custom_rules, **overrides))

    @classmethod
    def build_config(
        cls,
        settings: Settings,
        custom_rules: Iterable[CustomRule] = (),
        **overrides: Any,
    ) -> AnonymizationConfig:
        values = cls._config_values_from_settings(settings)
        known = set(values)
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise AnonymizationConfigError(f"Unknown anonymization options: {unknown}")
        values.update(overrides)
        return AnonymizationConfig(custom_rules=tuple(custom_rules), **values)

    @classmethod
    def _config_values_from_settings(cls, settings: Settings) -> dict[str, Any]:
        values: dict[str, Any] = {
            "preserve_structure": settings.anonymize_preserve_structure,
            "hash_salt": settings.anonymize_hash_salt,
        }
        for f in fields(AnonymizationConfig):
            if f.name.startswith("anonymize_"):
                values[f.name] = getattr(settings, f.name)
        return values
