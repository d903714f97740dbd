from netanon.anonymization.anonymizer import DataAnonymizer
from netanon.anonymization.base import BaseAnonymizer
from netanon.anonymization.exceptions import (
    AnonymizationConfigError,
    AnonymizationError,
    MappingImportError,
)
from netanon.anonymization.factory import AnonymizerFactory
from netanon.anonymization.models import (
    AnonymizationConfig,
    AnonymizedResult,
    ComputedReplacement,
    CustomRule,
    LiteralReplacement,
)

__all__ = [
    "AnonymizationConfig",
    "AnonymizationConfigError",
    "AnonymizationError",
    "AnonymizedResult",
    "AnonymizerFactory",
    "BaseAnonymizer",
    "ComputedReplacement",
    "CustomRule",
    "DataAnonymizer",
    "LiteralReplacement",
    "MappingImportError",
]
