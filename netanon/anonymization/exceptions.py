class AnonymizationError(Exception):
    """Base exception for all anonymization errors."""


class MappingImportError(AnonymizationError):
    """Raised when serialized mappings cannot be parsed."""


class AnonymizationConfigError(AnonymizationError):
    """Raised when an AnonymizationConfig is invalid."""
