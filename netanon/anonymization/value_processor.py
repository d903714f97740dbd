import datetime
import re
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from netanon.anonymization.models import CIRCULAR_REFERENCE


class ValueProcessor:
    """Walks a JSON-like value tree and anonymizes every string leaf.

    Cycle detection tracks only the containers that are open on the current
    path. A container reached again through its own descendants becomes
    ``CIRCULAR_REFERENCE``. A container shared by two sibling branches is
    processed in full on both paths.
    """

    _SENSITIVE_KEY_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?:id|key|token|secret|password|credential)$", re.IGNORECASE
    )
    _PASSTHROUGH_TYPES: ClassVar[tuple[type, ...]] = (
        bool,
        int,
        float,
        datetime.date,
        datetime.time,
    )

    def __init__(
        self,
        text_pipeline: Callable[[str], str],
        key_patterns: Sequence[re.Pattern[str]],
    ) -> None:
        self._text_pipeline = text_pipeline
        self._key_patterns = tuple(key_patterns)

    def process(self, value: Any, open_ancestors: set[int] | None = None) -> Any:
        if open_ancestors is None:
            open_ancestors = set()

        if value is None or isinstance(value, self._PASSTHROUGH_TYPES):
            return value
        if isinstance(value, str):
            return self._text_pipeline(value)
        if isinstance(value, (list, tuple)):
            return self._process_sequence(value, open_ancestors)
        if isinstance(value, dict):
            return self._process_mapping(value, open_ancestors)
        return value

    def should_anonymize_key(self, key: str) -> bool:
        """Key ends in a sensitive suffix AND contains a literal identifier.

        Descriptive names such as ``instanceId`` are kept; only identifiers
        used as keys are rewritten.
        """
        if not self._SENSITIVE_KEY_RE.search(key):
            return False
        return any(p.search(key) for p in self._key_patterns)

    def _process_sequence(
        self, value: list[Any] | tuple[Any, ...], open_ancestors: set[int]
    ) -> Any:
        marker = id(value)
        if marker in open_ancestors:
            return CIRCULAR_REFERENCE
        open_ancestors.add(marker)
        try:
            items = [self.process(item, open_ancestors) for item in value]
        finally:
            open_ancestors.discard(marker)
        return tuple(items) if isinstance(value, tuple) else items

    def _process_mapping(self, value: dict[Any, Any], open_ancestors: set[int]) -> Any:
        marker = id(value)
        if marker in open_ancestors:
            return CIRCULAR_REFERENCE
        open_ancestors.add(marker)
        try:
            result: dict[Any, Any] = {}
            for key, item in value.items():
                if isinstance(key, str) and self.should_anonymize_key(key):
                    key = self._text_pipeline(key)
                result[key] = self.process(item, open_ancestors)
        finally:
            open_ancestors.discard(marker)
        return result
