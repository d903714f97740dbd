import json
from collections.abc import Iterator

from netanon.anonymization.exceptions import MappingImportError
from netanon.logging.logger import Log


class MappingStore:
    """Original substring -> anonymized replacement, owned by one engine.

    Lookups are one-directional. The store gives a session consistent
    replacements and can be exported and imported as a JSON object.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def __contains__(self, original: object) -> bool:
        return original in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, original: str) -> str | None:
        return self._entries.get(original)

    def set(self, original: str, anonymized: str) -> None:
        self._entries[original] = anonymized

    def values(self) -> Iterator[str]:
        return iter(self._entries.values())

    def snapshot(self) -> dict[str, str]:
        """Point-in-time copy, safe for the caller to mutate."""
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def export_json(self) -> str:
        return json.dumps(self._entries, indent=2)

    def import_json(self, text: str) -> None:
        """Replace the whole store with the JSON object in *text*.

        Raises:
            MappingImportError: if *text* is not a JSON object. The store
                is left untouched in that case.
        """
        try:
            parsed = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise MappingImportError(f"Failed to import mappings: {exc}") from exc
        if not isinstance(parsed, dict):
            raise MappingImportError(
                f"Failed to import mappings: expected a JSON object, got {type(parsed).__name__}"
            )
        self._entries = parsed
        Log.debug("Imported anonymization mappings", count=len(parsed))
