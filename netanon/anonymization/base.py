from abc import ABC, abstractmethod
from netanon.anonymization.models import AnonymizedResult, JSONValue


class BaseAnonymizer(ABC):
    """Contract for anonymization engines."""

    @abstractmethod
    def anonymize_text(self, text: str) -> str:
        """Replace sensitive identifiers in free text.

        Mappings accumulate across calls; nothing is cleared.
        """

    @abstractmethod
    def anonymize_data(self, data: JSONValue) -> AnonymizedResult:
        """Anonymize every string in a JSON-like value tree.

        Clears the mapping store first, so each call is its own session.

        Returns:
            AnonymizedResult with the input, the anonymized copy and a
            snapshot of the mappings applied.
        """

    @abstractmethod
    def anonymize_flow_logs(self, records: list[JSONValue]) -> list[JSONValue]:
        """Anonymize each flow-log record without clearing mappings."""

    @abstractmethod
    def anonymize_network_topology(self, topology: JSONValue) -> JSONValue:
        """Anonymize a topology graph without clearing mappings."""

    @abstractmethod
    def create_mapping(self, original: str, prefix: str) -> str:
        """Return the stored replacement for *original*, or generate and store one."""

    @abstractmethod
    def get_mappings(self) -> dict[str, str]:
        """Point-in-time copy of the mapping store."""

    @abstractmethod
    def clear_mappings(self) -> None:
        """Empty the mapping store."""

    @abstractmethod
    def export_mappings(self) -> str:
        """Serialize the mapping store as a JSON object string."""

    @abstractmethod
    def import_mappings(self, mappings_json: str) -> None:
        """Replace the mapping store with a previously exported one.

        Raises:
            MappingImportError: on malformed input; the store is unchanged.
        """
