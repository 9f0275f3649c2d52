"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lumibiz.domain.entities import Principal, Record, RecordDraft


class RecordStore(ABC):
    """Abstract storage backend for records.

    Every call receives the principal of the current session (or None).
    Backends that do not partition by owner ignore it.
    """

    @abstractmethod
    def list_records(self, principal: Optional[Principal]) -> list[Record]:
        """List stored records visible to the principal."""
        pass

    @abstractmethod
    def create_record(self, principal: Optional[Principal], draft: RecordDraft) -> Record:
        """Persist a new record. Returns the record with its assigned id."""
        pass

    @abstractmethod
    def delete_record(self, principal: Optional[Principal], record_id: str) -> None:
        """Delete a record by id. Unknown ids are ignored."""
        pass
