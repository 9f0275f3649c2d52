"""Local JSON file record store.

The file is a small key-value document, playing the part browser local
storage plays for the web client. Records live under a single versioned key
as a list, newest first.
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Optional

from lumibiz.domain.entities import Principal, Record, RecordDraft
from lumibiz.storage.base import RecordStore
from lumibiz.storage.mappers import document_to_record, record_to_document

logger = logging.getLogger(__name__)

STORAGE_KEY = "lumibiz_transactions_v1"


class LocalRecordStore(RecordStore):
    """Single-user record store kept in a JSON file.

    The principal argument is ignored: local data is not partitioned by user.
    Each mutation reads the full collection, computes the new collection and
    writes it back in one piece.
    """

    def __init__(self, path: str | Path, storage_key: str = STORAGE_KEY):
        self.path = Path(path)
        self.storage_key = storage_key

    def _read_document(self) -> dict[str, Any]:
        """Read the whole key-value document, or an empty one."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as e:
            logger.warning("Ignoring unreadable local store %s: %s", self.path, e)
            return {}

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring malformed local store %s: %s", self.path, e)
            return {}

        if not isinstance(document, dict):
            logger.warning("Ignoring local store %s: expected a JSON object", self.path)
            return {}
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")

    def _load(self) -> list[Record]:
        entries = self._read_document().get(self.storage_key)
        if entries is None:
            return []
        if not isinstance(entries, list):
            logger.warning("Ignoring '%s' in %s: expected a list", self.storage_key, self.path)
            return []

        records = []
        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning("Skipping malformed local record: %r", entry)
                continue
            try:
                records.append(document_to_record(entry))
            except ValueError as e:
                logger.warning("Skipping malformed local record: %s", e)
        return records

    def _save(self, records: list[Record]) -> None:
        document = self._read_document()
        document[self.storage_key] = [record_to_document(record) for record in records]
        self._write_document(document)

    def list_records(self, principal: Optional[Principal] = None) -> list[Record]:
        """List all stored records in stored order (newest first)."""
        return self._load()

    def create_record(self, principal: Optional[Principal], draft: RecordDraft) -> Record:
        """Prepend a new record with a locally generated id."""
        record = draft.with_id(str(uuid.uuid4()))
        self._save([record, *self._load()])
        return record

    def delete_record(self, principal: Optional[Principal], record_id: str) -> None:
        """Remove the record with the given id, if present."""
        current = self._load()
        remaining = [record for record in current if record.id != record_id]
        if len(remaining) == len(current):
            return
        self._save(remaining)
