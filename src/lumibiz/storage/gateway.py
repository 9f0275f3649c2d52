"""Persistence gateway that picks a record store for each call."""

import logging
from typing import Optional

from lumibiz.domain import errors
from lumibiz.domain.entities import Record, RecordDraft, SessionContext
from lumibiz.storage.base import RecordStore

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Routes record operations to the local or the remote store.

    The store is chosen on every call from the SessionContext passed in:
    a signed-in principal with a reachable remote store uses the remote
    store, anything else uses local storage. A single call is always served
    by exactly one store.

    Failure semantics in remote mode:
    - list_records swallows backend errors and returns an empty list
    - create_record and delete_record raise StorageError
    """

    def __init__(self, local_store: RecordStore, remote_store: Optional[RecordStore] = None):
        """Initialize gateway.

        Args:
            local_store: Store used when there is no remote session
            remote_store: Principal-scoped store, or None if not configured
        """
        self.local_store = local_store
        self.remote_store = remote_store

    def uses_remote(self, session: SessionContext) -> bool:
        """Return True if calls for this session go to the remote store."""
        return self.remote_store is not None and session.is_remote

    def select_store(self, session: SessionContext) -> RecordStore:
        """Return the store serving this session."""
        if self.uses_remote(session):
            return self.remote_store
        return self.local_store

    def list_records(self, session: SessionContext) -> list[Record]:
        """List records for the session.

        Returns:
            Remote mode: the principal's records, newest date first.
            Local mode: all local records, most recently created first.
        """
        store = self.select_store(session)
        if store is self.local_store:
            return store.list_records(session.principal)

        try:
            return store.list_records(session.principal)
        except Exception as e:
            logger.error("Failed to load remote records: %s", e)
            return []

    def create_record(self, session: SessionContext, draft: RecordDraft) -> Record:
        """Persist a new record and return it with its assigned id.

        Raises:
            StorageError: If the remote store rejects the write
        """
        store = self.select_store(session)
        if store is self.local_store:
            return store.create_record(session.principal, draft)

        try:
            return store.create_record(session.principal, draft)
        except Exception as e:
            logger.error("Failed to save remote record: %s", e)
            raise errors.StorageError(errors.create_failed(e)) from e

    def delete_record(self, session: SessionContext, record_id: str) -> None:
        """Delete a record by id. Unknown ids are a no-op.

        Raises:
            StorageError: If the remote store rejects the delete
        """
        store = self.select_store(session)
        if store is self.local_store:
            store.delete_record(session.principal, record_id)
            return

        try:
            store.delete_record(session.principal, record_id)
        except Exception as e:
            logger.error("Failed to delete remote record %s: %s", record_id, e)
            raise errors.StorageError(errors.delete_failed(record_id, e)) from e
