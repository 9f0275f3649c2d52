"""Storage layer for lumibiz application."""

from lumibiz.storage.base import RecordStore
from lumibiz.storage.gateway import PersistenceGateway
from lumibiz.storage.factories import create_gateway

__all__ = ["RecordStore", "PersistenceGateway", "create_gateway"]
