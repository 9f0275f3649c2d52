"""Storage factory functions for creating record stores and the gateway."""

import os
from pathlib import Path
from typing import Optional

from lumibiz.storage.gateway import PersistenceGateway
from lumibiz.storage.local import LocalRecordStore
from lumibiz.storage.sqlalchemy_store import SQLAlchemyRecordStore


def create_local_store(store_path: Optional[str] = None) -> LocalRecordStore:
    """Create a local JSON record store.

    Args:
        store_path: Path to the JSON store file. If None, checks LUMIBIZ_STORE_PATH
            environment variable, then defaults to ~/.lumibiz/store.json

    Returns:
        LocalRecordStore instance
    """
    if store_path is None:
        # Check environment variable
        store_path = os.environ.get("LUMIBIZ_STORE_PATH")

    if store_path is None:
        # Default to ~/.lumibiz/store.json
        home = Path.home()
        store_dir = home / ".lumibiz"
        store_dir.mkdir(exist_ok=True)
        store_path = str(store_dir / "store.json")

    return LocalRecordStore(store_path)


def create_remote_store(remote_url: Optional[str] = None) -> Optional[SQLAlchemyRecordStore]:
    """Create the remote record store, if one is configured.

    Args:
        remote_url: SQLAlchemy URL of the remote store. If None, checks
            LUMIBIZ_REMOTE_URL environment variable.

    Returns:
        SQLAlchemyRecordStore instance, or None when no remote store is configured
    """
    if remote_url is None:
        remote_url = os.environ.get("LUMIBIZ_REMOTE_URL")

    if not remote_url:
        return None
    return SQLAlchemyRecordStore(remote_url)


def create_gateway(
    store_path: Optional[str] = None, remote_url: Optional[str] = None
) -> PersistenceGateway:
    """Create a PersistenceGateway over the configured stores."""
    return PersistenceGateway(
        local_store=create_local_store(store_path),
        remote_store=create_remote_store(remote_url),
    )
