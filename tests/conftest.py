"""Shared pytest fixtures for lumibiz tests."""

from decimal import Decimal
import pytest

from lumibiz.domain.entities import Principal, RecordDraft, RecordKind, SessionContext
from lumibiz.domain.records import RecordService
from lumibiz.storage.gateway import PersistenceGateway
from lumibiz.storage.local import LocalRecordStore
from lumibiz.storage.sqlalchemy_store import SQLAlchemyRecordStore


@pytest.fixture
def store_path(tmp_path):
    """Path of a local JSON store file that does not exist yet."""
    return tmp_path / "store.json"


@pytest.fixture
def local_store(store_path):
    """Create a LocalRecordStore backed by a temporary file."""
    return LocalRecordStore(store_path)


@pytest.fixture
def remote_url(tmp_path):
    """SQLAlchemy URL of a temporary SQLite database."""
    return f"sqlite:///{tmp_path / 'remote.db'}"


@pytest.fixture
def remote_store(remote_url):
    """Create a SQLAlchemyRecordStore on a temporary SQLite database."""
    store = SQLAlchemyRecordStore(remote_url)
    yield store
    store.disconnect()


@pytest.fixture
def gateway(local_store, remote_store):
    """Create a PersistenceGateway with both stores configured."""
    return PersistenceGateway(local_store=local_store, remote_store=remote_store)


@pytest.fixture
def alice():
    return Principal(id="alice", display_name="Alice")


@pytest.fixture
def local_session():
    """Session with nobody signed in."""
    return SessionContext(principal=None, remote_available=False)


@pytest.fixture
def remote_session(alice):
    """Session for a signed-in principal with a reachable remote store."""
    return SessionContext(principal=alice, remote_available=True)


@pytest.fixture
def record_service(gateway):
    """Create a RecordService over the test gateway."""
    return RecordService(gateway)


@pytest.fixture
def make_draft():
    """Factory for RecordDrafts with sensible defaults."""

    def _make_draft(**overrides):
        fields = {
            "date": "2024-01-15",
            "shop_name": "Rahim Electronics",
            "category": "9W",
            "quantity": 3,
            "cost_price": Decimal("80"),
            "sell_price": Decimal("120"),
            "kind": RecordKind.SALE,
            "notes": "",
        }
        fields.update(overrides)
        return RecordDraft(**fields)

    return _make_draft


@pytest.fixture
def make_record(make_draft):
    """Factory for persisted-looking Records."""
    counter = iter(range(1, 10_000))

    def _make_record(record_id=None, **overrides):
        return make_draft(**overrides).with_id(record_id or f"rec-{next(counter)}")

    return _make_record


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
