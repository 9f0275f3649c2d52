"""SQLAlchemy models for the remote record store."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class StoredRecord(Base):
    """Record document owned by one principal."""

    __tablename__ = "records"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False)
    date = Column(String(10), nullable=False)
    shop_name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    # Decimal strings exactly as written
    cost_price = Column(String, nullable=False)
    sell_price = Column(String, nullable=False)
    kind = Column(String(16), nullable=False)
    notes = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Queries are always scoped by owner and sorted by date
    __table_args__ = (Index("ix_records_owner_date", "owner_id", "date"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
