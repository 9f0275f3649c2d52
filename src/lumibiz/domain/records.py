"""Record domain service."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from lumibiz.domain import errors
from lumibiz.domain.entities import Record, RecordDraft, RecordKind, SessionContext
from lumibiz.domain.summary import filter_by_date_range

if TYPE_CHECKING:
    from lumibiz.storage.gateway import PersistenceGateway


def parse_kind(kind: str | RecordKind) -> RecordKind:
    """Parse a record kind, case-insensitively.

    Raises:
        ValidationError: If the kind is not SALE or REPLACEMENT
    """
    if isinstance(kind, RecordKind):
        return kind
    try:
        return RecordKind(kind.strip().upper())
    except (ValueError, AttributeError):
        raise errors.ValidationError(errors.invalid_record_kind(str(kind)))


class RecordService:
    """Service for recording sales and replacements."""

    def __init__(self, gateway: PersistenceGateway):
        """Initialize record service.

        Args:
            gateway: PersistenceGateway instance
        """
        self.gateway = gateway

    def build_draft(
        self,
        date: str,
        shop_name: str,
        category: str,
        quantity: int,
        cost_price: Decimal,
        sell_price: Decimal,
        kind: str | RecordKind = RecordKind.SALE,
        notes: Optional[str] = None,
    ) -> RecordDraft:
        """Validate user input and build a RecordDraft.

        Args:
            date: Record date in YYYY-MM-DD form
            shop_name: Shop the units were sold to or replaced for
            category: Product variant, e.g. '9W'
            quantity: Number of units, must be positive
            cost_price: Purchase price per unit, must not be negative
            sell_price: Selling price per unit, must not be negative
            kind: SALE or REPLACEMENT
            notes: Optional free text

        Returns:
            RecordDraft ready to be persisted

        Raises:
            ValidationError: If any field is invalid
        """
        try:
            parsed = datetime.strptime(date, "%Y-%m-%d")
        except (TypeError, ValueError):
            raise errors.ValidationError(f"Invalid date '{date}': expected YYYY-MM-DD")
        # strptime accepts '2024-1-5'; string comparison needs zero padding
        if parsed.strftime("%Y-%m-%d") != date:
            raise errors.ValidationError(f"Invalid date '{date}': expected YYYY-MM-DD")

        shop_name = (shop_name or "").strip()
        if not shop_name:
            raise errors.ValidationError("Shop name is required")

        category = (category or "").strip()
        if not category:
            raise errors.ValidationError("Category is required")

        if quantity <= 0:
            raise errors.ValidationError(f"Quantity must be positive, got {quantity}")
        if cost_price < 0:
            raise errors.ValidationError(f"Cost price cannot be negative, got {cost_price}")
        if sell_price < 0:
            raise errors.ValidationError(f"Sell price cannot be negative, got {sell_price}")

        return RecordDraft(
            date=date,
            shop_name=shop_name,
            category=category,
            quantity=quantity,
            cost_price=Decimal(cost_price),
            sell_price=Decimal(sell_price),
            kind=parse_kind(kind),
            notes=notes or "",
        )

    def create_record(self, session: SessionContext, draft: RecordDraft) -> Record:
        """Persist a validated draft.

        Raises:
            StorageError: If the remote store rejects the write
        """
        return self.gateway.create_record(session, draft)

    def list_records(
        self,
        session: SessionContext,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[Record]:
        """List records for the session, optionally within a date range."""
        records = self.gateway.list_records(session)
        if start_date is None and end_date is None:
            return records
        return filter_by_date_range(records, start_date=start_date, end_date=end_date)

    def delete_record(self, session: SessionContext, record_id: str) -> None:
        """Delete a record by id.

        Raises:
            StorageError: If the remote store rejects the delete
        """
        self.gateway.delete_record(session, record_id)
