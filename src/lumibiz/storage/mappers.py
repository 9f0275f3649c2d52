"""Mapper functions to convert between domain records and stored forms.

Stored documents use the field names of the original browser application
(shopName, bulbType, costPrice, ...) so existing exports stay readable.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from lumibiz.domain import entities as domain
from lumibiz.storage.models import StoredRecord as ORMRecord


def record_to_document(record: domain.Record) -> dict[str, Any]:
    """Convert a domain Record to a JSON-serializable document."""
    document = draft_to_document(record.to_draft())
    return {"id": record.id, **document}


def draft_to_document(draft: domain.RecordDraft) -> dict[str, Any]:
    """Convert a RecordDraft to a JSON-serializable document without id."""
    return {
        "date": draft.date,
        "shopName": draft.shop_name,
        "bulbType": draft.category,
        "quantity": draft.quantity,
        "costPrice": str(draft.cost_price),
        "sellPrice": str(draft.sell_price),
        "type": draft.kind.value,
        "notes": draft.notes or "",
    }


def document_to_record(document: dict[str, Any]) -> domain.Record:
    """Convert a stored document back into a domain Record.

    Raises:
        ValueError: If a field is missing or has the wrong shape
    """
    try:
        return domain.Record(
            id=str(document["id"]),
            date=str(document["date"]),
            shop_name=str(document["shopName"]),
            category=str(document["bulbType"]),
            quantity=_to_quantity(document["quantity"]),
            cost_price=_to_decimal(document["costPrice"]),
            sell_price=_to_decimal(document["sellPrice"]),
            kind=domain.RecordKind(document["type"]),
            notes=str(document.get("notes") or ""),
        )
    except (KeyError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Malformed record document: {e!r}") from e


def record_to_domain(orm_record: ORMRecord) -> domain.Record:
    """Convert SQLAlchemy StoredRecord model to domain Record entity."""
    return domain.Record(
        id=orm_record.id,
        date=orm_record.date,
        shop_name=orm_record.shop_name,
        category=orm_record.category,
        quantity=orm_record.quantity,
        cost_price=_to_decimal(orm_record.cost_price),
        sell_price=_to_decimal(orm_record.sell_price),
        kind=domain.RecordKind(orm_record.kind),
        notes=orm_record.notes or "",
    )


def _to_quantity(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"quantity must be a whole number, got {value!r}")
    quantity = _to_decimal(value)
    if not quantity.is_finite() or quantity != quantity.to_integral_value():
        raise ValueError(f"quantity must be a whole number, got {value!r}")
    return int(quantity)


def _to_decimal(value: Any) -> Decimal:
    # JSON numbers come back as float; go through str to keep the written digits
    if isinstance(value, float):
        value = repr(value)
    return Decimal(value)
