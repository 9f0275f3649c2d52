"""Tests for mapper functions between domain records and stored forms."""

from decimal import Decimal

import pytest

from lumibiz.domain.entities import Record, RecordKind
from lumibiz.storage.mappers import (
    document_to_record,
    draft_to_document,
    record_to_document,
    record_to_domain,
)
from lumibiz.storage.models import StoredRecord


class TestDocumentMappers:
    """Tests for JSON document mapping."""

    def test_record_to_document_uses_stored_field_names(self, make_record):
        record = make_record(record_id="r1", cost_price=Decimal("80.50"), notes="cash")
        document = record_to_document(record)

        assert document == {
            "id": "r1",
            "date": "2024-01-15",
            "shopName": "Rahim Electronics",
            "bulbType": "9W",
            "quantity": 3,
            "costPrice": "80.50",
            "sellPrice": "120",
            "type": "SALE",
            "notes": "cash",
        }

    def test_draft_to_document_has_no_id(self, make_draft):
        assert "id" not in draft_to_document(make_draft())

    def test_document_to_record(self, make_record):
        record = make_record(kind=RecordKind.REPLACEMENT, notes="flicker")
        assert document_to_record(record_to_document(record)) == record

    def test_document_to_record_accepts_json_numbers(self):
        record = document_to_record(
            {
                "id": "legacy",
                "date": "2024-02-01",
                "shopName": "Karim Store",
                "bulbType": "12W",
                "quantity": 4,
                "costPrice": 95,
                "sellPrice": 140.75,
                "type": "SALE",
            }
        )
        assert record.cost_price == Decimal("95")
        assert record.sell_price == Decimal("140.75")
        assert record.notes == ""

    def test_document_to_record_rejects_missing_fields(self):
        with pytest.raises(ValueError):
            document_to_record({"id": "x"})

    def test_document_to_record_rejects_bad_values(self):
        with pytest.raises(ValueError):
            document_to_record(
                {
                    "id": "x",
                    "date": "2024-02-01",
                    "shopName": "Karim Store",
                    "bulbType": "12W",
                    "quantity": 1,
                    "costPrice": "eighty",
                    "sellPrice": "120",
                    "type": "SALE",
                }
            )

    @pytest.mark.parametrize("quantity", [2.7, "2.5", True, "NaN", None])
    def test_document_to_record_rejects_fractional_quantity(self, make_record, quantity):
        document = record_to_document(make_record())
        document["quantity"] = quantity

        with pytest.raises(ValueError):
            document_to_record(document)

    @pytest.mark.parametrize("quantity", [4, 4.0, "4"])
    def test_document_to_record_accepts_whole_quantity(self, make_record, quantity):
        document = record_to_document(make_record())
        document["quantity"] = quantity

        record = document_to_record(document)
        assert record.quantity == 4
        assert isinstance(record.quantity, int)

    def test_document_to_record_coerces_notes_to_text(self, make_record):
        document = record_to_document(make_record())
        document["notes"] = 5

        assert document_to_record(document).notes == "5"


class TestORMMapper:
    """Tests for SQLAlchemy row mapping."""

    def test_record_to_domain(self):
        row = StoredRecord(
            id="row-1",
            owner_id="alice",
            date="2024-01-15",
            shop_name="Rahim Electronics",
            category="9W",
            quantity=2,
            cost_price="80.00",
            sell_price="120.00",
            kind="REPLACEMENT",
            notes=None,
        )
        record = record_to_domain(row)

        assert isinstance(record, Record)
        assert record.id == "row-1"
        assert record.kind == RecordKind.REPLACEMENT
        assert record.cost_price == Decimal("80")
        assert record.notes == ""
