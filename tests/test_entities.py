"""Tests for domain entities."""

import pytest
from decimal import Decimal

from lumibiz.domain.entities import (
    Principal,
    Record,
    RecordDraft,
    RecordKind,
    SalesSummary,
    SessionContext,
)


class TestRecord:
    """Tests for Record and RecordDraft entities."""

    def test_create_record(self):
        """Test creating a Record entity."""
        record = Record(
            id="abc",
            date="2024-01-15",
            shop_name="Rahim Electronics",
            category="9W",
            quantity=3,
            cost_price=Decimal("80"),
            sell_price=Decimal("120"),
            kind=RecordKind.SALE,
            notes="first order",
        )
        assert record.id == "abc"
        assert record.date == "2024-01-15"
        assert record.shop_name == "Rahim Electronics"
        assert record.category == "9W"
        assert record.quantity == 3
        assert record.kind == RecordKind.SALE
        assert record.notes == "first order"

    def test_notes_default_to_empty_string(self, make_draft):
        """Test that missing notes are stored as an empty string, never None."""
        assert make_draft().notes == ""
        assert make_draft(notes=None).notes == ""

    def test_record_immutability(self, make_record):
        """Test that Record entities are immutable."""
        record = make_record()
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            record.quantity = 10

    def test_with_id_and_to_draft_round_trip(self, make_draft):
        """Test converting a draft to a record and back."""
        draft = make_draft(kind=RecordKind.REPLACEMENT, notes="broken")
        record = draft.with_id("xyz")

        assert isinstance(record, Record)
        assert record.id == "xyz"
        assert record.to_draft() == draft
        assert isinstance(record.to_draft(), RecordDraft)

    def test_record_kind_values(self):
        """Test that record kinds use their wire names."""
        assert RecordKind("SALE") is RecordKind.SALE
        assert RecordKind("REPLACEMENT") is RecordKind.REPLACEMENT
        with pytest.raises(ValueError):
            RecordKind("RETURN")


class TestSalesSummary:
    """Tests for SalesSummary entity."""

    def test_default_summary_is_zero(self):
        summary = SalesSummary()
        assert summary.total_revenue == 0
        assert summary.total_profit == 0
        assert summary.total_replacements == 0
        assert summary.replacement_cost == 0
        assert summary.net_profit == 0
        assert summary.total_sold_units == 0

    def test_cost_of_goods(self):
        summary = SalesSummary(total_revenue=Decimal("360"), total_profit=Decimal("120"))
        assert summary.cost_of_goods == Decimal("240")


class TestSessionContext:
    """Tests for SessionContext entity."""

    def test_remote_requires_principal_and_reachable_store(self):
        alice = Principal(id="alice")
        assert SessionContext(principal=alice, remote_available=True).is_remote
        assert not SessionContext(principal=alice, remote_available=False).is_remote
        assert not SessionContext(principal=None, remote_available=True).is_remote
        assert not SessionContext().is_remote
