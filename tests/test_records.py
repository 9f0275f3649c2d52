"""Tests for the record domain service."""

from decimal import Decimal

import pytest

from lumibiz.domain.entities import RecordKind
from lumibiz.domain.errors import ValidationError
from lumibiz.domain.records import parse_kind


def _draft_args(**overrides):
    args = {
        "date": "2024-01-15",
        "shop_name": "Rahim Electronics",
        "category": "9W",
        "quantity": 3,
        "cost_price": Decimal("80"),
        "sell_price": Decimal("120"),
        "kind": "sale",
        "notes": None,
    }
    args.update(overrides)
    return args


class TestBuildDraft:
    """Tests for RecordService.build_draft validation."""

    def test_valid_draft(self, record_service):
        draft = record_service.build_draft(**_draft_args(shop_name="  Rahim Electronics "))
        assert draft.shop_name == "Rahim Electronics"
        assert draft.kind == RecordKind.SALE
        assert draft.notes == ""

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"shop_name": ""}, "Shop name is required"),
            ({"shop_name": "   "}, "Shop name is required"),
            ({"category": ""}, "Category is required"),
            ({"quantity": 0}, "Quantity must be positive"),
            ({"quantity": -1}, "Quantity must be positive"),
            ({"cost_price": Decimal("-1")}, "Cost price cannot be negative"),
            ({"sell_price": Decimal("-0.01")}, "Sell price cannot be negative"),
            ({"kind": "refund"}, "Unknown record type"),
            ({"date": "15/01/2024"}, "Invalid date"),
            ({"date": "2024-1-5"}, "Invalid date"),
        ],
    )
    def test_invalid_input(self, record_service, overrides, message):
        with pytest.raises(ValidationError) as excinfo:
            record_service.build_draft(**_draft_args(**overrides))
        assert message in str(excinfo.value)

    def test_zero_prices_allowed(self, record_service):
        draft = record_service.build_draft(
            **_draft_args(cost_price=Decimal("0"), sell_price=Decimal("0"))
        )
        assert draft.cost_price == 0
        assert draft.sell_price == 0


class TestParseKind:
    def test_case_insensitive(self):
        assert parse_kind("replacement") is RecordKind.REPLACEMENT
        assert parse_kind(" SALE ") is RecordKind.SALE

    def test_passes_through_enum(self):
        assert parse_kind(RecordKind.SALE) is RecordKind.SALE


class TestRecordServicePersistence:
    """Tests for RecordService create/list/delete."""

    def test_create_and_list(self, record_service, local_session):
        draft = record_service.build_draft(**_draft_args())
        record = record_service.create_record(local_session, draft)

        assert record_service.list_records(local_session) == [record]

    def test_list_with_date_range(self, record_service, remote_session):
        for day in ("2024-01-01", "2024-01-15", "2024-02-01"):
            record_service.create_record(
                remote_session, record_service.build_draft(**_draft_args(date=day))
            )

        records = record_service.list_records(
            remote_session, start_date="2024-01-10", end_date="2024-01-31"
        )
        assert [record.date for record in records] == ["2024-01-15"]

    def test_delete(self, record_service, local_session):
        record = record_service.create_record(
            local_session, record_service.build_draft(**_draft_args())
        )
        record_service.delete_record(local_session, record.id)
        assert record_service.list_records(local_session) == []
