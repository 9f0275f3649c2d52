"""Sales summary domain service.

The module-level functions are pure: they never touch storage and accept any
sequence of records. SummaryService composes them for display.
"""

from decimal import Decimal
from typing import Optional, Sequence

from lumibiz.domain.entities import (
    CategoryBreakdown,
    Record,
    RecordKind,
    SalesSummary,
    SummaryReport,
)


def summarize(records: Sequence[Record]) -> SalesSummary:
    """Compute financial and unit totals for a set of records.

    Sales add to revenue, gross profit and sold units. Replacements add their
    purchase cost to the replacement cost and their quantity to the replaced
    units. Net profit is gross profit minus replacement cost.

    Negative quantities or prices are not rejected here; they propagate
    through the arithmetic unchanged.

    Args:
        records: Records to summarize, in any order

    Returns:
        SalesSummary with all totals (all zero for an empty input)
    """
    total_revenue = Decimal("0")
    gross_profit = Decimal("0")
    replacement_cost = Decimal("0")
    sold_units = 0
    replaced_units = 0

    for record in records:
        if record.kind == RecordKind.SALE:
            total_revenue += record.quantity * record.sell_price
            gross_profit += record.quantity * (record.sell_price - record.cost_price)
            sold_units += record.quantity
        elif record.kind == RecordKind.REPLACEMENT:
            replacement_cost += record.quantity * record.cost_price
            replaced_units += record.quantity

    return SalesSummary(
        total_revenue=total_revenue,
        total_profit=gross_profit,
        total_replacements=replaced_units,
        replacement_cost=replacement_cost,
        net_profit=gross_profit - replacement_cost,
        total_sold_units=sold_units,
    )


def breakdown_by_category(records: Sequence[Record]) -> dict[str, CategoryBreakdown]:
    """Count sold and replaced units per category.

    Categories appear in the order they are first seen. Only categories
    present in the input are emitted.
    """
    breakdown: dict[str, CategoryBreakdown] = {}
    for record in records:
        entry = breakdown.setdefault(record.category, CategoryBreakdown())
        if record.kind == RecordKind.SALE:
            entry.sold += record.quantity
        else:
            entry.replaced += record.quantity
    return breakdown


def filter_by_date_range(
    records: Sequence[Record],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> list[Record]:
    """Keep records whose date falls inside the inclusive bounds.

    Dates are compared as plain strings, so both the bounds and the record
    dates must be zero-padded ISO dates (YYYY-MM-DD). An empty or missing
    bound is ignored.
    """
    return [
        record
        for record in records
        if (not start_date or record.date >= start_date)
        and (not end_date or record.date <= end_date)
    ]


class SummaryService:
    """Service for building summary reports from loaded records."""

    def build_report(
        self,
        records: Sequence[Record],
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> SummaryReport:
        """Filter records by date and aggregate them.

        Args:
            records: All records available to the caller
            start_date: Optional inclusive start date (YYYY-MM-DD)
            end_date: Optional inclusive end date (YYYY-MM-DD)

        Returns:
            SummaryReport with the filtered records, totals and per-category counts
        """
        filtered = filter_by_date_range(records, start_date=start_date, end_date=end_date)
        return SummaryReport(
            start_date=start_date,
            end_date=end_date,
            records=tuple(filtered),
            summary=summarize(filtered),
            breakdown=breakdown_by_category(filtered),
        )
