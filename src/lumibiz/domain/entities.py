"""Domain model entities for lumibiz.

These are pure data classes representing business concepts, independent of
how a storage backend lays them out. Local JSON storage and the remote
principal-scoped store both map to and from these entities.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class RecordKind(str, Enum):
    """How a record contributes to the financial totals."""

    SALE = "SALE"
    REPLACEMENT = "REPLACEMENT"


@dataclass(frozen=True)
class RecordDraft:
    """A record that has not been persisted yet (no id)."""

    date: str
    shop_name: str
    category: str
    quantity: int
    cost_price: Decimal
    sell_price: Decimal
    kind: RecordKind
    notes: str = ""

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        if self.notes is None:
            object.__setattr__(self, "notes", "")

    def with_id(self, record_id: str) -> "Record":
        """Return the persisted Record for this draft."""
        return Record(
            id=record_id,
            date=self.date,
            shop_name=self.shop_name,
            category=self.category,
            quantity=self.quantity,
            cost_price=self.cost_price,
            sell_price=self.sell_price,
            kind=self.kind,
            notes=self.notes,
        )


@dataclass(frozen=True)
class Record:
    """A single sale or warranty replacement event."""

    id: str
    date: str
    shop_name: str
    category: str
    quantity: int
    cost_price: Decimal
    sell_price: Decimal
    kind: RecordKind
    notes: str = ""

    def __post_init__(self):
        if self.notes is None:
            object.__setattr__(self, "notes", "")

    def to_draft(self) -> RecordDraft:
        """Return the record's fields without its id."""
        return RecordDraft(
            date=self.date,
            shop_name=self.shop_name,
            category=self.category,
            quantity=self.quantity,
            cost_price=self.cost_price,
            sell_price=self.sell_price,
            kind=self.kind,
            notes=self.notes,
        )


@dataclass(frozen=True)
class SalesSummary:
    """Aggregate financial and quantity totals for a set of records."""

    total_revenue: Decimal = Decimal("0")
    total_profit: Decimal = Decimal("0")
    total_replacements: int = 0
    replacement_cost: Decimal = Decimal("0")
    net_profit: Decimal = Decimal("0")
    total_sold_units: int = 0

    @property
    def cost_of_goods(self) -> Decimal:
        """Purchase cost of the units that were sold."""
        return self.total_revenue - self.total_profit


@dataclass
class CategoryBreakdown:
    """Sold and replaced unit counts for one category."""

    sold: int = 0
    replaced: int = 0


@dataclass(frozen=True)
class SummaryReport:
    """Summary data prepared for display."""

    start_date: Optional[str]
    end_date: Optional[str]
    records: tuple[Record, ...]
    summary: SalesSummary
    breakdown: dict[str, CategoryBreakdown] = field(default_factory=dict)


@dataclass(frozen=True)
class Principal:
    """The authenticated user who owns remotely stored records."""

    id: str
    display_name: Optional[str] = None


@dataclass(frozen=True)
class SessionContext:
    """Session state passed explicitly into every storage call.

    principal is None when nobody is signed in. remote_available tells whether
    a remote store is reachable for this session.
    """

    principal: Optional[Principal] = None
    remote_available: bool = False

    @property
    def is_remote(self) -> bool:
        return self.principal is not None and self.remote_available
