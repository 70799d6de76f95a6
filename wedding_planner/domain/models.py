"""Domain models - pure Python dataclasses representing planning entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Mapping, Tuple

from wedding_planner.domain.numeric import round2


class WeddingLevelId(str, Enum):
    """Budget-size bracket, declared lowest to highest"""

    DIY = "diy"
    LOVELY = "lovely"
    LUXURY = "luxury"
    SUPER_LUXURY = "super_luxury"
    ULTRA_LUXURY = "ultra_luxury"

    @property
    def rank(self) -> int:
        return list(WeddingLevelId).index(self)

    @classmethod
    def parse(cls, value: "str | WeddingLevelId | None") -> "WeddingLevelId | None":
        """Return the matching level id, or None for anything unknown"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class Urgency(str, Enum):
    """How soon a dated obligation falls, ordered most to least pressing"""

    OVERDUE = "overdue"
    THIS_WEEK = "this_week"
    UPCOMING = "upcoming"
    NO_DATE = "no_date"

    @property
    def rank(self) -> int:
        return list(Urgency).index(self)


class BudgetStatus(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class MilestoneStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class WeddingLevel:
    """Allocation template for one budget bracket"""

    id: WeddingLevelId
    display_name: str
    budget_range_label: str
    min_budget: int  # Inclusive lower breakpoint in dollars
    category_allocations: Mapping[str, int]  # Category name -> percent, sums to 100


@dataclass(frozen=True)
class DefaultMilestone:
    """Static catalog entry for a planning task"""

    title: str
    description: str
    months_before: float  # 0.5 = two weeks, 0.25 = one week
    category_name: str | None
    min_level: WeddingLevelId


@dataclass(frozen=True)
class MilestoneTemplateItem(DefaultMilestone):
    sort_order: int


@dataclass(frozen=True)
class ScheduledMilestone(MilestoneTemplateItem):
    target_date: date


@dataclass
class Milestone:
    """A persisted milestone as read back for status tracking"""

    milestone_id: str
    title: str
    target_date: date
    status: MilestoneStatus = MilestoneStatus.NOT_STARTED
    category_name: str | None = None


@dataclass
class MilestoneAlert:
    milestone_id: str
    title: str
    target_date: date
    urgency: Urgency


@dataclass
class Payment:
    """Single scheduled or completed vendor payment"""

    payment_id: str
    label: str
    amount: float
    due_date: date | None
    status: PaymentStatus
    paid_date: date | None = None


@dataclass
class LineItem:
    """Vendor booking within a category"""

    line_item_id: str
    vendor_name: str
    actual_cost: float
    estimated_cost: float = 0.0
    paid_to_date: float = 0.0  # Legacy total, used only when no itemized payments exist
    payments: List[Payment] = field(default_factory=list)

    @property
    def total_paid(self) -> float:
        return round2(sum(p.amount for p in self.payments if p.status == PaymentStatus.PAID))

    @property
    def total_scheduled(self) -> float:
        return round2(sum(p.amount for p in self.payments))

    @property
    def amount_paid(self) -> float:
        """Itemized paid total, falling back to the legacy paid_to_date field"""
        return self.total_paid if self.payments else self.paid_to_date


@dataclass
class Category:
    """Budget category with its vendor line items"""

    category_id: str
    name: str
    target_amount: float
    sort_order: int = 0
    line_items: List[LineItem] = field(default_factory=list)

    @property
    def actual_spend(self) -> float:
        return round2(sum(li.actual_cost for li in self.line_items))


@dataclass
class AllocationCheck:
    """Rounding drift between allocated dollars and the budget"""

    allocated_total: int
    expected_total: int
    drift: int
    tolerance: int

    @property
    def within_tolerance(self) -> bool:
        return abs(self.drift) <= self.tolerance


@dataclass
class AllocationPlan:
    """Allocations for a requested level plus data-quality signals"""

    requested_level_id: str | None
    level: WeddingLevel | None
    total_budget: float
    allocations: Dict[str, int]
    check: AllocationCheck | None = None

    @property
    def unknown_level(self) -> bool:
        return self.level is None

    @property
    def warnings(self) -> List[str]:
        messages = []
        if self.unknown_level:
            messages.append(f"Unknown wedding level {self.requested_level_id!r}; no allocation applied")
        if self.check is not None and not self.check.within_tolerance:
            messages.append(
                f"Allocation drift of {self.check.drift} exceeds tolerance of {self.check.tolerance}"
            )
        return messages


@dataclass
class CashFlowPoint:
    """Paid and upcoming totals for one calendar month"""

    month_start: date
    month: str  # "Jan 2025"
    label: str  # "Jan", or "Jan '25" on the first point and on Januaries
    paid: float
    upcoming: float


@dataclass
class CategoryAllocationPoint:
    name: str
    value: float  # Target amount
    spent: float


@dataclass
class FinancialPosition:
    """Overall paid / pending / uncommitted split of the budget"""

    total_budget: float
    total_committed: float  # Unclamped, may exceed total_budget
    total_paid: float  # Unclamped, may exceed total_committed
    total_pending: float  # Floored at 0
    uncommitted: float  # Floored at 0

    @property
    def over_budget(self) -> float:
        return round2(max(0.0, self.total_committed - self.total_budget))

    @property
    def over_paid(self) -> float:
        return round2(max(0.0, self.total_paid - self.total_committed))


@dataclass
class ScheduledPayment:
    """Outstanding payment with vendor and category context"""

    payment_id: str
    vendor_name: str
    category_name: str
    label: str
    amount: float
    due_date: date | None
    status: PaymentStatus
    urgency: Urgency


@dataclass
class VendorTotals:
    estimated: float
    actual: float
    paid: float


@dataclass
class MonthMarker:
    marker_date: date
    label: str  # "Jan 25"


@dataclass
class TimelineWindow:
    """Visible date range of the Gantt view"""

    start: date
    end: date
    today: date
    total_months: float  # At least 1


@dataclass(frozen=True)
class PaymentSplit:
    label: str
    percent: float
    months_before: float | None = None  # None means no due date


@dataclass(frozen=True)
class PaymentTemplate:
    name: str
    splits: Tuple[PaymentSplit, ...]


@dataclass
class PlannedPayment:
    """Payment generated from a template, not yet persisted"""

    label: str
    amount: float
    due_date: date | None
    status: PaymentStatus = PaymentStatus.PENDING
