"""Convert persistence rows into domain models"""

from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from wedding_planner.domain.exceptions import InvalidRecordError
from wedding_planner.domain.models import Category, LineItem, Milestone, Payment
from wedding_planner.infrastructure.records.schemas import (
    CategoryRecord,
    ClientRecord,
    LineItemRecord,
    MilestoneRecord,
    PaymentRecord,
)


def to_payment(record: PaymentRecord) -> Payment:
    return Payment(
        payment_id=record.id,
        label=record.label,
        amount=record.amount,
        due_date=record.due_date,
        status=record.status,
        paid_date=record.paid_date,
    )


def to_line_item(record: LineItemRecord) -> LineItem:
    return LineItem(
        line_item_id=record.id,
        vendor_name=record.vendor_name,
        actual_cost=record.actual_cost,
        estimated_cost=record.estimated_cost,
        paid_to_date=record.paid_to_date,
        payments=[to_payment(p) for p in record.payments],
    )


def to_category(record: CategoryRecord) -> Category:
    return Category(
        category_id=record.id,
        name=record.name,
        target_amount=record.target_amount,
        sort_order=record.sort_order,
        line_items=[to_line_item(li) for li in record.line_items],
    )


def parse_categories(rows: Iterable[Mapping[str, Any]]) -> List[Category]:
    """
    Validate category rows (with nested line items and payments) and map them
    to domain categories ordered by sort_order.

    Raises:
        InvalidRecordError: If any row does not match the expected shape
    """
    try:
        records = [CategoryRecord.model_validate(row) for row in rows]
    except ValidationError as e:
        raise InvalidRecordError(f"Invalid category record: {e}") from e

    return [to_category(r) for r in sorted(records, key=lambda r: r.sort_order)]


def parse_milestones(rows: Iterable[Mapping[str, Any]]) -> List[Milestone]:
    """
    Validate milestone rows and map them to domain milestones.

    Raises:
        InvalidRecordError: If any row does not match the expected shape
    """
    try:
        records = [MilestoneRecord.model_validate(row) for row in rows]
    except ValidationError as e:
        raise InvalidRecordError(f"Invalid milestone record: {e}") from e

    return [
        Milestone(
            milestone_id=r.id,
            title=r.title,
            target_date=r.target_date,
            status=r.status,
            category_name=r.category_name,
        )
        for r in records
    ]


def parse_client(row: Mapping[str, Any]) -> ClientRecord:
    """
    Validate a client row.

    Raises:
        InvalidRecordError: If the row does not match the expected shape
    """
    try:
        return ClientRecord.model_validate(row)
    except ValidationError as e:
        raise InvalidRecordError(f"Invalid client record: {e}") from e
