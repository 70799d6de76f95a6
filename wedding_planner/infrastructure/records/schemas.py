"""Pydantic schemas for rows supplied by the persistence layer"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from wedding_planner.domain.models import MilestoneStatus, PaymentStatus


class RecordModel(BaseModel):
    """Rows carry extra columns (timestamps, foreign keys) the engine ignores"""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class PaymentRecord(RecordModel):
    """Row from the payments table"""

    id: str
    label: str = ""
    amount: float = Field(0.0, ge=0)
    due_date: Optional[date] = None
    status: PaymentStatus = PaymentStatus.PENDING
    paid_date: Optional[date] = None


class LineItemRecord(RecordModel):
    """Row from the line_items table with nested payments"""

    id: str
    vendor_name: str = ""
    estimated_cost: float = Field(0.0, ge=0)
    actual_cost: float = Field(0.0, ge=0)
    paid_to_date: float = Field(0.0, ge=0)
    payments: List[PaymentRecord] = Field(default_factory=list)


class CategoryRecord(RecordModel):
    """Row from the categories table with nested line items"""

    id: str
    name: str
    target_amount: float = Field(0.0, ge=0)
    sort_order: int = 0
    line_items: List[LineItemRecord] = Field(default_factory=list)


class MilestoneRecord(RecordModel):
    """Row from the milestones table"""

    id: str
    title: str
    target_date: date
    status: MilestoneStatus = MilestoneStatus.NOT_STARTED
    category_name: Optional[str] = None


class ClientRecord(RecordModel):
    """Row from the clients table"""

    id: str
    name: str
    wedding_date: date
    total_budget: float = Field(0.0, ge=0)
    created_at: datetime
