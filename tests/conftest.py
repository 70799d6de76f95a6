"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable

from wedding_planner.domain.models import Category, LineItem, Payment, PaymentStatus


@pytest.fixture
def today() -> date:
    """Frozen reference date shared by date-dependent tests"""
    return date(2025, 6, 15)


@pytest.fixture
def make_payment() -> Callable[..., Payment]:
    """Build a pending $1000 deposit, overridable per test"""

    def _make(**overrides) -> Payment:
        fields = {
            "payment_id": "pay-1",
            "label": "Deposit",
            "amount": 1000.0,
            "due_date": date(2025, 6, 1),
            "status": PaymentStatus.PENDING,
            "paid_date": None,
        }
        fields.update(overrides)
        return Payment(**fields)

    return _make


@pytest.fixture
def make_line_item() -> Callable[..., LineItem]:
    def _make(**overrides) -> LineItem:
        fields = {
            "line_item_id": "li-1",
            "vendor_name": "Test Vendor",
            "actual_cost": 5000.0,
            "estimated_cost": 5000.0,
            "paid_to_date": 0.0,
            "payments": [],
        }
        fields.update(overrides)
        return LineItem(**fields)

    return _make


@pytest.fixture
def make_category() -> Callable[..., Category]:
    def _make(**overrides) -> Category:
        fields = {
            "category_id": "cat-1",
            "name": "Venue",
            "target_amount": 10000.0,
            "sort_order": 0,
            "line_items": [],
        }
        fields.update(overrides)
        return Category(**fields)

    return _make


@pytest.fixture
def sample_categories(make_category, make_line_item, make_payment) -> list[Category]:
    """Venue and catering with a mix of paid, overdue, near and undated payments"""
    return [
        make_category(
            category_id="cat-venue",
            name="Venue",
            target_amount=15000.0,
            line_items=[
                make_line_item(
                    line_item_id="li-venue",
                    vendor_name="Grand Hall",
                    actual_cost=12000.0,
                    payments=[
                        make_payment(
                            payment_id="venue-deposit",
                            amount=6000.0,
                            due_date=date(2025, 3, 1),
                            status=PaymentStatus.PAID,
                            paid_date=date(2025, 2, 27),
                        ),
                        make_payment(
                            payment_id="venue-final",
                            label="Final Payment",
                            amount=6000.0,
                            due_date=date(2025, 9, 1),
                        ),
                    ],
                ),
            ],
        ),
        make_category(
            category_id="cat-catering",
            name="Catering",
            target_amount=10000.0,
            sort_order=1,
            line_items=[
                make_line_item(
                    line_item_id="li-catering",
                    vendor_name="Fine Foods",
                    actual_cost=8000.0,
                    payments=[
                        make_payment(payment_id="catering-1", amount=2000.0, due_date=date(2025, 6, 10)),
                        make_payment(payment_id="catering-2", amount=3000.0, due_date=date(2025, 6, 20)),
                        make_payment(payment_id="catering-3", amount=3000.0, due_date=None),
                    ],
                ),
            ],
        ),
        make_category(category_id="cat-misc", name="Misc", target_amount=0.0, sort_order=2),
    ]
