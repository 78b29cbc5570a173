import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from apps.records.models import DailyRecord


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def record(db):
    """Create and return a daily record."""
    return DailyRecord.objects.create(
        date=date(2024, 1, 1),
        sales=Decimal('100.00'),
        expenses=Decimal('40.00'),
        notes='New year opening',
    )


@pytest.fixture
def loss_record(db):
    """Create and return a record where expenses exceed sales."""
    return DailyRecord.objects.create(
        date=date(2024, 1, 2),
        sales=Decimal('50.00'),
        expenses=Decimal('80.50'),
    )


@pytest.fixture
def dated_records(db):
    """Create records for three days, inserted out of order."""
    return [
        DailyRecord.objects.create(
            date=date(2024, 3, day),
            sales=Decimal('10.00') * day,
            expenses=Decimal('5.00'),
        )
        for day in (2, 1, 3)
    ]
