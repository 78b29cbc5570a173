import pytest
from decimal import Decimal
from datetime import date
from django.test import Client
from apps.records.models import DailyRecord


@pytest.fixture
def browser():
    """Return a plain Django test client, as a browser would talk to the page."""
    return Client()


@pytest.fixture
def records(db):
    """Two days of records: one profitable, one at a loss."""
    return [
        DailyRecord.objects.create(
            date=date(2024, 6, 1),
            sales=Decimal('250.00'),
            expenses=Decimal('100.00'),
            notes='Market day',
        ),
        DailyRecord.objects.create(
            date=date(2024, 6, 2),
            sales=Decimal('20.00'),
            expenses=Decimal('45.50'),
        ),
    ]


@pytest.fixture
def valid_entry():
    """Form data for a valid new record."""
    return {
        'date': '2024-06-03',
        'sales': '120.50',
        'expenses': '20.25',
        'notes': '  Busy afternoon ',
    }
