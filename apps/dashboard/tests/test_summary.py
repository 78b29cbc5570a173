from decimal import Decimal
from types import SimpleNamespace
from apps.dashboard.summary import summarize_records


def make(sales, expenses):
    return SimpleNamespace(sales=Decimal(sales), expenses=Decimal(expenses))


def test_empty_list():
    totals = summarize_records([])

    assert totals == {
        'total_sales': Decimal('0.00'),
        'total_expenses': Decimal('0.00'),
        'total_profit': Decimal('0.00'),
        'record_count': 0,
    }


def test_totals_and_difference():
    totals = summarize_records([
        make('100.00', '40.00'),
        make('10.00', '25.50'),
        make('0.10', '0.20'),
    ])

    assert totals['total_sales'] == Decimal('110.10')
    assert totals['total_expenses'] == Decimal('65.70')
    assert totals['total_profit'] == Decimal('44.40')
    assert totals['record_count'] == 3


def test_accepts_any_iterable():
    totals = summarize_records(make('1', '2') for _ in range(4))

    assert totals['total_profit'] == Decimal('-4')
