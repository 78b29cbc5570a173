"""Dashboard totals, computed from whatever records are loaded."""

from decimal import Decimal
from typing import Iterable


def summarize_records(records: Iterable) -> dict:
    """
    Sum sales and expenses over records and derive total profit.

    Totals are never stored; call this on every render.

    Returns:
        Dictionary with total_sales, total_expenses, total_profit
        (all Decimal) and record_count
    """
    total_sales = Decimal('0.00')
    total_expenses = Decimal('0.00')
    count = 0

    for record in records:
        total_sales += record.sales
        total_expenses += record.expenses
        count += 1

    return {
        'total_sales': total_sales,
        'total_expenses': total_expenses,
        'total_profit': total_sales - total_expenses,
        'record_count': count,
    }
