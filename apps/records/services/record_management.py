"""Daily record store operations."""

import logging
from datetime import date as date_type
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional
from uuid import UUID

from django.db.models import DecimalField, ExpressionWrapper, F, QuerySet, Value
from django.utils import timezone
from django.utils.dateparse import parse_date

from ..models import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS, DailyRecord
from .exceptions import RecordNotFoundError, RecordValidationError

logger = logging.getLogger(__name__)

AMOUNT_FIELDS = ('sales', 'expenses')
REQUIRED_FIELDS = ('date',) + AMOUNT_FIELDS

_CENT = Decimal('0.01')
_AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_MAX_DIGITS - AMOUNT_DECIMAL_PLACES)


def _amount_field() -> DecimalField:
    return DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES
    )


def _parse_record_id(record_id) -> UUID:
    if isinstance(record_id, UUID):
        return record_id
    try:
        return UUID(str(record_id))
    except ValueError:
        raise RecordNotFoundError()


def coerce_amount(value: Any) -> Decimal:
    """
    Convert an incoming amount to a two-place Decimal.

    Raises:
        ValueError: If the value is not a finite, non-negative number
            that fits the amount columns.
    """
    if isinstance(value, bool):
        raise ValueError('A valid number is required.')
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError('A valid number is required.')

    if not amount.is_finite():
        raise ValueError('A valid number is required.')
    if amount < 0:
        raise ValueError('Ensure this value is greater than or equal to 0.')

    # quantize() raises InvalidOperation past the context precision
    if amount >= _AMOUNT_LIMIT or amount.quantize(_CENT) >= _AMOUNT_LIMIT:
        raise ValueError(
            f'Ensure that there are no more than {AMOUNT_MAX_DIGITS} digits in total.'
        )
    return amount.quantize(_CENT)


def _coerce_date(value: Any) -> date_type:
    if isinstance(value, date_type):
        return value
    parsed = parse_date(str(value)) if value else None
    if parsed is None:
        raise ValueError('Date has wrong format. Use YYYY-MM-DD.')
    return parsed


def list_records() -> QuerySet:
    """
    Return all daily records, newest date first.

    Records sharing a date are ordered by creation time, newest first.
    """
    return DailyRecord.objects.order_by('-date', '-created_at')


def get_record(*, record_id) -> DailyRecord:
    """
    Get a daily record by ID.

    Raises:
        RecordNotFoundError: If no record has this ID
    """
    pk = _parse_record_id(record_id)
    try:
        return DailyRecord.objects.get(id=pk)
    except DailyRecord.DoesNotExist:
        logger.warning("Daily record %s not found", pk)
        raise RecordNotFoundError()


def create_record(
    *,
    date: Any,
    sales: Any,
    expenses: Any,
    notes: Optional[str] = ''
) -> DailyRecord:
    """
    Create a daily record.

    Profit is always computed here from the coerced amounts.

    Args:
        date: Day the record covers (date or ``YYYY-MM-DD`` string)
        sales: Total sales, non-negative
        expenses: Total expenses, non-negative
        notes: Free text, ``None`` is stored as an empty string

    Returns:
        Created DailyRecord instance

    Raises:
        RecordValidationError: If a required field is missing or an
            amount is not a non-negative number
    """
    supplied = {'date': date, 'sales': sales, 'expenses': expenses}
    missing = [
        field for field in REQUIRED_FIELDS
        if supplied[field] is None or supplied[field] == ''
    ]
    if missing:
        raise RecordValidationError(
            'Missing required fields',
            details={field: ['This field is required.'] for field in missing}
        )

    errors = {}
    try:
        record_date = _coerce_date(date)
    except ValueError as e:
        errors['date'] = [str(e)]

    amounts = {}
    for field in AMOUNT_FIELDS:
        try:
            amounts[field] = coerce_amount(supplied[field])
        except ValueError as e:
            errors[field] = [str(e)]

    if errors:
        raise RecordValidationError('Invalid record data', details=errors)

    record = DailyRecord.objects.create(
        date=record_date,
        sales=amounts['sales'],
        expenses=amounts['expenses'],
        notes=notes or ''
    )
    logger.info(
        "Created daily record %s for %s (profit %s)",
        record.id, record.date, record.profit
    )
    return record


def update_record(*, record_id, data: Dict[str, Any]) -> DailyRecord:
    """
    Partially update a daily record.

    Only ``sales``, ``expenses`` and ``notes`` are applied; any other key
    is ignored. The change is one ``UPDATE ... WHERE id = ?`` statement.
    When only one amount is supplied, profit is computed in that statement
    against the stored value of the other, so the row never holds a stale
    profit.

    Args:
        record_id: Record UUID
        data: Fields to update

    Returns:
        Updated DailyRecord instance

    Raises:
        RecordNotFoundError: If no record has this ID
        RecordValidationError: If a supplied amount is invalid
    """
    pk = _parse_record_id(record_id)

    changes = {}
    errors = {}
    for field in AMOUNT_FIELDS:
        if field in data:
            try:
                changes[field] = coerce_amount(data[field])
            except ValueError as e:
                errors[field] = [str(e)]
    if errors:
        raise RecordValidationError('Invalid record data', details=errors)

    if 'notes' in data:
        changes['notes'] = data['notes'] or ''

    if 'sales' in changes and 'expenses' in changes:
        changes['profit'] = DailyRecord.calculate_profit(
            changes['sales'], changes['expenses']
        )
    elif 'sales' in changes:
        changes['profit'] = ExpressionWrapper(
            Value(changes['sales'], output_field=_amount_field()) - F('expenses'),
            output_field=_amount_field()
        )
    elif 'expenses' in changes:
        changes['profit'] = ExpressionWrapper(
            F('sales') - Value(changes['expenses'], output_field=_amount_field()),
            output_field=_amount_field()
        )

    changes['updated_at'] = timezone.now()

    updated = DailyRecord.objects.filter(id=pk).update(**changes)
    if not updated:
        logger.warning("Daily record %s not found for update", pk)
        raise RecordNotFoundError()

    try:
        record = DailyRecord.objects.get(id=pk)
    except DailyRecord.DoesNotExist:
        # Deleted between the update and the read
        raise RecordNotFoundError()

    logger.info(
        "Updated daily record %s (%s)",
        pk, ', '.join(sorted(f for f in changes if f != 'updated_at'))
    )
    return record


def delete_record(*, record_id) -> None:
    """
    Delete a daily record.

    Raises:
        RecordNotFoundError: If no record has this ID
    """
    pk = _parse_record_id(record_id)

    deleted, _ = DailyRecord.objects.filter(id=pk).delete()
    if not deleted:
        logger.warning("Daily record %s not found for delete", pk)
        raise RecordNotFoundError()

    logger.info("Deleted daily record %s", pk)
