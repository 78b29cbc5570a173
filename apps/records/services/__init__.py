"""Services for daily records business logic."""

from .exceptions import (
    RecordServiceError,
    RecordNotFoundError,
    RecordValidationError,
)
from .record_management import (
    coerce_amount,
    list_records,
    get_record,
    create_record,
    update_record,
    delete_record,
)

__all__ = [
    # Exceptions
    'RecordServiceError',
    'RecordNotFoundError',
    'RecordValidationError',
    # Record Management
    'coerce_amount',
    'list_records',
    'get_record',
    'create_record',
    'update_record',
    'delete_record',
]
