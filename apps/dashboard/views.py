import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods, require_POST

from apps.records.services import (
    list_records,
    create_record,
    delete_record,
    RecordNotFoundError,
    RecordValidationError,
)
from .forms import DailyRecordEntryForm
from .summary import summarize_records

logger = logging.getLogger(__name__)

LOAD_FAILED = 'Failed to load records. Please refresh the page to try again.'
CREATE_FAILED = 'Failed to add record. Please check your input and try again.'
DELETE_FAILED = 'Failed to delete record. Please try again.'


def _first_message(error: RecordValidationError) -> str:
    for field_errors in error.details.values():
        if field_errors:
            return str(field_errors[0])
    return str(error)


def _render_dashboard(request, form):
    """Load the record list and render the dashboard around it."""
    load_error = None
    try:
        records = list(list_records())
    except DatabaseError:
        logger.exception("Failed to load daily records for dashboard")
        records = []
        load_error = LOAD_FAILED

    # Show the record just created first, as the store returned it
    created_id = request.GET.get('created')
    if created_id:
        created = [r for r in records if str(r.id) == created_id]
        if created:
            records = created + [r for r in records if str(r.id) != created_id]

    context = {
        'form': form,
        'records': records,
        'totals': summarize_records(records),
        'load_error': load_error,
        'created_id': created_id,
    }
    return render(request, 'dashboard/index.html', context)


@require_http_methods(['GET', 'POST'])
def dashboard(request):
    """
    Daily records dashboard.

    GET renders totals, the entry form and the record table.
    POST validates the entry form; only a valid form reaches the store,
    and a successful create redirects back with a cleared form.
    """
    if request.method != 'POST':
        return _render_dashboard(request, DailyRecordEntryForm())

    form = DailyRecordEntryForm(request.POST)
    if form.is_valid():
        try:
            record = create_record(
                date=form.cleaned_data['date'],
                sales=form.cleaned_data['sales'],
                expenses=form.cleaned_data['expenses'],
                notes=form.cleaned_data['notes'],
            )
        except RecordValidationError as e:
            form.add_error(None, _first_message(e))
        except DatabaseError:
            logger.exception("Failed to create daily record from dashboard")
            form.add_error(None, CREATE_FAILED)
        else:
            messages.success(request, 'Record added successfully!')
            return redirect(f"{reverse('dashboard:index')}?created={record.id}")

    return _render_dashboard(request, form)


@require_POST
def delete(request, record_id):
    """Delete a record; the list only changes once the store confirms."""
    try:
        delete_record(record_id=record_id)
    except RecordNotFoundError:
        messages.error(request, 'Record not found.')
    except DatabaseError:
        logger.exception("Failed to delete daily record %s from dashboard", record_id)
        messages.error(request, DELETE_FAILED)
    else:
        messages.success(request, 'Record deleted successfully!')

    return redirect('dashboard:index')
