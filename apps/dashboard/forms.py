from django import forms
from django.utils import timezone
from decimal import Decimal, InvalidOperation


class DailyRecordEntryForm(forms.Form):
    """
    New record form on the dashboard.

    These checks only spare a round trip; the store operations repeat
    them and have the final word. Messages are reported one at a time,
    in the order a user is expected to fill the form.
    """

    date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={'type': 'date'}),
    )
    # Amounts are read as text so a bad number gets our message,
    # not Django's per-field one
    sales = forms.CharField(
        required=False,
        label='Total Sales ($)',
        widget=forms.NumberInput(attrs={'step': '0.01', 'min': '0', 'placeholder': '0.00'}),
    )
    expenses = forms.CharField(
        required=False,
        label='Total Expenses ($)',
        widget=forms.NumberInput(attrs={'step': '0.01', 'min': '0', 'placeholder': '0.00'}),
    )
    notes = forms.CharField(
        required=False,
        label='Notes (Optional)',
        widget=forms.TextInput(attrs={'placeholder': 'Additional notes...'}),
    )

    MISSING_DATE = 'Please select a date'
    MISSING_AMOUNTS = 'Please enter both sales and expenses amounts'
    INVALID_AMOUNTS = 'Please enter valid numbers for sales and expenses'
    NEGATIVE_AMOUNTS = 'Sales and expenses must be positive numbers'

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('initial', {'date': timezone.localdate()})
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()

        # A malformed date fails DateField itself; report it like a missing one
        if self.errors.get('date') or not cleaned_data.get('date'):
            self.errors.pop('date', None)
            raise forms.ValidationError(self.MISSING_DATE, code='missing_date')

        sales = (cleaned_data.get('sales') or '').strip()
        expenses = (cleaned_data.get('expenses') or '').strip()
        if not sales or not expenses:
            raise forms.ValidationError(self.MISSING_AMOUNTS, code='missing_amounts')

        try:
            sales_amount = Decimal(sales)
            expenses_amount = Decimal(expenses)
        except InvalidOperation:
            raise forms.ValidationError(self.INVALID_AMOUNTS, code='invalid_amounts')
        if not (sales_amount.is_finite() and expenses_amount.is_finite()):
            raise forms.ValidationError(self.INVALID_AMOUNTS, code='invalid_amounts')

        if sales_amount < 0 or expenses_amount < 0:
            raise forms.ValidationError(self.NEGATIVE_AMOUNTS, code='negative_amounts')

        cleaned_data['sales'] = sales_amount
        cleaned_data['expenses'] = expenses_amount
        cleaned_data['notes'] = cleaned_data.get('notes', '').strip()
        return cleaned_data
