from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


AMOUNT_MAX_DIGITS = 12
AMOUNT_DECIMAL_PLACES = 2


class DailyRecord(models.Model):
    """One day of shop takings: sales, expenses and the derived profit."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    date = models.DateField()

    # Financial details
    sales = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    expenses = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Always sales - expenses; never written from input
    profit = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        editable=False
    )

    notes = models.TextField(blank=True, default='')

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'daily_records'
        indexes = [
            models.Index(fields=['date'], name='daily_records_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.date}: sales {self.sales}, expenses {self.expenses}, profit {self.profit}"

    def save(self, *args, **kwargs):
        """Recompute profit before every save."""
        self.profit = self.calculate_profit(self.sales, self.expenses)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and (
            'sales' in update_fields or 'expenses' in update_fields
        ):
            kwargs['update_fields'] = set(update_fields) | {'profit'}
        super().save(*args, **kwargs)

    @staticmethod
    def calculate_profit(sales, expenses):
        return Decimal(str(sales)) - Decimal(str(expenses))
