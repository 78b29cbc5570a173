from rest_framework import serializers
from decimal import Decimal
from .models import DailyRecord, AMOUNT_MAX_DIGITS, AMOUNT_DECIMAL_PLACES


def amount_field(**kwargs):
    """Decimal field matching the amount columns, rendered as a JSON number."""
    return serializers.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        coerce_to_string=False,
        **kwargs
    )


class RequiredDateField(serializers.DateField):
    """DateField that reports a blank string as missing, not malformed."""

    def validate_empty_values(self, data):
        if isinstance(data, str) and not data.strip():
            self.fail('required')
        return super().validate_empty_values(data)


# =============================================================================
# Input Serializers
# =============================================================================

class DailyRecordCreateSerializer(serializers.Serializer):
    """
    Validate the body of POST /api/records/.

    Fields:
        date (date): Day the record covers (YYYY-MM-DD)
        sales (decimal): Total sales, non-negative
        expenses (decimal): Total expenses, non-negative
        notes (str): Optional free text
    """

    date = RequiredDateField()
    sales = amount_field(min_value=Decimal('0'))
    expenses = amount_field(min_value=Decimal('0'))
    notes = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=True,
        default=''
    )


class DailyRecordUpdateSerializer(serializers.Serializer):
    """
    Validate the body of PUT/PATCH /api/records/{id}/.

    Every field is optional; only supplied fields reach validated_data.
    Keys outside this set (date, profit, ...) are dropped.
    """

    sales = amount_field(required=False, min_value=Decimal('0'))
    expenses = amount_field(required=False, min_value=Decimal('0'))
    notes = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=True
    )


# =============================================================================
# Output Serializers
# =============================================================================

class DailyRecordSerializer(serializers.ModelSerializer):
    """Daily record as returned by the API."""

    sales = amount_field(read_only=True)
    expenses = amount_field(read_only=True)
    profit = amount_field(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = DailyRecord
        fields = [
            'id',
            'date',
            'sales',
            'expenses',
            'profit',
            'notes',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()


class ValidationErrorSerializer(ErrorSerializer):
    """Error response with per-field messages."""
    details = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField())
    )


class MessageSerializer(serializers.Serializer):
    """Confirmation message response."""
    message = serializers.CharField()
