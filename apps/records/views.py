from rest_framework import viewsets, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    DailyRecordSerializer,
    DailyRecordCreateSerializer,
    DailyRecordUpdateSerializer,
    ErrorSerializer,
    ValidationErrorSerializer,
    MessageSerializer,
)
from .services import (
    list_records,
    get_record,
    create_record,
    update_record,
    delete_record,
    RecordNotFoundError,
    RecordValidationError,
)


def validation_error_response(errors, message=None):
    """Build a 400 response from serializer-shaped errors."""
    if message is None:
        missing = any(
            getattr(error, 'code', None) == 'required'
            for field_errors in errors.values()
            if isinstance(field_errors, list)
            for error in field_errors
        )
        message = 'Missing required fields' if missing else 'Invalid record data'
    return Response(
        {'error': message, 'details': errors},
        status=status.HTTP_400_BAD_REQUEST
    )


def not_found_response(error):
    return Response(
        {'error': str(error)},
        status=status.HTTP_404_NOT_FOUND
    )


@extend_schema(tags=['records'])
class DailyRecordViewSet(viewsets.ViewSet):
    """
    ViewSet for DailyRecord CRUD operations.

    list: Get all records, newest date first
    create: Create a record (profit is computed)
    retrieve: Get a specific record
    update: Partially update sales, expenses or notes
    partial_update: Same as update
    destroy: Delete a record
    """

    # Generic 500 messages, used by config.exceptions.api_exception_handler
    failure_messages = {
        'list': 'Failed to fetch records',
        'create': 'Failed to create record',
        'retrieve': 'Failed to fetch record',
        'update': 'Failed to update record',
        'partial_update': 'Failed to update record',
        'destroy': 'Failed to delete record',
    }

    @extend_schema(responses={200: DailyRecordSerializer(many=True), 500: ErrorSerializer})
    def list(self, request):
        """List all daily records."""
        records = list_records()
        return Response(DailyRecordSerializer(records, many=True).data)

    @extend_schema(
        request=DailyRecordCreateSerializer,
        responses={200: DailyRecordSerializer, 400: ValidationErrorSerializer, 500: ErrorSerializer},
    )
    def create(self, request):
        """Create a daily record."""
        serializer = DailyRecordCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            record = create_record(**serializer.validated_data)
        except RecordValidationError as e:
            return validation_error_response(e.details, message=str(e))

        return Response(DailyRecordSerializer(record).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: DailyRecordSerializer, 404: ErrorSerializer, 500: ErrorSerializer})
    def retrieve(self, request, pk=None):
        """Get a daily record."""
        try:
            record = get_record(record_id=pk)
        except RecordNotFoundError as e:
            return not_found_response(e)

        return Response(DailyRecordSerializer(record).data)

    @extend_schema(
        request=DailyRecordUpdateSerializer,
        responses={
            200: DailyRecordSerializer,
            400: ValidationErrorSerializer,
            404: ErrorSerializer,
            500: ErrorSerializer,
        },
    )
    def update(self, request, pk=None):
        """Update any of sales, expenses and notes; omitted fields are kept."""
        serializer = DailyRecordUpdateSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            record = update_record(record_id=pk, data=serializer.validated_data)
        except RecordNotFoundError as e:
            return not_found_response(e)
        except RecordValidationError as e:
            return validation_error_response(e.details, message=str(e))

        return Response(DailyRecordSerializer(record).data)

    @extend_schema(
        request=DailyRecordUpdateSerializer,
        responses={
            200: DailyRecordSerializer,
            400: ValidationErrorSerializer,
            404: ErrorSerializer,
            500: ErrorSerializer,
        },
    )
    def partial_update(self, request, pk=None):
        """Same partial semantics as PUT."""
        return self.update(request, pk=pk)

    @extend_schema(responses={200: MessageSerializer, 404: ErrorSerializer, 500: ErrorSerializer})
    def destroy(self, request, pk=None):
        """Delete a daily record."""
        try:
            delete_record(record_id=pk)
        except RecordNotFoundError as e:
            return not_found_response(e)

        return Response({'message': 'Record deleted successfully'})
