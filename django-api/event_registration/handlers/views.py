"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import csv
from datetime import date

from django.http import StreamingHttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from event_registration.domain.errors import DomainError, ErrorCode, EventNotFoundError
from event_registration.handlers.serializers import (
    EventInputSerializer,
    EventSerializer,
    RegistrationFilterSerializer,
    RegistrationInputSerializer,
    RegistrationSerializer,
    options,
)
from event_registration.services import (
    build_availability_service,
    build_event_service,
    build_export_service,
    build_registration_service,
)

ERROR_STATUS = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_HAS_REGISTRATIONS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_REGISTRATION: status.HTTP_409_CONFLICT,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError({"event_date": ["Enter a valid date in YYYY-MM-DD format."]}) from exc


def parse_filters(request: Request) -> RegistrationFilterSerializer:
    serializer = RegistrationFilterSerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer


class Echo:
    """File-like object whose write returns the value instead of buffering it."""

    def write(self, value: str) -> str:
        return value


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        service = build_event_service()
        serializer = EventSerializer(
            service.list_events(), many=True, context={"today": service.today()}
        )
        return Response(serializer.data)

    def post(self, request: Request) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        service = build_event_service()
        event = service.require_event(service.create_event(payload.to_event_data()))
        return Response(
            EventSerializer(event, context={"today": service.today()}).data,
            status=status.HTTP_201_CREATED,
        )


class ActiveEventListView(APIView):
    """Handler for GET /api/events/active"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        service = build_event_service()
        serializer = EventSerializer(
            service.list_active_events(), many=True, context={"today": service.today()}
        )
        return Response(serializer.data)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, event_id: str) -> Response:
        service = build_event_service()
        try:
            event = service.require_event(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event, context={"today": service.today()}).data)

    def put(self, request: Request, event_id: str) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        service = build_event_service()
        try:
            if not service.update_event(event_id, payload.to_event_data()):
                return error_response(EventNotFoundError())
            event = service.require_event(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event, context={"today": service.today()}).data)

    def delete(self, request: Request, event_id: str) -> Response:
        service = build_event_service()
        try:
            deleted = service.delete_event(event_id)
        except DomainError as error:
            return error_response(error)
        if not deleted:
            return error_response(EventNotFoundError())
        return Response(status=status.HTTP_204_NO_CONTENT)


class CategoryOptionsView(APIView):
    """Handler for GET /api/availability/categories"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return Response(options(build_availability_service().active_categories()))


class DateOptionsView(APIView):
    """Handler for GET /api/availability/categories/{category}/dates"""

    permission_classes = [AllowAny]

    def get(self, request: Request, category: str) -> Response:
        service = build_availability_service()
        return Response(options(service.active_dates_for_category(category)))


class EventOptionsView(APIView):
    """Handler for GET /api/availability/categories/{category}/dates/{event_date}/events"""

    permission_classes = [AllowAny]

    def get(self, request: Request, category: str, event_date: str) -> Response:
        service = build_availability_service()
        events = service.active_events_for_category_and_date(category, parse_date(event_date))
        return Response(options(events))


class RegistrationListView(APIView):
    """Handler for GET/POST /api/registrations

    POST is the public registration flow; listing is for administrators.
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [AllowAny()]
        return [IsAdminUser()]

    def get(self, request: Request) -> Response:
        filters = parse_filters(request).to_filters()
        service = build_registration_service()
        registrations = service.list_registrations(filters)
        return Response(
            {
                "count": service.count_registrations(filters),
                "results": RegistrationSerializer(registrations, many=True).data,
            }
        )

    def post(self, request: Request) -> Response:
        payload = RegistrationInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        try:
            registration_id = build_registration_service().register(payload.to_registration_data())
        except DomainError as error:
            return error_response(error)
        return Response({"id": registration_id.value}, status=status.HTTP_201_CREATED)


class RegistrationDateOptionsView(APIView):
    """Handler for GET /api/registrations/dates"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> Response:
        return Response(options(build_registration_service().registration_dates()))


class RegistrationEventNameOptionsView(APIView):
    """Handler for GET /api/registrations/dates/{event_date}/event-names"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, event_date: str) -> Response:
        names = build_registration_service().event_names_for_date(parse_date(event_date))
        return Response(options({name: name for name in names}))


class RegistrationExportView(APIView):
    """Handler for GET /api/registrations/export"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request) -> StreamingHttpResponse:
        filters = parse_filters(request).to_filters()
        rows = build_export_service().export_registrations(filters)
        writer = csv.writer(Echo())
        filename = f"event_registrations_{timezone.localtime():%Y-%m-%d_%H%M%S}.csv"
        return StreamingHttpResponse(
            (writer.writerow(row) for row in rows),
            content_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
