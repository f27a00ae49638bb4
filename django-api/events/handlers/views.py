"""HTTP handlers (views) for events - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler (handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from django.http import HttpResponse
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import cache as keys
from events.domain.errors import ValidationError
from events.handlers import dependencies
from events.handlers.calendar import build_calendar
from events.handlers.permissions import AdminWritePermission
from events.handlers.serializers import (
    BulkEmailSerializer,
    EventListingSerializer,
    EventSerializer,
    EventWriteSerializer,
    QuickLinkSerializer,
    QuickLinksWriteSerializer,
)
from events.services.schedule_service import parse_event_id


def cached(key: str, produce):
    """Return the cached payload for key, producing and storing it on a miss."""
    data = cache.get(key)
    if data is None:
        data = produce()
        cache.set(key, data)
    return data


def require(value, message: str, field: str) -> str:
    if not value:
        raise ValidationError(message, field=field)
    return value


class EventListView(APIView):
    """Handler for /api/events.

    GET lists events with attendee counts (?sectionId= filters, ?id= returns
    one event). POST creates, PUT updates (id in body), DELETE removes (?id=).
    """

    permission_classes = [AdminWritePermission]

    def get(self, request: Request) -> Response:
        event_id = request.query_params.get("id")
        if event_id:
            return Response(_event_detail(event_id))

        section_id = request.query_params.get("sectionId") or None
        service = dependencies.event_service()
        data = cached(
            keys.event_list(section_id),
            lambda: EventListingSerializer(service.list_events(section_id), many=True).data,
        )
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = dependencies.event_service().create_event(
            serializer.to_fields(),
            actor=request.user.pk,
            add_to_schedule=serializer.validated_data.get("add_to_schedule"),
            quick_links=serializer.validated_data.get("quick_links"),
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    def put(self, request: Request) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event_id = require(serializer.validated_data.get("id"), "Event ID is required", "id")
        event = dependencies.event_service().update_event(
            event_id,
            serializer.to_fields(),
            add_to_schedule=serializer.validated_data.get("add_to_schedule"),
            quick_links=serializer.validated_data.get("quick_links"),
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request) -> Response:
        event_id = require(request.query_params.get("id"), "Event ID is required", "id")
        dependencies.event_service().delete_event(event_id)
        return Response({"success": True})


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        return Response(_event_detail(event_id))


def _event_detail(event_id: str):
    service = dependencies.event_service()
    return cached(
        keys.event_detail(parse_event_id(event_id)),
        lambda: EventListingSerializer(service.get_event(event_id)).data,
    )


class QuickLinkListView(APIView):
    """Handler for GET/POST /api/events/{event_id}/links"""

    permission_classes = [AdminWritePermission]

    def get(self, request: Request, event_id: str) -> Response:
        service = dependencies.event_service()
        data = cached(
            keys.quick_links(parse_event_id(event_id)),
            lambda: QuickLinkSerializer(service.list_quick_links(event_id), many=True).data,
        )
        return Response(data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = QuickLinksWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        links = dependencies.event_service().replace_quick_links(
            event_id, serializer.validated_data["quick_links"]
        )
        return Response(QuickLinkSerializer(links, many=True).data)


class BulkEmailView(APIView):
    """Handler for POST /api/events/{event_id}/email"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = BulkEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        count = dependencies.notification_service().send_bulk_email(
            event_id,
            serializer.validated_data["subject"],
            serializer.validated_data["message"],
        )
        return Response(
            {"success": True, "message": f"Email sent to {count} participants", "recipientCount": count}
        )


class EventCalendarView(APIView):
    """Handler for GET /api/events/{event_id}/calendar"""

    def get(self, request: Request, event_id: str) -> HttpResponse:
        listing = dependencies.event_service().get_event(event_id)
        body = build_calendar(listing.event, settings.PUBLIC_BASE_URL)
        response = HttpResponse(body, content_type="text/calendar; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="event-{event_id}.ics"'
        return response
