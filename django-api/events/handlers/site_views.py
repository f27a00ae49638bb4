"""HTTP handlers for sections, the schedule, the banner, contact and uploads."""

from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import cache as keys
from events.domain import Direction
from events.handlers import dependencies
from events.handlers.permissions import AdminWritePermission
from events.handlers.serializers import (
    BannerSerializer,
    BannerWriteSerializer,
    ContactSerializer,
    DeleteFilesSerializer,
    DeletionResultSerializer,
    MoveSerializer,
    ScheduleAddSerializer,
    ScheduleItemSerializer,
    SectionSerializer,
    SectionWriteSerializer,
    UploadSerializer,
)
from events.handlers.views import cached, require


def _direction(request: Request) -> Direction:
    serializer = MoveSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return Direction(serializer.validated_data["direction"])


class SectionListView(APIView):
    """Handler for /api/sections"""

    permission_classes = [AdminWritePermission]

    def get(self, request: Request) -> Response:
        service = dependencies.section_service()
        data = cached(
            keys.SECTIONS,
            lambda: SectionSerializer(service.list_sections(), many=True).data,
        )
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = SectionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        section = dependencies.section_service().create_section(
            data["title"], data.get("description"), data.get("order"), actor=request.user.pk
        )
        return Response(SectionSerializer(section).data, status=status.HTTP_201_CREATED)

    def put(self, request: Request) -> Response:
        serializer = SectionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        section = dependencies.section_service().update_section(
            require(data["id"], "ID and title are required", "id"),
            data["title"],
            data.get("description"),
            data.get("order"),
        )
        return Response(SectionSerializer(section).data)

    def delete(self, request: Request) -> Response:
        section_id = require(request.query_params.get("id"), "Section ID is required", "id")
        dependencies.section_service().delete_section(section_id)
        return Response({"success": True})


class SectionMoveView(APIView):
    """Handler for POST /api/sections/{section_id}/move"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, section_id: str) -> Response:
        sections = dependencies.section_service().move(section_id, _direction(request))
        return Response(SectionSerializer(sections, many=True).data)


class ScheduleListView(APIView):
    """Handler for /api/schedule.

    GET lists the schedule (?eventId= narrows it to one event), POST adds an
    event to the end, DELETE takes one off (?eventId=).
    """

    permission_classes = [AdminWritePermission]

    def get(self, request: Request) -> Response:
        service = dependencies.schedule_service()
        event_id = request.query_params.get("eventId")
        if event_id:
            return Response(ScheduleItemSerializer(service.list_schedule(event_id), many=True).data)
        data = cached(
            keys.SCHEDULE,
            lambda: ScheduleItemSerializer(service.list_schedule(), many=True).data,
        )
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = ScheduleAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event_id = require(serializer.validated_data["event_id"], "Event ID is required", "eventId")
        item = dependencies.schedule_service().add(event_id)
        return Response(ScheduleItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request) -> Response:
        event_id = require(request.query_params.get("eventId"), "Event ID is required", "eventId")
        dependencies.schedule_service().remove(event_id)
        return Response({"success": True})


class ScheduleMoveView(APIView):
    """Handler for POST /api/schedule/{event_id}/move"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        items = dependencies.schedule_service().move(event_id, _direction(request))
        return Response(ScheduleItemSerializer(items, many=True).data)


class BannerView(APIView):
    """Handler for GET/PUT /api/banner"""

    permission_classes = [AdminWritePermission]

    def get(self, request: Request) -> Response:
        service = dependencies.banner_service()
        data = cached(keys.BANNER, lambda: BannerSerializer(service.get_banner()).data)
        return Response(data)

    def put(self, request: Request) -> Response:
        serializer = BannerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        banner = dependencies.banner_service().update_banner(serializer.to_fields())
        return Response(BannerSerializer(banner).data)


class ContactView(APIView):
    """Handler for POST /api/contact"""

    def post(self, request: Request) -> Response:
        serializer = ContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        dependencies.notification_service().send_contact(
            data["name"], data["email"], data["message"]
        )
        return Response({"success": True, "message": "Message sent successfully"})


class UploadView(APIView):
    """Handler for POST /api/uploads"""

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request: Request) -> Response:
        serializer = UploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        url = dependencies.media_storage().upload(serializer.validated_data["file"])
        return Response({"url": url}, status=status.HTTP_201_CREATED)


class UploadDeleteView(APIView):
    """Handler for POST /api/uploads/delete"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        serializer = DeleteFilesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        results = dependencies.media_storage().delete_urls(serializer.validated_data["file_urls"])
        succeeded = sum(1 for result in results if result.success)
        return Response(
            {
                "results": DeletionResultSerializer(results, many=True).data,
                "summary": {
                    "total": len(results),
                    "successful": succeeded,
                    "failed": len(results) - succeeded,
                },
            }
        )
