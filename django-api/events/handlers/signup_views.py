"""HTTP handlers for signups.

The public signup form posts here; every other method is for admins.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers import dependencies
from events.handlers.permissions import PublicCreatePermission, get_client_ip
from events.handlers.serializers import (
    SignupSerializer,
    SignupUpdateSerializer,
    SignupWriteSerializer,
)
from events.handlers.views import require


class SignupListView(APIView):
    """Handler for /api/signups.

    POST submits a signup (public, rate limited per client address).
    GET lists signups (?eventId= filters), PUT sets status and notes,
    DELETE removes one (?id=).
    """

    permission_classes = [PublicCreatePermission]

    def get(self, request: Request) -> Response:
        signups = dependencies.signup_service().list_signups(
            request.query_params.get("eventId") or None
        )
        return Response(SignupSerializer(signups, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = SignupWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        signup = dependencies.signup_service().submit_signup(
            serializer.to_input(), client_identity=get_client_ip(request)
        )
        return Response(SignupSerializer(signup).data, status=status.HTTP_201_CREATED)

    def put(self, request: Request) -> Response:
        serializer = SignupUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        signup = dependencies.signup_service().update_signup(
            require(data["id"], "Signup ID is required", "id"),
            data.get("status"),
            data.get("notes"),
        )
        return Response(SignupSerializer(signup).data)

    def delete(self, request: Request) -> Response:
        signup_id = require(request.query_params.get("id"), "Signup ID is required", "id")
        dependencies.signup_service().delete_signup(signup_id)
        return Response({"success": True})
