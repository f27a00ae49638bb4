"""Access rules for the API.

Reads are public; mutations need an authenticated admin session or token.
The public signup form is the one write anyone may make.
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission
from rest_framework.request import Request
from rest_framework.throttling import BaseThrottle


class AdminWritePermission(BasePermission):
    """Safe methods are public; everything else requires authentication."""

    def has_permission(self, request, view) -> bool:
        if request.method in SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated)


class PublicCreatePermission(BasePermission):
    """POST is public; every other method requires authentication."""

    def has_permission(self, request, view) -> bool:
        if request.method == "POST":
            return True
        return bool(request.user and request.user.is_authenticated)


def get_client_ip(request: Request) -> str:
    """Client address for rate limiting.

    Delegates to DRF's throttle identity, so X-Forwarded-For is honoured only
    for the number of proxies named by REST_FRAMEWORK["NUM_PROXIES"].
    """
    return BaseThrottle().get_ident(request) or "unknown"
