from events.handlers.signup_views import SignupListView
from events.handlers.site_views import (
    BannerView,
    ContactView,
    ScheduleListView,
    ScheduleMoveView,
    SectionListView,
    SectionMoveView,
    UploadDeleteView,
    UploadView,
)
from events.handlers.views import (
    BulkEmailView,
    EventCalendarView,
    EventDetailView,
    EventListView,
    QuickLinkListView,
)

__all__ = [
    "BannerView",
    "BulkEmailView",
    "ContactView",
    "EventCalendarView",
    "EventDetailView",
    "EventListView",
    "QuickLinkListView",
    "ScheduleListView",
    "ScheduleMoveView",
    "SectionListView",
    "SectionMoveView",
    "SignupListView",
    "UploadDeleteView",
    "UploadView",
]
