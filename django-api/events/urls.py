from django.urls import path

from events.handlers import (
    BannerView,
    BulkEmailView,
    ContactView,
    EventCalendarView,
    EventDetailView,
    EventListView,
    QuickLinkListView,
    ScheduleListView,
    ScheduleMoveView,
    SectionListView,
    SectionMoveView,
    SignupListView,
    UploadDeleteView,
    UploadView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/links",
        QuickLinkListView.as_view(),
        name="quick-link-list",
    ),
    path("events/<str:event_id>/email", BulkEmailView.as_view(), name="event-email"),
    path(
        "events/<str:event_id>/calendar",
        EventCalendarView.as_view(),
        name="event-calendar",
    ),
    path("signups", SignupListView.as_view(), name="signup-list"),
    path("sections", SectionListView.as_view(), name="section-list"),
    path(
        "sections/<str:section_id>/move",
        SectionMoveView.as_view(),
        name="section-move",
    ),
    path("schedule", ScheduleListView.as_view(), name="schedule-list"),
    path(
        "schedule/<str:event_id>/move",
        ScheduleMoveView.as_view(),
        name="schedule-move",
    ),
    path("banner", BannerView.as_view(), name="banner"),
    path("contact", ContactView.as_view(), name="contact"),
    path("uploads", UploadView.as_view(), name="upload"),
    path("uploads/delete", UploadDeleteView.as_view(), name="upload-delete"),
]
