"""Service wiring for handlers.

Builds services backed by the Django stores and collaborators.
"""

from django.conf import settings
from django.core.cache import caches

from events.mail import DjangoMailer
from events.services.banner_service import BannerService
from events.services.event_service import EventService
from events.services.notification_service import NotificationService
from events.services.rate_limit import RateLimiter
from events.services.schedule_service import ScheduleService
from events.services.section_service import SectionService
from events.services.signup_service import SignupService
from events.storage import DjangoMediaStorage
from events.stores.django_store import (
    DjangoBannerStore,
    DjangoEventStore,
    DjangoScheduleStore,
    DjangoSectionStore,
    DjangoSignupStore,
)


def schedule_service() -> ScheduleService:
    return ScheduleService(DjangoScheduleStore(), DjangoEventStore())


def event_service() -> EventService:
    return EventService(
        DjangoEventStore(), DjangoSectionStore(), schedule_service(), media_storage()
    )


def notification_service() -> NotificationService:
    return NotificationService(DjangoEventStore(), DjangoSignupStore(), DjangoMailer())


def signup_service() -> SignupService:
    limiter = RateLimiter(
        caches[settings.SIGNUP_RATE_CACHE],
        limit=settings.SIGNUP_RATE_LIMIT,
        window_seconds=settings.SIGNUP_RATE_WINDOW_SECONDS,
    )
    return SignupService(DjangoEventStore(), DjangoSignupStore(), limiter, notification_service())


def section_service() -> SectionService:
    return SectionService(DjangoSectionStore())


def banner_service() -> BannerService:
    return BannerService(DjangoBannerStore())


def media_storage() -> DjangoMediaStorage:
    return DjangoMediaStorage()
