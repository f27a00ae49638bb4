from events.domain.models import (
    BannerFields,
    Event,
    EventFields,
    EventListing,
    MessageBanner,
    Participant,
    QuickLink,
    ScheduleItem,
    Section,
    Signup,
    SignupInput,
)
from events.domain.value_objects import (
    Capacity,
    Direction,
    EventId,
    EventType,
    LogoType,
    SectionId,
    SignupId,
    SignupStatus,
)

__all__ = [
    "BannerFields",
    "Event",
    "EventFields",
    "EventListing",
    "MessageBanner",
    "Participant",
    "QuickLink",
    "ScheduleItem",
    "Section",
    "Signup",
    "SignupInput",
    "Capacity",
    "Direction",
    "EventId",
    "EventType",
    "LogoType",
    "SectionId",
    "SignupId",
    "SignupStatus",
]
