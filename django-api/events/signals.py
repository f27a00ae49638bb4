"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save, pre_delete
from django.dispatch import receiver

from events import cache as keys
from events.models import Event, MessageBanner, QuickLink, ScheduleItem, Section, Signup


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    keys.invalidate_event(instance.pk)


@receiver([post_save, post_delete], sender=Signup)
def invalidate_signup_cache(sender, instance, **kwargs):
    """Attendee counts change with every signup."""
    keys.invalidate_event_lists()
    cache.delete(keys.event_detail(instance.event_id))


@receiver([post_save, post_delete], sender=QuickLink)
def invalidate_quick_link_cache(sender, instance, **kwargs):
    """Invalidate an event's links when one of them changes."""
    cache.delete(keys.quick_links(instance.event_id))


@receiver([post_save, post_delete], sender=ScheduleItem)
def invalidate_schedule_cache(sender, instance, **kwargs):
    """Invalidate the schedule when an item is added, moved or removed."""
    cache.delete(keys.SCHEDULE)


@receiver([post_save, post_delete], sender=Section)
def invalidate_section_cache(sender, instance, **kwargs):
    """Sections are listed on their own and filter the event list."""
    cache.delete(keys.SECTIONS)
    keys.invalidate_event_lists()


@receiver(pre_delete, sender=Section)
def invalidate_section_event_details(sender, instance, **kwargs):
    """Events of a deleted section lose their section without a save signal."""
    event_ids = instance.events.values_list("id", flat=True)
    cache.delete_many([keys.event_detail(event_id) for event_id in event_ids])


@receiver([post_save, post_delete], sender=MessageBanner)
def invalidate_banner_cache(sender, instance, **kwargs):
    """Invalidate the banner when it is updated."""
    cache.delete(keys.BANNER)
