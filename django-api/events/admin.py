from django.contrib import admin

from events.models import Event, MessageBanner, QuickLink, ScheduleItem, Section, Signup


class QuickLinkInline(admin.TabularInline):
    model = QuickLink
    extra = 1


class SignupInline(admin.TabularInline):
    model = Signup
    extra = 0
    fields = ["name", "email", "phone", "status", "notes"]


@admin.register(Section)
class SectionAdmin(admin.ModelAdmin):
    list_display = ["title", "order", "created_at"]
    search_fields = ["title"]
    ordering = ["order"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "event_date", "section", "event_type", "is_active", "allow_signups"]
    list_filter = ["section", "event_type", "is_active"]
    search_fields = ["title", "location"]
    inlines = [QuickLinkInline, SignupInline]


@admin.register(Signup)
class SignupAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "event", "status", "created_at"]
    list_filter = ["status", "event"]
    search_fields = ["name", "email", "phone"]


@admin.register(ScheduleItem)
class ScheduleItemAdmin(admin.ModelAdmin):
    list_display = ["event", "order"]
    ordering = ["order"]


@admin.register(MessageBanner)
class MessageBannerAdmin(admin.ModelAdmin):
    list_display = ["message", "is_active", "updated_at"]
