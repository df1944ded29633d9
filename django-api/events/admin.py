from django.contrib import admin

from events.models import OwnedEvent, PublishedEvent


@admin.register(OwnedEvent)
class OwnedEventAdmin(admin.ModelAdmin):
    list_display = ["event_id", "title", "host_uid", "status", "updated_at"]
    list_filter = ["status"]
    search_fields = ["event_id", "host_uid"]


@admin.register(PublishedEvent)
class PublishedEventAdmin(admin.ModelAdmin):
    list_display = ["event_id", "title", "host_uid", "published_at"]
    search_fields = ["event_id", "host_uid"]
