from django.contrib import admin
from django.utils import timezone

from accounts.models import HostAccount, HostSession, KycRecord


@admin.register(HostSession)
class HostSessionAdmin(admin.ModelAdmin):
    list_display = ["session_id", "owner_id", "source_ip", "created_at"]
    search_fields = ["owner_id", "session_id"]
    exclude = ["key_hash"]
    readonly_fields = ["session_id", "owner_id", "user_agent", "source_ip", "created_at"]

    def has_add_permission(self, request):
        return False


@admin.register(KycRecord)
class KycRecordAdmin(admin.ModelAdmin):
    list_display = ["owner_id", "status", "submitted_at", "verified_at"]
    list_filter = ["status"]
    search_fields = ["owner_id"]
    actions = ["mark_verified", "mark_rejected"]

    @admin.action(description="Mark selected records as verified")
    def mark_verified(self, request, queryset):
        queryset.update(
            status=KycRecord.Status.VERIFIED,
            verified_at=timezone.now(),
            rejection_reason=None,
        )

    @admin.action(description="Mark selected records as rejected")
    def mark_rejected(self, request, queryset):
        queryset.update(status=KycRecord.Status.REJECTED, verified_at=None)


@admin.register(HostAccount)
class HostAccountAdmin(admin.ModelAdmin):
    list_display = ["owner_id", "name", "is_host", "is_customer", "created_at"]
    list_filter = ["is_host", "is_customer"]
    search_fields = ["owner_id", "name", "phone"]
