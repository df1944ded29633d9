"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class HostSession(models.Model):
    """Persistence model for host sessions.

    Sessions live in one flat table keyed by session id, so lookups never
    fan out across owners and the id is unique by construction.
    """

    session_id = models.CharField(max_length=64, primary_key=True)
    owner_id = models.CharField(max_length=128, db_index=True)
    key_hash = models.CharField(max_length=64)
    user_agent = models.TextField(blank=True, null=True)
    source_ip = models.GenericIPAddressField(blank=True, null=True)
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.owner_id} - {self.session_id}"


class KycRecord(models.Model):
    """Persistence model for a host's identity verification."""

    class Status(models.TextChoices):
        NONE = "none", "Not started"
        PENDING = "pending", "Pending review"
        VERIFIED = "verified", "Verified"
        REJECTED = "rejected", "Rejected"

    owner_id = models.CharField(max_length=128, primary_key=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.NONE)
    submitted_at = models.DateTimeField(blank=True, null=True)
    verified_at = models.DateTimeField(blank=True, null=True)
    rejection_reason = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name = "KYC record"

    def __str__(self) -> str:
        return f"{self.owner_id} ({self.status})"


class HostAccount(models.Model):
    """Persistence model for a platform account and its host/customer role."""

    owner_id = models.CharField(max_length=128, primary_key=True)
    name = models.CharField(max_length=200)
    phone = models.CharField(max_length=32, blank=True, null=True)
    is_host = models.BooleanField(default=False)
    is_customer = models.BooleanField(default=False)
    created_at = models.DateTimeField(blank=True, null=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.owner_id})"
