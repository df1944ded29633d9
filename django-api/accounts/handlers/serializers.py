"""Serializers for session and KYC requests and responses."""

from rest_framework import serializers


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model. Never exposes the key hash."""

    sessionId = serializers.CharField(source="session_id")
    userAgent = serializers.CharField(source="user_agent", allow_null=True)
    sourceIp = serializers.CharField(source="source_ip", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")


class IssuedSessionSerializer(serializers.Serializer):
    """Serializer for a freshly issued session, including its one-time key."""

    sessionId = serializers.CharField(source="session_id")
    sessionKey = serializers.CharField(source="raw_key")


class SessionVerifySerializer(serializers.Serializer):
    """Optional body credentials for the verify endpoint."""

    idToken = serializers.CharField(source="id_token", required=False, allow_blank=True)
    sessionId = serializers.CharField(source="session_id", required=False, allow_blank=True)
    sessionKey = serializers.CharField(source="session_key", required=False, allow_blank=True)


class KycStatusSerializer(serializers.Serializer):
    """Serializer for KycRecord domain model."""

    kycStatus = serializers.CharField(source="status.value")
    submittedAt = serializers.DateTimeField(source="submitted_at", allow_null=True)
    verifiedAt = serializers.DateTimeField(source="verified_at", allow_null=True)
    rejectionReason = serializers.CharField(source="rejection_reason", allow_null=True)


class HostRegisterSerializer(serializers.Serializer):
    """Request body for host registration."""

    name = serializers.CharField(max_length=200)
    phone = serializers.CharField(
        max_length=32, required=False, allow_blank=True, allow_null=True
    )
