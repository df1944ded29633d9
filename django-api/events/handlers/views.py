"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the project exception handler
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import EventSerializer, EventUpsertSerializer
from events.providers import build_publication_workflow
from events.services.publication_service import (
    PublicationOutcome,
    PublicationResult,
    SubmissionMode,
)


def _result_response(result: PublicationResult) -> Response:
    if result.outcome is PublicationOutcome.DRAFT_SAVED:
        return Response(
            {
                "success": True,
                "eventId": result.event_id,
                "status": result.status.value,
                "lastSaved": result.saved_at.isoformat(),
            }
        )

    if result.outcome is PublicationOutcome.PUBLISHED:
        return Response(
            {
                "success": True,
                "eventId": result.event_id,
                "status": result.status.value,
                "publishedAt": result.saved_at.isoformat(),
                "message": "Event hosted successfully!",
            }
        )

    if result.outcome is PublicationOutcome.KYC_BLOCKED:
        return Response(
            {
                "error": "KYC_NOT_VERIFIED",
                "message": (
                    "KYC verification is required to host events. "
                    "Your changes have been saved as a draft."
                ),
                "status": result.status.value,
                "savedAsDraft": True,
                "eventId": result.event_id,
            },
            status=status.HTTP_403_FORBIDDEN,
        )

    return Response(
        {
            "error": "VALIDATION_FAILED",
            "message": "Please fix the validation errors before hosting.",
            "details": dict(result.errors),
            "status": result.status.value,
            "savedAsDraft": True,
            "eventId": result.event_id,
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class EventUpsertView(APIView):
    """Handler for POST /api/events (save draft or publish)"""

    def post(self, request: Request) -> Response:
        serializer = EventUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = build_publication_workflow().submit(
            request.user.uid,
            SubmissionMode(serializer.validated_data["mode"]),
            serializer.to_content(),
            event_id=serializer.validated_data.get("eventId") or None,
        )
        return _result_response(result)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = build_publication_workflow().get_event(request.user.uid, event_id)
        return Response({"success": True, "event": EventSerializer(event).data})
