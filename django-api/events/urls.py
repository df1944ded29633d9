from django.urls import path

from events.handlers import EventDetailView, EventUpsertView

urlpatterns = [
    path("events", EventUpsertView.as_view(), name="event-upsert"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
