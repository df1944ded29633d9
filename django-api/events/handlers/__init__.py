from events.handlers.views import EventDetailView, EventUpsertView

__all__ = ["EventDetailView", "EventUpsertView"]
