from events.handlers.views import (
    EventDetailView,
    EventListView,
    FilterOptionsView,
    SearchView,
)

__all__ = ["EventListView", "EventDetailView", "SearchView", "FilterOptionsView"]
