from django.urls import path

from events.handlers import EventDetailView, EventListView, FilterOptionsView, SearchView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("search", SearchView.as_view(), name="event-search"),
    path("filters", FilterOptionsView.as_view(), name="event-filters"),
]
