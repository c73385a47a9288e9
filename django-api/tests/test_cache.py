"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from events.cache import FILTERS_KEY, LIST_KEY, detail_key


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_list_response_is_cached(self, api_client, make_event):
        """An unfiltered list populates the events:list cache key."""
        make_event()
        api_client.get("/api/events")
        assert len(cache.get(LIST_KEY)) == 1

    def test_filtered_list_is_not_cached(self, api_client, make_event):
        make_event(genre="Jazz")
        api_client.get("/api/events", {"genre": "Jazz"})
        assert cache.get(LIST_KEY) is None

    def test_event_save_invalidates_list_cache(self, api_client, make_event):
        """Saving an event invalidates the events:list cache key."""
        make_event(title="First")
        api_client.get("/api/events")
        make_event(title="Second")
        assert cache.get(LIST_KEY) is None
        response = api_client.get("/api/events")
        assert len(response.json()["events"]) == 2

    def test_event_save_invalidates_detail_cache(self, api_client, make_event):
        """Saving an event invalidates the events:{id} cache key."""
        event = make_event()
        api_client.get(f"/api/events/{event.id}")
        assert cache.get(detail_key(str(event.id))) is not None
        event.title = "Renamed"
        event.save()
        assert cache.get(detail_key(str(event.id))) is None
        assert api_client.get(f"/api/events/{event.id}").json()["event"]["name"] == "Renamed"

    def test_event_delete_invalidates_filters_cache(self, api_client, make_event):
        """Deleting an event invalidates the events:filters cache key."""
        event = make_event(genre="Jazz")
        api_client.get("/api/filters")
        assert cache.get(FILTERS_KEY) is not None
        event.delete()
        assert cache.get(FILTERS_KEY) is None

    @pytest.mark.parametrize("spelling", [str.upper, lambda value: value.replace("-", "")])
    def test_detail_cache_is_keyed_on_canonical_id(self, api_client, make_event, spelling):
        """Any accepted spelling of the id shares the key that saves invalidate."""
        event = make_event(title="Original")
        url = f"/api/events/{spelling(str(event.id))}"
        assert api_client.get(url).json()["event"]["name"] == "Original"
        assert cache.get(detail_key(str(event.id))) is not None
        event.title = "Renamed"
        event.save()
        assert api_client.get(url).json()["event"]["name"] == "Renamed"

    def test_deleted_event_is_not_served_under_another_spelling(self, api_client, make_event):
        event = make_event()
        url = f"/api/events/{str(event.id).upper()}"
        assert api_client.get(url).status_code == 200
        event.delete()
        assert api_client.get(url).status_code == 404
