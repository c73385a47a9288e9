"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable
from datetime import date, timedelta

from django.utils import timezone

from events.domain import Event, EventFilters, EventId, FilterOptions, PriceRange
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore

SEARCH_LIMIT = 6
ANY = "All"


def period_dates(period: str | None, today: date) -> tuple[date, ...]:
    """Translate a named period into the dates it covers.

    ``today`` is just that day; ``weekend`` is the coming Saturday and Sunday
    (the current ones when today is Saturday). Unknown periods cover nothing.
    """
    if period == "today":
        return (today,)
    if period == "weekend":
        saturday = today + timedelta(days=(5 - today.weekday()) % 7)
        return (saturday, saturday + timedelta(days=1))
    return ()


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, today: Callable[[], date] = timezone.localdate) -> None:
        self._store = store
        self._today = today

    def build_filters(
        self,
        genre: str | None = None,
        city: str | None = None,
        period: str | None = None,
        price: str | None = None,
    ) -> EventFilters:
        """Normalise raw query values; "All" and blanks mean unconstrained."""
        city = city.strip() if city else None
        return EventFilters(
            genre=genre if genre and genre != ANY else None,
            city=city if city and city != ANY else None,
            dates=period_dates(period, self._today()),
            price_range=PriceRange.parse(price),
        )

    def list_events(self, filters: EventFilters | None = None) -> list[Event]:
        """Return events matching the filters."""
        return self._store.list_events(filters or EventFilters())

    def search(self, query: str | None) -> list[Event]:
        """Free-text search over title, description, genre and city."""
        if not query or not query.strip():
            return []
        return self._store.search_events(query.strip(), SEARCH_LIMIT)

    def get_filter_options(self) -> FilterOptions:
        return self._store.get_filter_options()

    def parse_event_id(self, event_id: str) -> EventId:
        """Parse any accepted UUID spelling into its canonical EventId.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        try:
            return EventId.from_string(event_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidEventIdError() from None

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self.parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
