"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventFilters, EventId, FilterOptions


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, filters: EventFilters) -> list[Event]:
        """Return events matching the filters, ordered by date ascending."""
        ...

    @abstractmethod
    def search_events(self, term: str, limit: int) -> list[Event]:
        """Return up to ``limit`` events whose text fields contain ``term``."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_filter_options(self) -> FilterOptions:
        """Return the distinct genres and cities, sorted."""
        ...
