"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from events.domain.value_objects import EventId, Money, PriceRange


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: date
    time: time | None
    city: str
    price: Money
    image_url: str | None
    genre: str
    is_trending: bool
    created_at: datetime


@dataclass(frozen=True)
class EventFilters:
    """Catalog query. Empty fields do not constrain the result."""

    genre: str | None = None
    city: str | None = None
    dates: tuple[date, ...] = ()
    price_range: PriceRange | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.genre or self.city or self.dates or self.price_range)


@dataclass(frozen=True)
class FilterOptions:
    """Distinct facet values offered to the browse UI."""

    genres: tuple[str, ...]
    cities: tuple[str, ...]
