from events.domain.models import Event, EventFilters, FilterOptions
from events.domain.value_objects import EventId, Money, PriceRange

__all__ = [
    "Event",
    "EventFilters",
    "FilterOptions",
    "EventId",
    "Money",
    "PriceRange",
]
