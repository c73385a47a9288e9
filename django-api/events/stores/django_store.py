"""Django ORM implementation of the EventStore."""

from django.db.models import Q

from events import models
from events.domain import Event, EventFilters, EventId, FilterOptions, Money
from events.stores.interfaces import EventStore


def to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        description=row.description,
        date=row.date,
        time=row.time,
        city=row.city,
        price=Money(amount=row.price),
        image_url=row.image_url,
        genre=row.genre,
        is_trending=row.is_trending,
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self, filters: EventFilters) -> list[Event]:
        qs = models.Event.objects.all()
        if filters.genre:
            qs = qs.filter(genre=filters.genre)
        if filters.city:
            qs = qs.filter(city__icontains=filters.city)
        if filters.dates:
            qs = qs.filter(date__in=filters.dates)
        if filters.price_range is not None:
            qs = qs.filter(price__gte=filters.price_range.minimum)
            if filters.price_range.maximum is not None:
                qs = qs.filter(price__lte=filters.price_range.maximum)
        return [to_domain(row) for row in qs]

    def search_events(self, term: str, limit: int) -> list[Event]:
        condition = (
            Q(title__icontains=term)
            | Q(description__icontains=term)
            | Q(genre__icontains=term)
            | Q(city__icontains=term)
        )
        return [to_domain(row) for row in models.Event.objects.filter(condition)[:limit]]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_domain(row) if row else None

    def get_filter_options(self) -> FilterOptions:
        rows = models.Event.objects.values_list("genre", "city")
        genres = sorted({genre for genre, _ in rows if genre})
        cities = sorted({city for _, city in rows if city})
        return FilterOptions(genres=tuple(genres), cities=tuple(cities))
