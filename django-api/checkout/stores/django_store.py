"""Django ORM implementation of the checkout stores."""

from uuid import UUID

from django.db import DatabaseError, IntegrityError, transaction

from checkout import models
from checkout.domain import BookedEvent, Booking, BookingStatus, EventPrice, Price
from checkout.stores.interfaces import BookingStore, BookingWriteError, EventPriceStore
from events.models import Event


def _sqlstate(exc: DatabaseError, default: str) -> str:
    cause = exc.__cause__
    for attr in ("sqlstate", "pgcode", "sqlite_errorname"):
        value = getattr(cause, attr, None)
        if value:
            return value
    return default


def to_domain(row: models.Booking) -> Booking:
    event = row.event
    return Booking(
        id=row.pk,
        user_id=str(row.user_id),
        event_id=row.event_id,
        quantity=row.quantity,
        price_per_ticket=row.price_per_ticket,
        amount=row.amount,
        status=BookingStatus(row.status),
        order_id=row.razorpay_order_id,
        payment_id=row.razorpay_payment_id,
        signature=row.razorpay_signature,
        created_at=row.created_at,
        event=BookedEvent(
            title=event.title,
            date=event.date,
            time=event.time,
            city=event.city,
            image_url=event.image_url,
        ),
    )


class DjangoEventPriceStore(EventPriceStore):
    """Reads prices straight from the events table."""

    def get_event_price(self, event_id: UUID) -> EventPrice | None:
        row = Event.objects.filter(pk=event_id).values("id", "title", "price").first()
        if row is None:
            return None
        return EventPrice(event_id=row["id"], title=row["title"], price=Price(amount=row["price"]))


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def insert_booking(self, booking: Booking) -> Booking:
        try:
            with transaction.atomic():
                row = models.Booking.objects.create(
                    user_id=booking.user_id,
                    event_id=booking.event_id,
                    quantity=booking.quantity,
                    price_per_ticket=booking.price_per_ticket,
                    amount=booking.amount,
                    status=booking.status.value,
                    razorpay_order_id=booking.order_id,
                    razorpay_payment_id=booking.payment_id,
                    razorpay_signature=booking.signature,
                )
        except IntegrityError as exc:
            raise BookingWriteError(
                str(exc),
                code=_sqlstate(exc, "integrity_error"),
                hint="A booking for this order and payment may already exist",
            ) from exc
        except DatabaseError as exc:
            raise BookingWriteError(str(exc), code=_sqlstate(exc, "database_error")) from exc
        return to_domain(models.Booking.objects.select_related("event").get(pk=row.pk))

    def list_bookings_for_user(self, user_id: str) -> list[Booking]:
        rows = (
            models.Booking.objects.filter(user_id=user_id)
            .select_related("event")
            .order_by("-created_at", "-pk")
        )
        return [to_domain(row) for row in rows]
