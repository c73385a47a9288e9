"""Read side of bookings for the account page."""

from checkout.domain import Booking
from checkout.domain.errors import UnauthenticatedError
from checkout.stores.interfaces import BookingStore


class BookingHistoryService:
    def __init__(self, bookings: BookingStore) -> None:
        self._bookings = bookings

    def list_for_user(self, user_id: str | None) -> list[Booking]:
        if not user_id:
            raise UnauthenticatedError()
        return self._bookings.list_bookings_for_user(user_id)
