"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from checkout.domain import Booking, EventPrice


class BookingWriteError(Exception):
    """A booking row could not be written.

    Carries the database's message, an optional hint and an error code so
    that the failure can be reconciled by hand.
    """

    def __init__(self, message: str, code: str | None = None, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint


class EventPriceStore(ABC):
    """Read access to authoritative event prices."""

    @abstractmethod
    def get_event_price(self, event_id: UUID) -> EventPrice | None:
        """Return price and title for an event, or None if not found."""
        ...


class BookingStore(ABC):
    """Append-only booking persistence."""

    @abstractmethod
    def insert_booking(self, booking: Booking) -> Booking:
        """Persist a booking and return it with id and created_at set.

        Raises:
            BookingWriteError: If the row could not be written.
        """
        ...

    @abstractmethod
    def list_bookings_for_user(self, user_id: str) -> list[Booking]:
        """Return a user's bookings, newest first, with event details."""
        ...
