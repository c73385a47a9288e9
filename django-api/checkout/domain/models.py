"""Checkout domain models.

PurchaseIntent and PaymentResult are transient; Booking mirrors the
persisted row in checkout/models.py.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from uuid import UUID

from checkout.domain.value_objects import Price, Quantity


class BookingStatus(str, Enum):
    PAID = "paid"


@dataclass(frozen=True)
class EventPrice:
    """Price and display name of an event, as read at checkout time."""

    event_id: UUID
    title: str
    price: Price


@dataclass(frozen=True)
class PurchaseIntent:
    """Client-declared purchase parameters. Never trusted for the amount."""

    event_id: UUID
    quantity: Quantity
    user_id: str


@dataclass(frozen=True)
class GatewayOrder:
    """An order as created by the payment gateway."""

    order_id: str
    amount: int
    currency: str
    receipt: str


@dataclass(frozen=True)
class PaymentResult:
    """Callback payload the gateway hands the client after capture."""

    order_id: str
    payment_id: str
    signature: str


@dataclass(frozen=True)
class CreatedOrder:
    """What the client needs to open the gateway's checkout widget."""

    order_id: str
    amount: int
    currency: str
    event_name: str


@dataclass(frozen=True)
class BookedEvent:
    """Event details shown next to a booking in the account history."""

    title: str
    date: date
    time: time | None
    city: str
    image_url: str | None


@dataclass(frozen=True)
class Booking:
    """A verified, paid purchase. Append-only."""

    user_id: str
    event_id: UUID
    quantity: int
    price_per_ticket: Decimal
    amount: Decimal
    order_id: str
    payment_id: str
    signature: str
    status: BookingStatus = BookingStatus.PAID
    id: int | None = None
    created_at: datetime | None = None
    event: BookedEvent | None = field(default=None, compare=False)
