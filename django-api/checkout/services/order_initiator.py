"""Order Initiator - turns a purchase request into a gateway order.

Services:
- Depend only on interfaces (stores, gateway)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
import random
import time
from uuid import UUID

from checkout.domain import CreatedOrder, PurchaseIntent, Quantity
from checkout.domain.errors import EventNotFoundError, InvalidArgumentError, UnauthenticatedError
from checkout.gateway.interfaces import PaymentGateway
from checkout.stores.interfaces import EventPriceStore

logger = logging.getLogger(__name__)

INVALID_ORDER_INPUT = "Invalid event ID or quantity"


def parse_event_id(value: object) -> UUID:
    if not value or not isinstance(value, str):
        raise ValueError("event id is required")
    return UUID(value)


def parse_quantity(value: object) -> Quantity:
    """Accept JSON integers and digit strings; reject bools and floats."""
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    return Quantity(value)  # type: ignore[arg-type]


def make_receipt_id() -> str:
    """Time-based receipt id, unique enough for gateway-side bookkeeping."""
    millis = str(int(time.time() * 1000))[-10:]
    return f"rcpt_{millis}_{random.randint(0, 999)}"


class OrderInitiator:
    """Creates one gateway order per checkout attempt."""

    def __init__(self, prices: EventPriceStore, gateway: PaymentGateway) -> None:
        self._prices = prices
        self._gateway = gateway

    def create_order(self, user_id: str | None, event_id: object, quantity: object) -> CreatedOrder:
        """Create a gateway order for ``quantity`` tickets to an event.

        Raises:
            UnauthenticatedError: If there is no authenticated caller.
            InvalidArgumentError: If the event id or quantity is malformed.
            EventNotFoundError: If the event does not exist.
            UpstreamError: If the gateway fails.
        """
        if not user_id:
            raise UnauthenticatedError()
        try:
            intent = PurchaseIntent(
                event_id=parse_event_id(event_id),
                quantity=parse_quantity(quantity),
                user_id=user_id,
            )
        except (TypeError, ValueError):
            raise InvalidArgumentError(INVALID_ORDER_INPUT) from None

        event = self._prices.get_event_price(intent.event_id)
        if event is None:
            raise EventNotFoundError(str(intent.event_id))

        amount = event.price.total_minor_units(intent.quantity)
        receipt = make_receipt_id()
        order = self._gateway.create_order(
            amount=amount,
            currency=self._gateway.currency,
            receipt=receipt,
            notes={
                "eventId": str(intent.event_id),
                "quantity": str(intent.quantity.value),
                "userId": intent.user_id,
            },
        )
        logger.info(
            "Created order %s for user=%s event=%s qty=%d amount=%d %s",
            order.order_id,
            intent.user_id,
            intent.event_id,
            intent.quantity.value,
            order.amount,
            order.currency,
        )
        return CreatedOrder(
            order_id=order.order_id,
            amount=order.amount,
            currency=order.currency,
            event_name=event.title,
        )
