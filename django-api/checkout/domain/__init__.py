from checkout.domain.models import (
    BookedEvent,
    Booking,
    BookingStatus,
    CreatedOrder,
    EventPrice,
    GatewayOrder,
    PaymentResult,
    PurchaseIntent,
)
from checkout.domain.value_objects import MAX_QUANTITY, MIN_QUANTITY, Price, Quantity

__all__ = [
    "BookedEvent",
    "Booking",
    "BookingStatus",
    "CreatedOrder",
    "EventPrice",
    "GatewayOrder",
    "PaymentResult",
    "PurchaseIntent",
    "Price",
    "Quantity",
    "MIN_QUANTITY",
    "MAX_QUANTITY",
]
