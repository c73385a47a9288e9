from checkout.services.booking_history import BookingHistoryService
from checkout.services.order_initiator import OrderInitiator
from checkout.services.payment_verifier import PaymentVerifier

__all__ = ["BookingHistoryService", "OrderInitiator", "PaymentVerifier"]
