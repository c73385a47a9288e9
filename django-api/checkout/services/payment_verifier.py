"""Payment Verifier - commits a booking only for a genuine payment."""

import logging

from checkout.domain import Booking, PaymentResult, PurchaseIntent
from checkout.domain import state as checkout_state
from checkout.domain.errors import (
    EventNotFoundError,
    InvalidArgumentError,
    PersistenceFailedError,
    UnauthenticatedError,
    UnauthorizedError,
    VerificationFailedError,
)
from checkout.gateway.interfaces import PaymentGateway
from checkout.services.order_initiator import INVALID_ORDER_INPUT, parse_event_id, parse_quantity
from checkout.stores.interfaces import BookingStore, BookingWriteError, EventPriceStore

logger = logging.getLogger(__name__)

MISSING_DETAILS = "Missing payment details"


class PaymentVerifier:
    """Verifies gateway callbacks and records the resulting bookings."""

    def __init__(self, prices: EventPriceStore, bookings: BookingStore, gateway: PaymentGateway) -> None:
        self._prices = prices
        self._bookings = bookings
        self._gateway = gateway

    def verify(
        self,
        user_id: str | None,
        order_id: object,
        payment_id: object,
        signature: object,
        event_id: object,
        quantity: object,
        claimed_user_id: object,
    ) -> Booking:
        """Verify a payment result and persist the booking it pays for.

        The caller's identity is checked before the signature, so a mismatched
        user is refused whether or not the signature is genuine.

        Raises:
            UnauthenticatedError: If there is no authenticated caller.
            InvalidArgumentError: If any field is missing or malformed.
            UnauthorizedError: If ``claimed_user_id`` is not the caller.
            VerificationFailedError: If the signature does not match.
            EventNotFoundError: If the event no longer exists.
            PersistenceFailedError: If the booking could not be written after
                the payment was verified.
        """
        if not user_id:
            raise UnauthenticatedError()
        fields = (order_id, payment_id, signature, event_id, quantity, claimed_user_id)
        # zero and empty values count as missing, not malformed
        if not all(fields):
            raise InvalidArgumentError(MISSING_DETAILS)
        if not all(isinstance(value, str) for value in (order_id, payment_id, signature)):
            raise InvalidArgumentError(MISSING_DETAILS)
        try:
            intent = PurchaseIntent(
                event_id=parse_event_id(event_id),
                quantity=parse_quantity(quantity),
                user_id=str(claimed_user_id),
            )
        except (TypeError, ValueError):
            raise InvalidArgumentError(INVALID_ORDER_INPUT) from None

        if intent.user_id != str(user_id):
            logger.warning(
                "Session mismatch on verify: session user=%s claimed user=%s order=%s",
                user_id,
                intent.user_id,
                order_id,
            )
            raise UnauthorizedError()

        result = PaymentResult(order_id=order_id, payment_id=payment_id, signature=signature)
        attempt = checkout_state.capture(checkout_state.Created(order_id=result.order_id), result.payment_id)

        if not self._gateway.verify_signature(result.order_id, result.payment_id, result.signature):
            attempt = checkout_state.settle(attempt, signature_valid=False, persisted=False)
            logger.warning(
                "Signature verification failed order=%s payment=%s user=%s state=%s",
                result.order_id,
                result.payment_id,
                intent.user_id,
                type(attempt).__name__,
            )
            raise VerificationFailedError(result.order_id, result.payment_id)

        event = self._prices.get_event_price(intent.event_id)
        if event is None:
            raise EventNotFoundError(str(intent.event_id))

        booking = Booking(
            user_id=intent.user_id,
            event_id=intent.event_id,
            quantity=intent.quantity.value,
            price_per_ticket=event.price.amount,
            amount=event.price.total(intent.quantity),
            order_id=result.order_id,
            payment_id=result.payment_id,
            signature=result.signature,
        )
        try:
            saved = self._bookings.insert_booking(booking)
        except BookingWriteError as exc:
            attempt = checkout_state.settle(attempt, signature_valid=True, persisted=False, reason=exc.message)
            logger.error(
                "Orphaned payment: order=%s payment=%s user=%s event=%s amount=%s state=%s code=%s: %s",
                result.order_id,
                result.payment_id,
                intent.user_id,
                intent.event_id,
                booking.amount,
                type(attempt).__name__,
                exc.code,
                exc.message,
            )
            raise PersistenceFailedError(details=exc.message, hint=exc.hint, db_code=exc.code) from exc

        attempt = checkout_state.settle(attempt, signature_valid=True, persisted=True)
        logger.info(
            "Booking %s recorded order=%s payment=%s state=%s",
            saved.id,
            result.order_id,
            result.payment_id,
            type(attempt).__name__,
        )
        return saved
