"""Razorpay implementation of the PaymentGateway."""

import logging

import razorpay
import requests

from checkout.domain import GatewayOrder
from checkout.domain.errors import UpstreamError
from checkout.gateway.interfaces import PaymentGateway

logger = logging.getLogger(__name__)

GATEWAY_ERRORS = (
    razorpay.errors.BadRequestError,
    razorpay.errors.GatewayError,
    razorpay.errors.ServerError,
    requests.RequestException,
)


class RazorpayGateway(PaymentGateway):
    """Talks to Razorpay through the official SDK client."""

    def __init__(self, key_id: str, key_secret: str, currency: str = "INR", client: razorpay.Client | None = None) -> None:
        if not key_id or not key_secret:
            raise UpstreamError("Server configuration error: Missing Keys")
        self.key_id = key_id
        self.currency = currency
        self._client = client or razorpay.Client(auth=(key_id, key_secret))

    def create_order(self, amount: int, currency: str, receipt: str, notes: dict[str, str]) -> GatewayOrder:
        try:
            order = self._client.order.create(
                data={
                    "amount": amount,
                    "currency": currency,
                    "receipt": receipt,
                    "notes": notes,
                }
            )
        except GATEWAY_ERRORS as exc:
            logger.error("Razorpay order creation failed receipt=%s: %s", receipt, exc)
            raise UpstreamError(f"Payment Failed: {exc}") from exc
        return GatewayOrder(
            order_id=order["id"],
            amount=int(order["amount"]),
            currency=order["currency"],
            receipt=order.get("receipt", receipt),
        )

    def verify_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        # compare_digest refuses non-ASCII str input
        if not signature.isascii():
            return False
        try:
            self._client.utility.verify_payment_signature(
                {
                    "razorpay_order_id": order_id,
                    "razorpay_payment_id": payment_id,
                    "razorpay_signature": signature,
                }
            )
        except razorpay.errors.SignatureVerificationError:
            return False
        return True
