"""Payment gateway interface."""

from abc import ABC, abstractmethod

from checkout.domain import GatewayOrder


class PaymentGateway(ABC):
    """Creates orders on a hosted payment gateway."""

    currency: str
    key_id: str

    @abstractmethod
    def create_order(self, amount: int, currency: str, receipt: str, notes: dict[str, str]) -> GatewayOrder:
        """Create a remote order for ``amount`` minor units.

        Raises:
            UpstreamError: If the gateway rejects the request or is unreachable.
        """
        ...

    @abstractmethod
    def verify_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """Check a payment callback signature against the shared secret."""
        ...
