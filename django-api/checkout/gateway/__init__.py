"""Process-wide payment gateway.

One configured client per credential set, built on first use and reused.
"""

from functools import lru_cache

from django.conf import settings

from checkout.gateway.interfaces import PaymentGateway


@lru_cache(maxsize=None)
def _build(key_id: str, key_secret: str, currency: str) -> PaymentGateway:
    from checkout.gateway.razorpay_gateway import RazorpayGateway

    return RazorpayGateway(key_id=key_id, key_secret=key_secret, currency=currency)


def get_gateway() -> PaymentGateway:
    """Return the gateway for the configured credentials.

    Raises:
        UpstreamError: If the Razorpay keys are not configured.
    """
    return _build(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET, settings.RAZORPAY_CURRENCY)


def reset_gateway() -> None:
    _build.cache_clear()


__all__ = ["PaymentGateway", "get_gateway", "reset_gateway"]
