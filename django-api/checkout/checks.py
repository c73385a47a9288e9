"""System checks for checkout configuration."""

from django.conf import settings
from django.core.checks import Error, register


@register()
def razorpay_credentials_check(app_configs, **kwargs):
    errors = []
    if not settings.RAZORPAY_KEY_ID or not settings.RAZORPAY_KEY_SECRET:
        errors.append(
            Error(
                "Razorpay credentials are not configured.",
                hint="Set RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET in the environment.",
                id="checkout.E001",
            )
        )
    return errors
