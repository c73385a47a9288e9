"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Booking(models.Model):
    """Persistence model for paid bookings."""

    class Status(models.TextChoices):
        PAID = "paid", "Paid"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="bookings"
    )
    event = models.ForeignKey(
        "events.Event", on_delete=models.PROTECT, related_name="bookings"
    )
    quantity = models.PositiveSmallIntegerField()
    price_per_ticket = models.DecimalField(max_digits=10, decimal_places=2)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PAID)
    razorpay_order_id = models.CharField(max_length=64)
    razorpay_payment_id = models.CharField(max_length=64)
    razorpay_signature = models.CharField(max_length=128)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["razorpay_order_id", "razorpay_payment_id"],
                name="unique_booking_per_payment",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="checkout_booking_user_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.razorpay_order_id} - {self.status}"
