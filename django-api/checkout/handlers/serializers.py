"""Serializers for checkout requests and responses."""

from rest_framework import serializers


class CreatedOrderSerializer(serializers.Serializer):
    """Serializer for CreatedOrder domain model."""

    orderId = serializers.CharField(source="order_id")
    amount = serializers.IntegerField()
    currency = serializers.CharField()
    eventName = serializers.CharField(source="event_name")


class BookedEventSerializer(serializers.Serializer):
    title = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(allow_null=True)
    city = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.IntegerField()
    event_id = serializers.UUIDField()
    quantity = serializers.IntegerField()
    price_per_ticket = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    status = serializers.CharField(source="status.value")
    razorpay_order_id = serializers.CharField(source="order_id")
    razorpay_payment_id = serializers.CharField(source="payment_id")
    created_at = serializers.DateTimeField()
    events = BookedEventSerializer(source="event", allow_null=True)
