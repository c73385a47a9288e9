"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField(source="title")
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(allow_null=True)
    city = serializers.CharField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    image = serializers.CharField(source="image_url", allow_null=True)
    genre = serializers.CharField()
    isTrending = serializers.BooleanField(source="is_trending")


class FilterOptionsSerializer(serializers.Serializer):
    """Serializer for FilterOptions domain model."""

    genres = serializers.ListField(child=serializers.CharField())
    cities = serializers.ListField(child=serializers.CharField())


class EventQuerySerializer(serializers.Serializer):
    """Query parameters accepted by the event list."""

    genre = serializers.CharField(required=False, allow_blank=True)
    city = serializers.CharField(required=False, allow_blank=True)
    period = serializers.CharField(required=False, allow_blank=True)
    price = serializers.CharField(required=False, allow_blank=True)
