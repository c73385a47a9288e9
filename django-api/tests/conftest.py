"""Pytest configuration and shared fixtures."""

import hashlib
import hmac
from datetime import date, time
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest
import razorpay
from rest_framework.test import APIClient

from checkout.domain import Booking, EventPrice, GatewayOrder, Price
from checkout.gateway import reset_gateway
from checkout.gateway.interfaces import PaymentGateway
from checkout.gateway.razorpay_gateway import RazorpayGateway
from checkout.stores.interfaces import BookingStore, BookingWriteError, EventPriceStore

TEST_KEY_ID = "rzp_test_key"
TEST_SECRET = "test_secret"


def sign(secret: str, order_id: str, payment_id: str) -> str:
    """Signature Razorpay attaches to a successful checkout callback."""
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def razorpay_settings(settings):
    settings.RAZORPAY_KEY_ID = TEST_KEY_ID
    settings.RAZORPAY_KEY_SECRET = TEST_SECRET
    settings.RAZORPAY_CURRENCY = "INR"
    reset_gateway()
    yield settings
    reset_gateway()


class FakePriceStore(EventPriceStore):
    def __init__(self) -> None:
        self.events: dict[UUID, EventPrice] = {}

    def add(self, price: str, title: str = "Test Gig") -> UUID:
        event_id = uuid4()
        self.events[event_id] = EventPrice(event_id=event_id, title=title, price=Price(Decimal(price)))
        return event_id

    def get_event_price(self, event_id: UUID) -> EventPrice | None:
        return self.events.get(event_id)


class FakeBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: list[Booking] = []
        self.fail_with: BookingWriteError | None = None

    def insert_booking(self, booking: Booking) -> Booking:
        if self.fail_with is not None:
            raise self.fail_with
        for existing in self.bookings:
            if (existing.order_id, existing.payment_id) == (booking.order_id, booking.payment_id):
                raise BookingWriteError("duplicate key value", code="23505")
        self.bookings.append(booking)
        return booking

    def list_bookings_for_user(self, user_id: str) -> list[Booking]:
        return [b for b in reversed(self.bookings) if b.user_id == user_id]


class FakeGateway(PaymentGateway):
    """Records created orders and verifies with a known secret."""

    key_id = TEST_KEY_ID
    currency = "INR"

    def __init__(self, secret: str = TEST_SECRET) -> None:
        self.secret = secret
        self.orders: list[dict] = []

    def create_order(self, amount: int, currency: str, receipt: str, notes: dict[str, str]) -> GatewayOrder:
        self.orders.append({"amount": amount, "currency": currency, "receipt": receipt, "notes": notes})
        return GatewayOrder(order_id=f"order_{len(self.orders)}", amount=amount, currency=currency, receipt=receipt)

    def verify_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        return hmac.compare_digest(sign(self.secret, order_id, payment_id).encode(), signature.encode())


@pytest.fixture
def price_store() -> FakePriceStore:
    return FakePriceStore()


@pytest.fixture
def booking_store() -> FakeBookingStore:
    return FakeBookingStore()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def razorpay_client() -> razorpay.Client:
    """SDK client with a stubbed order API; order.create echoes the request."""
    client = razorpay.Client(auth=(TEST_KEY_ID, TEST_SECRET))
    client.order = MagicMock()

    def create(data):
        return {
            "id": "order_TEST123",
            "entity": "order",
            "amount": data["amount"],
            "currency": data["currency"],
            "receipt": data["receipt"],
            "status": "created",
            "notes": data["notes"],
        }

    client.order.create.side_effect = create
    return client


@pytest.fixture
def live_gateway(monkeypatch, razorpay_client) -> RazorpayGateway:
    """Real gateway adapter wired into the views with a stubbed order API."""
    gateway = RazorpayGateway(TEST_KEY_ID, TEST_SECRET, currency="INR", client=razorpay_client)
    monkeypatch.setattr("checkout.handlers.views.get_gateway", lambda: gateway)
    return gateway


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="fan@example.com", email="fan@example.com", password="s3cret-pass"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="other@example.com", email="other@example.com", password="s3cret-pass"
    )


@pytest.fixture
def make_event(db):
    from events.models import Event

    def make(**overrides) -> Event:
        fields = {
            "title": "Midnight Echoes",
            "description": "An evening of synthwave",
            "date": date(2030, 6, 1),
            "time": time(20, 0),
            "city": "Mumbai",
            "price": Decimal("25.00"),
            "genre": "Electronic",
            "image_url": "https://img.example.com/echoes.jpg",
        }
        fields.update(overrides)
        return Event.objects.create(**fields)

    return make
