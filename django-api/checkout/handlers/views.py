"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from checkout.domain.errors import (
    DomainError,
    ErrorCode,
    PersistenceFailedError,
    UnauthenticatedError,
)
from checkout.gateway import get_gateway
from checkout.handlers.serializers import BookingSerializer, CreatedOrderSerializer
from checkout.services import BookingHistoryService, OrderInitiator, PaymentVerifier
from checkout.stores.django_store import DjangoBookingStore, DjangoEventPriceStore

ERROR_STATUS = {
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VERIFICATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.UPSTREAM_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    body = {"error": error.message}
    if isinstance(error, PersistenceFailedError):
        body.update(details=error.details, hint=error.hint, code=error.db_code)
    return Response(body, status=ERROR_STATUS[error.code])


def session_user_id(request: Request) -> str:
    if not request.user or not request.user.is_authenticated:
        raise UnauthenticatedError()
    return str(request.user.pk)


class RazorpayView(APIView):
    """Handler for POST /api/razorpay

    One endpoint for both halves of the handshake, selected by ``action``:
    ``create`` opens a gateway order, ``verify`` checks the callback and
    records the booking.
    """

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        try:
            user_id = session_user_id(request)
            body = request.data if isinstance(request.data, dict) else {}
            action = body.get("action")
            if action == "create":
                return self._create(user_id, body)
            if action == "verify":
                return self._verify(user_id, body)
        except DomainError as exc:
            return error_response(exc)
        return Response({"error": "Invalid action"}, status=status.HTTP_400_BAD_REQUEST)

    def _create(self, user_id: str, body: dict) -> Response:
        initiator = OrderInitiator(DjangoEventPriceStore(), get_gateway())
        order = initiator.create_order(user_id, body.get("eventId"), body.get("quantity"))
        return Response(CreatedOrderSerializer(order).data)

    def _verify(self, user_id: str, body: dict) -> Response:
        verifier = PaymentVerifier(DjangoEventPriceStore(), DjangoBookingStore(), get_gateway())
        verifier.verify(
            user_id,
            order_id=body.get("razorpay_order_id"),
            payment_id=body.get("razorpay_payment_id"),
            signature=body.get("razorpay_signature"),
            event_id=body.get("eventId"),
            quantity=body.get("quantity"),
            claimed_user_id=body.get("userId"),
        )
        return Response({"success": True})


class BookingListView(APIView):
    """Handler for GET /api/bookings"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        service = BookingHistoryService(DjangoBookingStore())
        try:
            bookings = service.list_for_user(session_user_id(request))
        except DomainError as exc:
            return error_response(exc)
        return Response({"bookings": BookingSerializer(bookings, many=True).data})
