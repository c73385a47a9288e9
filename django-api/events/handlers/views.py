"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import FILTERS_KEY, LIST_KEY, detail_key
from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import (
    EventQuerySerializer,
    EventSerializer,
    FilterOptionsSerializer,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": error.message, "code": error.code.value},
        status=ERROR_STATUS[error.code],
    )


class EventListView(APIView):
    """Handler for GET /api/events"""

    authentication_classes = []

    def get(self, request: Request) -> Response:
        query = EventQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        service = get_event_service()
        filters = service.build_filters(**query.validated_data)

        if filters.is_empty:
            payload = cache.get(LIST_KEY)
            if payload is None:
                payload = EventSerializer(service.list_events(filters), many=True).data
                cache.set(LIST_KEY, payload, settings.CATALOG_CACHE_TIMEOUT)
        else:
            payload = EventSerializer(service.list_events(filters), many=True).data
        return Response({"events": payload})


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    authentication_classes = []

    def get(self, request: Request, event_id: str) -> Response:
        service = get_event_service()
        try:
            parsed = service.parse_event_id(event_id)
        except DomainError as exc:
            return error_response(exc)
        # invalidation only ever deletes the canonical key
        key = detail_key(str(parsed))
        payload = cache.get(key)
        if payload is None:
            try:
                event = service.get_event(str(parsed))
            except DomainError as exc:
                return error_response(exc)
            payload = EventSerializer(event).data
            cache.set(key, payload, settings.CATALOG_CACHE_TIMEOUT)
        return Response({"event": payload})


class SearchView(APIView):
    """Handler for GET /api/search?q="""

    authentication_classes = []

    def get(self, request: Request) -> Response:
        events = get_event_service().search(request.query_params.get("q"))
        return Response({"events": EventSerializer(events, many=True).data})


class FilterOptionsView(APIView):
    """Handler for GET /api/filters"""

    authentication_classes = []

    def get(self, request: Request) -> Response:
        payload = cache.get(FILTERS_KEY)
        if payload is None:
            payload = FilterOptionsSerializer(get_event_service().get_filter_options()).data
            cache.set(FILTERS_KEY, payload, settings.CATALOG_CACHE_TIMEOUT)
        return Response(payload)
