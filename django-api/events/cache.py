"""Cache keys for catalog reads."""

LIST_KEY = "events:list"
FILTERS_KEY = "events:filters"


def detail_key(event_id: str) -> str:
    return f"events:{event_id}"
