from devevent.schemas.event import (
    EventCreate,
    EventResponse,
    EventListResponse,
    EventDetailResponse,
)
from devevent.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingCreatedResponse,
)
from devevent.schemas.event_form import ParsedEventForm, parse_event_form

__all__ = [
    "EventCreate",
    "EventResponse",
    "EventListResponse",
    "EventDetailResponse",
    "BookingCreate",
    "BookingResponse",
    "BookingCreatedResponse",
    "ParsedEventForm",
    "parse_event_form",
]
