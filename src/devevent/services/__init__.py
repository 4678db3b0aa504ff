from devevent.services.event_service import EventService
from devevent.services.booking_service import BookingService, normalize_email

__all__ = ["EventService", "BookingService", "normalize_email"]
