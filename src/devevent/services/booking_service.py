import re

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.exceptions import EventNotFoundException, StoreException, ValidationException
from devevent.models import Booking, Event

logger = structlog.get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(email: str) -> str:
    """Lowercase and trim an email address, rejecting malformed ones."""
    normalized = email.strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValidationException("Please provide a valid email address")
    return normalized


class BookingService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_booking(self, event_id: int, email: str) -> Booking:
        """Book an event; the event must exist at write time."""
        normalized = normalize_email(email)
        try:
            exists = await self.db.scalar(select(Event.id).where(Event.id == event_id))
            if exists is None:
                raise EventNotFoundException("Referenced event does not exist")

            booking = Booking(event_id=event_id, email=normalized)
            self.db.add(booking)
            await self.db.flush()
            await self.db.refresh(booking)
        except SQLAlchemyError as e:
            raise StoreException("Failed to create booking", details=str(e)) from e

        logger.info("booking_created", booking_id=booking.id, event_id=event_id)
        return booking

    async def count_bookings(self, event_id: int) -> int:
        try:
            total = await self.db.scalar(
                select(func.count()).select_from(Booking).where(Booking.event_id == event_id)
            )
        except SQLAlchemyError as e:
            raise StoreException("Failed to count bookings", details=str(e)) from e
        return total or 0
