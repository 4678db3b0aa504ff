"""Shared FastAPI dependencies."""

from collections.abc import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.config import get_settings
from devevent.database import acquire_connection
from devevent.services import BookingService, EventService
from devevent.storage import ImageUploader, get_uploader


async def get_db() -> AsyncIterator[AsyncSession]:
    database = await acquire_connection()
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_event_service(db: AsyncSession = Depends(get_db)) -> EventService:
    return EventService(db)


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(db)


def get_image_uploader() -> ImageUploader:
    return get_uploader(get_settings())
