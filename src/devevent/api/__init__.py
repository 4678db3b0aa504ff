from fastapi import APIRouter

from devevent.api import bookings, events, images

api_router = APIRouter(prefix="/api")
api_router.include_router(events.router)
api_router.include_router(bookings.router)

__all__ = ["api_router", "images"]
