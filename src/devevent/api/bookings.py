from fastapi import APIRouter, Depends, status

from devevent.api.dependencies import get_booking_service
from devevent.models.errors import ErrorResponse
from devevent.schemas import BookingCreate, BookingCreatedResponse, BookingResponse
from devevent.services import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_booking(
    booking_data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Book a seat for an existing event."""
    booking = await service.create_booking(booking_data.event_id, booking_data.email)
    await service.db.commit()
    return BookingCreatedResponse(
        message="Booking created successfully",
        booking=BookingResponse.model_validate(booking),
    )
