from datetime import datetime

from pydantic import BaseModel, Field


class BookingCreate(BaseModel):
    event_id: int = Field(..., ge=1, description="ID of the event being booked")
    email: str = Field(..., max_length=320)


class BookingResponse(BaseModel):
    id: int
    event_id: int
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookingCreatedResponse(BaseModel):
    message: str
    booking: BookingResponse
