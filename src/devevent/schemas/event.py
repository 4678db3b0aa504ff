import re
from datetime import date as date_type
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TIME_24H = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_TIME_12H = re.compile(r"^(0?[1-9]|1[0-2]):([0-5]\d)\s*([AaPp][Mm])$")


def normalize_date(value: str) -> str:
    """Normalize a date string to ISO YYYY-MM-DD."""
    value = value.strip()
    try:
        return date_type.fromisoformat(value).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date().isoformat()
    except ValueError:
        raise ValueError("Invalid date format. Expected YYYY-MM-DD") from None


def normalize_time(value: str) -> str:
    """Normalize "HH:MM" or "h:mm AM/PM" to 24-hour "HH:MM"."""
    value = value.strip()
    match = _TIME_24H.match(value)
    if match:
        return f"{int(match.group(1)):02d}:{match.group(2)}"

    match = _TIME_12H.match(value)
    if match:
        hours = int(match.group(1)) % 12
        if match.group(3).lower() == "pm":
            hours += 12
        return f"{hours:02d}:{match.group(2)}"

    raise ValueError("Invalid time format. Expected HH:MM or h:mm AM/PM")


class EventBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    overview: str = Field(..., min_length=1, max_length=500)
    venue: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    date: str
    time: str
    mode: Literal["online", "offline", "hybrid"]
    audience: str = Field(..., min_length=1, max_length=200)
    agenda: list[str] = Field(..., min_length=1)
    organizer: str = Field(..., min_length=1, max_length=200)
    tags: list[str] = Field(..., min_length=1)


class EventCreate(EventBase):
    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("mode", mode="before")
    @classmethod
    def lowercase_mode(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        return normalize_date(value)

    @field_validator("time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        return normalize_time(value)

    @field_validator("agenda", "tags")
    @classmethod
    def strip_items(cls, value: list[str]) -> list[str]:
        items = [item.strip() for item in value]
        if any(not item for item in items):
            raise ValueError("Items must be non-empty strings")
        return items


class EventResponse(EventBase):
    id: int
    slug: str
    image: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EventListResponse(BaseModel):
    message: str
    events: list[EventResponse]


class EventDetailResponse(BaseModel):
    message: str
    event: EventResponse
