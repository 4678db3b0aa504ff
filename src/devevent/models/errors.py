"""Error response models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes for API responses."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_SLUG = "INVALID_SLUG"
    INVALID_SLUG_FORMAT = "INVALID_SLUG_FORMAT"
    IMAGE_REQUIRED = "IMAGE_REQUIRED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
    UPLOAD_ERROR = "UPLOAD_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorResponse(BaseModel):
    """Unified error response format."""

    message: str = Field(..., description="Human-readable error description")
    error: str = Field(..., description="Machine-readable error code")
    details: Any | None = Field(None, description="Diagnostics, development only")
