from fastapi import APIRouter, Depends, Request, status

from devevent.api.dependencies import get_event_service, get_image_uploader
from devevent.config import get_settings
from devevent.exceptions import ImageRequiredException, InvalidSlugException
from devevent.models.errors import ErrorCode, ErrorResponse
from devevent.schemas import (
    EventDetailResponse,
    EventListResponse,
    EventResponse,
    parse_event_form,
)
from devevent.services import EventService
from devevent.storage import ImageUploader
from devevent.utils.slug import is_valid_slug

router = APIRouter(prefix="/events", tags=["events"])


def validate_slug(slug: str) -> str:
    """Reject malformed slugs before touching the database."""
    if not slug:
        raise InvalidSlugException(
            "Slug parameter is required and must be a valid string",
            error_code=ErrorCode.INVALID_SLUG,
        )
    if not is_valid_slug(slug):
        raise InvalidSlugException(
            "Invalid slug format. Slug must contain only lowercase letters, numbers, and hyphens"
        )
    return slug


@router.get("", response_model=EventListResponse, responses={500: {"model": ErrorResponse}})
async def list_events(service: EventService = Depends(get_event_service)):
    """List all events, newest first."""
    events = await service.list_events()
    return EventListResponse(
        message="Events fetched successfully",
        events=[EventResponse.model_validate(event) for event in events],
    )


@router.post(
    "",
    response_model=EventDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_event(
    request: Request,
    service: EventService = Depends(get_event_service),
    uploader: ImageUploader = Depends(get_image_uploader),
):
    """Create an event from a multipart form that includes the image."""
    form = await request.form()
    parsed = parse_event_form(form)

    image_data = await parsed.image.read()
    if not image_data:
        raise ImageRequiredException()

    upload = await uploader.upload(
        image_data,
        filename=parsed.image.filename or "image",
        folder=get_settings().upload_folder,
    )

    event = await service.create_event(parsed.event, image_url=upload.secure_url)
    await service.db.commit()
    return EventDetailResponse(
        message="Event created successfully",
        event=EventResponse.model_validate(event),
    )


@router.get(
    "/{slug}",
    response_model=EventDetailResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_event(
    event_slug: str = Depends(validate_slug),
    service: EventService = Depends(get_event_service),
):
    """Get a single event by slug."""
    event = await service.get_event_by_slug(event_slug)
    return EventDetailResponse(
        message="Event fetched successfully",
        event=EventResponse.model_validate(event),
    )


@router.get(
    "/{slug}/similar",
    response_model=EventListResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_similar_events(
    event_slug: str = Depends(validate_slug),
    service: EventService = Depends(get_event_service),
):
    """Get events sharing a tag with the given event."""
    events = await service.get_similar_events(event_slug)
    return EventListResponse(
        message="Similar events fetched successfully",
        events=[EventResponse.model_validate(event) for event in events],
    )
