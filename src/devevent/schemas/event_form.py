"""Reconstruct an EventCreate from multipart form data.

Form fields arrive as strings, with ``tags`` and ``agenda`` carrying JSON
arrays. Anything that does not parse into the typed model is rejected here,
before the image is uploaded or anything touches the store.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError
from starlette.datastructures import UploadFile

from devevent.exceptions import ImageRequiredException, ValidationException
from devevent.schemas.event import EventCreate

_SCALAR_FIELDS = (
    "title",
    "description",
    "overview",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)


@dataclass
class ParsedEventForm:
    event: EventCreate
    image: UploadFile


def _parse_json_list(fields: Mapping[str, Any], name: str) -> list[str]:
    raw = fields.get(name)
    try:
        value = json.loads(raw) if isinstance(raw, str) else None
    except json.JSONDecodeError:
        value = None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationException(f"Invalid JSON format for {name} field")
    return value


def parse_event_form(fields: Mapping[str, Any]) -> ParsedEventForm:
    """
    Validate a multipart event form.

    Args:
        fields: Form mapping, e.g. the result of ``await request.form()``

    Raises:
        ImageRequiredException: No image file in the form
        ValidationException: Malformed tags/agenda JSON or invalid fields
    """
    image = fields.get("image")
    if not isinstance(image, UploadFile) or not image.filename:
        raise ImageRequiredException()

    tags = _parse_json_list(fields, "tags")
    agenda = _parse_json_list(fields, "agenda")

    payload: dict[str, Any] = {
        name: fields[name] for name in _SCALAR_FIELDS if isinstance(fields.get(name), str)
    }
    try:
        event = EventCreate(**payload, tags=tags, agenda=agenda)
    except ValidationError as e:
        raise ValidationException(
            "Invalid event data",
            details=[
                {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ],
        ) from e

    return ParsedEventForm(event=event, image=image)
