"""Server-rendered landing page listing featured events."""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import httpx
import structlog
from cachetools import TTLCache
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from devevent.config import get_settings

logger = structlog.get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter(tags=["pages"])


PAGE_CACHE_KEY = "landing"

_page_cache: TTLCache | None = None


def get_page_cache() -> TTLCache:
    """Rendered page cache, rebuilt when PAGE_CACHE_SECONDS changes."""
    global _page_cache
    ttl = get_settings().page_cache_seconds
    if _page_cache is None or _page_cache.ttl != ttl:
        _page_cache = TTLCache(maxsize=8, ttl=ttl)
    return _page_cache


def reset_page_cache() -> None:
    global _page_cache
    _page_cache = None


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=10.0) as client:
        yield client


async def fetch_featured_events(client: httpx.AsyncClient, base_url: str) -> list[dict[str, Any]] | None:
    """
    Fetch events from the public API.

    Returns:
        The events list, or None when the upstream failed or answered with an
        unexpected shape.
    """
    url = f"{base_url.rstrip('/')}/api/events"
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.error("featured_events_fetch_failed", url=url, error=str(e))
        return None

    if not response.is_success:
        logger.error(
            "featured_events_fetch_failed",
            url=url,
            status=response.status_code,
            reason=response.reason_phrase,
        )
        return None

    try:
        data = response.json()
    except ValueError as e:
        logger.error("featured_events_invalid_json", url=url, error=str(e))
        return None

    events = data.get("events") if isinstance(data, dict) else None
    if not isinstance(events, list):
        logger.error("featured_events_invalid_shape", url=url)
        return None
    return events


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
) -> HTMLResponse:
    """Landing page. Upstream failures render an empty list, never a 500."""
    settings = get_settings()
    cache = get_page_cache()
    cached = cache.get(PAGE_CACHE_KEY)
    if cached is not None:
        return HTMLResponse(cached)

    events = await fetch_featured_events(client, settings.base_url)

    html = templates.get_template("index.html").render(
        request=request,
        events=events or [],
    )
    # Only successful fetches are cached so an outage does not pin an empty page
    if events is not None and settings.page_cache_seconds > 0:
        cache[PAGE_CACHE_KEY] = html
    return HTMLResponse(html)
