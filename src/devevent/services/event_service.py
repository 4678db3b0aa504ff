import structlog
from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.exceptions import EventNotFoundException, StoreException
from devevent.models import Event
from devevent.schemas import EventCreate
from devevent.utils.slug import next_available_slug, slugify

logger = structlog.get_logger(__name__)


class EventService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_events(self) -> list[Event]:
        """All events, newest first"""
        query = select(Event).order_by(Event.created_at.desc(), Event.id.desc())
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise StoreException("Event fetching failed", details=str(e)) from e
        return list(result.scalars().all())

    async def get_event_by_slug(self, slug: str) -> Event:
        """Event by slug, or EventNotFoundException"""
        try:
            result = await self.db.execute(select(Event).where(Event.slug == slug))
        except SQLAlchemyError as e:
            raise StoreException("Failed to fetch events", details=str(e)) from e

        event = result.scalar_one_or_none()
        if event is None:
            raise EventNotFoundException(f'Event with slug "{slug}" not found')
        return event

    async def get_similar_events(self, slug: str, limit: int = 3) -> list[Event]:
        """Other events sharing at least one tag with the given event"""
        event = await self.get_event_by_slug(slug)
        wanted = {tag.lower() for tag in event.tags}

        others = [other for other in await self.list_events() if other.id != event.id]
        similar = [
            other for other in others
            if wanted.intersection(tag.lower() for tag in other.tags)
        ]
        return similar[:limit]

    async def create_event(self, event_data: EventCreate, image_url: str) -> Event:
        """Persist a new event; the slug is derived from the title"""
        try:
            slug = await self._unique_slug(event_data.title)
            event = Event(
                **event_data.model_dump(),
                slug=slug,
                image=image_url,
            )
            self.db.add(event)
            await self.db.flush()
            await self.db.refresh(event)
        except SQLAlchemyError as e:
            raise StoreException("Event Creation failed", details=str(e)) from e

        logger.info("event_created", event_id=event.id, slug=event.slug)
        return event

    async def _unique_slug(self, title: str) -> str:
        base = slugify(title) or "event"
        result = await self.db.execute(
            select(Event.slug).where(
                or_(Event.slug == base, Event.slug.like(f"{base}-%"))
            )
        )
        return next_available_slug(base, set(result.scalars().all()))
