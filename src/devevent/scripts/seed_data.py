import asyncio

import structlog

from devevent.config import get_settings
from devevent.database import acquire_connection, connection_cache
from devevent.logging_config import configure_logging
from devevent.schemas import EventCreate
from devevent.services import EventService

logger = structlog.get_logger(__name__)

SAMPLE_EVENTS = [
    (
        EventCreate(
            title="React Summit 2025",
            description="The biggest React conference worldwide, with talks from core team members.",
            overview="Two days of React, Next.js and the wider ecosystem.",
            venue="Kromhouthal",
            location="Amsterdam, Netherlands",
            date="2025-06-13",
            time="09:00",
            mode="hybrid",
            audience="Frontend developers",
            agenda=["Keynote", "Server components deep dive", "Panel: the future of React"],
            organizer="GitNation",
            tags=["react", "frontend", "javascript"],
        ),
        "https://images.unsplash.com/photo-1540575467063-178a50c2df87",
    ),
    (
        EventCreate(
            title="PyCon US",
            description="The largest annual gathering for the community using and developing Python.",
            overview="Tutorials, talks, sprints and an open-spaces track.",
            venue="David L. Lawrence Convention Center",
            location="Pittsburgh, PA",
            date="2025-05-14",
            time="8:30 AM",
            mode="offline",
            audience="Python developers",
            agenda=["Tutorials", "Talks", "Sprints"],
            organizer="Python Software Foundation",
            tags=["python", "backend"],
        ),
        "https://images.unsplash.com/photo-1515187029135-18ee286d815b",
    ),
    (
        EventCreate(
            title="HackMIT",
            description="A weekend-long hackathon where students build projects with sponsors and mentors.",
            overview="24 hours of building, demos and prizes.",
            venue="MIT Campus",
            location="Cambridge, MA",
            date="2025-09-20",
            time="10:00",
            mode="offline",
            audience="Students",
            agenda=["Opening ceremony", "Hacking", "Demos", "Awards"],
            organizer="HackMIT",
            tags=["hackathon", "python", "javascript"],
        ),
        "https://images.unsplash.com/photo-1504384308090-c894fdcc538d",
    ),
]


async def create_seed_data() -> None:
    database = await acquire_connection()
    try:
        async with database.session() as db:
            service = EventService(db)
            for event_data, image_url in SAMPLE_EVENTS:
                await service.create_event(event_data, image_url=image_url)
            await db.commit()
    finally:
        await connection_cache.aclose()

    logger.info("seed_data_created", events=len(SAMPLE_EVENTS))


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    asyncio.run(create_seed_data())


if __name__ == "__main__":
    main()
