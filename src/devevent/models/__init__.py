from devevent.models.base import Base
from devevent.models.event import Event
from devevent.models.booking import Booking

__all__ = ["Base", "Event", "Booking"]
