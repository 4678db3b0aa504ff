from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, String, func

from devevent.models.base import Base
from devevent.models.event import PrimaryKey


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(PrimaryKey, primary_key=True)
    event_id = Column(BigInteger, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    email = Column(String(320), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_bookings_event_id_email", "event_id", "email"),
    )
