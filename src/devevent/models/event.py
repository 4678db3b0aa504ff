from sqlalchemy import JSON, BigInteger, Column, DateTime, Integer, String, Text, func

from devevent.models.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY
PrimaryKey = BigInteger().with_variant(Integer(), "sqlite")


class Event(Base):
    __tablename__ = "events"

    id = Column(PrimaryKey, primary_key=True)
    title = Column(String(100), nullable=False)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    overview = Column(Text, nullable=False)
    image = Column(String(500), nullable=False)
    venue = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    date = Column(String(10), nullable=False)
    time = Column(String(5), nullable=False)
    mode = Column(String(20), nullable=False)
    audience = Column(String(200), nullable=False)
    agenda = Column(JSON, nullable=False, default=list)
    organizer = Column(String(200), nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
