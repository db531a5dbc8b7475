"""SQLAlchemy models for tripledger storage."""

from datetime import datetime, UTC
from sqlalchemy import Column, String, Text, DateTime, Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class StorageSlot(Base):
    """Named slot holding one serialized document."""

    __tablename__ = "storage_slots"

    name = Column(String, primary_key=True)
    payload = Column(Text, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    No connection is opened here; the schema is created separately with
    create_schema.
    """
    return sessionmaker(bind=engine)


def create_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)
