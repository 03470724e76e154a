"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

OWN_PROFILE_ID = 1


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class OwnProfileModel(Base):
    """The device owner's profile, stored as its canonical encoding.

    The table never holds more than one row (``id`` is pinned to 1).
    """

    __tablename__ = "own_profile"
    __table_args__ = (CheckConstraint(f"id = {OWN_PROFILE_ID}", name="ck_own_profile_single_row"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=OWN_PROFILE_ID)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
