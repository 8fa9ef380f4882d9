import datetime
import enum
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.schemas.cause import GOAL_DECIMAL_PLACES, GOAL_MAX_DIGITS

from .base import Base

if TYPE_CHECKING:
    from .profile import Profile
    from .user import User


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class CauseStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Cause(Base):
    """Кампания по сбору средств, проходящая модерацию."""

    __tablename__ = "causes"
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    title: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String, index=True)
    goal: Mapped[Decimal] = mapped_column(Numeric(GOAL_MAX_DIGITS, GOAL_DECIMAL_PLACES))
    status: Mapped[str] = mapped_column(String, default=CauseStatus.PENDING.value, index=True) # pending, approved, rejected
    rejection_reason: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    user: Mapped["User"] = relationship(back_populates="causes")
    profile: Mapped[Optional["Profile"]] = relationship(
        primaryjoin="foreign(Cause.user_id) == Profile.id",
        viewonly=True,
    )
