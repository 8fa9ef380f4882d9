import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    DateTime,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .cause import Cause
    from .profile import Profile


class User(Base):
    __tablename__ = "users"
    email: Mapped[str | None] = mapped_column(String, unique=True, index=True)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime, server_default=func.now())

    profile: Mapped[Optional["Profile"]] = relationship(back_populates="user")
    causes: Mapped[list["Cause"]] = relationship(back_populates="user")
