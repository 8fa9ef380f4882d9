from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .user import User


class Profile(Base):
    """Публичный профиль пользователя. Ключ совпадает с id аккаунта."""

    __tablename__ = "profiles"
    id: Mapped[str] = mapped_column(ForeignKey("users.id"), primary_key=True)
    full_name: Mapped[str | None] = mapped_column(String)

    user: Mapped["User"] = relationship(back_populates="profile")
