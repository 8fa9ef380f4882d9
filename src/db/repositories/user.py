from sqlalchemy import select

from src.db.models import Profile, User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session) -> None:
        super().__init__(User, session)

    async def get_or_create(self, email: str) -> User:
        """Находит пользователя по email или создает новый аккаунт без профиля."""
        user = await self.get_by_email(email)

        if user is None:
            user = await self.create(email=email)

        return user

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(self.model).where(self.model.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


class ProfileRepository(BaseRepository[Profile]):
    def __init__(self, session) -> None:
        super().__init__(Profile, session)

    async def set_full_name(self, user_id: str, full_name: str | None) -> Profile:
        """Создает профиль пользователя или меняет в нем отображаемое имя."""
        profile = await self.get_by_id(user_id)

        if profile is None:
            return await self.create(id=user_id, full_name=full_name)

        return await self.update(profile, full_name=full_name)
