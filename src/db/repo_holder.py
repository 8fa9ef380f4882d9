from sqlalchemy.ext.asyncio import AsyncSession

from src.db.repositories import (
    CauseRepository,
    ProfileRepository,
    UserRepository,
)


class RepoHolder:
    """Этот класс содержит все репозитории для удобной передачи в сервисы."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user = UserRepository(session)
        self.profile = ProfileRepository(session)
        self.cause = CauseRepository(session)
