from sqlalchemy import ColumnElement, func, select, update
from sqlalchemy.orm import joinedload

from src.db.filters import build_conditions
from src.db.models import Cause
from src.schemas import CauseFilterOptions

from .base import BaseRepository


class CauseRepository(BaseRepository[Cause]):
    def __init__(self, session) -> None:
        super().__init__(Cause, session)

    async def get_with_owner(self, cause_id: str) -> Cause | None:
        """Кампания вместе с профилем и аккаунтом владельца."""
        stmt = select(self.model).where(self.model.id == cause_id).options(
            joinedload(self.model.user),
            joinedload(self.model.profile),
        )
        result = await self.session.execute(stmt)

        return result.scalar_one_or_none()

    async def update_owned(self, cause_id: str, user_id: str, **data) -> Cause:
        """Обновляет кампанию, только если она принадлежит пользователю.

        Если строк не нашлось (нет кампании или чужая), падает с NoResultFound.
        """
        return await self._update_where(
            [self.model.id == cause_id, self.model.user_id == user_id],
            **data,
        )

    async def update_by_id(self, cause_id: str, **data) -> Cause:
        return await self._update_where([self.model.id == cause_id], **data)

    async def get_filtered(self, options: CauseFilterOptions, page_size: int) -> list[Cause]:
        """Кампании по фильтрам, сначала новые.

        page_size задает размер страницы, когда есть offset, но нет limit.
        """
        stmt = (
            select(self.model)
            .where(*build_conditions(options))
            .order_by(self.model.created_at.desc())
        )

        if options.limit:
            stmt = stmt.limit(options.limit)

        if options.offset:
            stmt = stmt.offset(options.offset).limit(options.limit or page_size)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_filtered(self, options: CauseFilterOptions) -> int:
        """Количество кампаний по тем же фильтрам, что и get_filtered, без пагинации."""
        stmt = select(func.count(self.model.id)).where(*build_conditions(options))
        result = await self.session.execute(stmt)

        return result.scalar_one_or_none() or 0

    async def _update_where(self, conditions: list[ColumnElement[bool]], **data) -> Cause:
        stmt = (
            update(self.model)
            .where(*conditions)
            .values(**data)
            .returning(self.model)
        )
        result = await self.session.execute(stmt)
        instance = result.scalar_one()

        await self.session.commit()
        await self.session.refresh(instance)

        return instance
