import logging
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError

from src.core.settings import settings
from src.db.models import CauseStatus
from src.db.models.cause import utcnow
from src.db.repo_holder import RepoHolder
from src.schemas import (
    CauseFilterOptions,
    CauseFormData,
    CauseOwner,
    CauseRead,
    CauseUpdateData,
    CauseWithUser,
)
from src.schemas.cause import ANONYMOUS_NAME
from src.services.revalidation import (
    ADMIN_CAUSES_PATH,
    CAUSES_PATH,
    PathRevalidator,
    cause_detail_path,
)

logger = logging.getLogger(__name__)

MODERATION_STATUSES = {CauseStatus.APPROVED, CauseStatus.REJECTED}


def _as_filters(filters: CauseFilterOptions | Mapping[str, Any] | None) -> CauseFilterOptions:
    if filters is None:
        return CauseFilterOptions()

    if isinstance(filters, CauseFilterOptions):
        return filters

    return CauseFilterOptions.model_validate(filters)


async def get_cause(repo: RepoHolder, cause_id: str) -> CauseWithUser | None:
    """Возвращает кампанию с данными владельца или None, если ее нет."""
    try:
        cause = await repo.cause.get_with_owner(cause_id)
    except SQLAlchemyError:
        await repo.session.rollback()
        logger.exception("Error fetching cause %s", cause_id)
        raise

    if cause is None:
        return None

    profile_name = cause.profile.full_name if cause.profile else None
    email = cause.user.email if cause.user else None

    return CauseWithUser(
        **CauseRead.model_validate(cause).model_dump(),
        user=CauseOwner(name=profile_name or ANONYMOUS_NAME, email=email or ""),
    )


async def create_cause(
    repo: RepoHolder,
    revalidator: PathRevalidator,
    user_id: str,
    data: CauseFormData | Mapping[str, Any],
) -> CauseRead:
    """Создает кампанию. Новая кампания всегда ждет модерации."""
    form = data if isinstance(data, CauseFormData) else CauseFormData.model_validate(data)

    try:
        cause = await repo.cause.create(
            user_id=user_id,
            title=form.title,
            description=form.description,
            category=form.category,
            goal=form.goal,
            status=CauseStatus.PENDING.value,
        )
    except SQLAlchemyError:
        await repo.session.rollback()
        logger.exception("Error creating cause for user %s", user_id)
        raise

    revalidator.revalidate_path(CAUSES_PATH)
    return CauseRead.model_validate(cause)


async def update_cause(
    repo: RepoHolder,
    revalidator: PathRevalidator,
    cause_id: str,
    user_id: str,
    data: CauseUpdateData | Mapping[str, Any],
) -> CauseRead:
    """Обновляет переданные поля кампании, если она принадлежит пользователю."""
    form = data if isinstance(data, CauseUpdateData) else CauseUpdateData.model_validate(data)
    values = form.model_dump(exclude_unset=True, exclude_none=True)

    try:
        cause = await repo.cause.update_owned(cause_id, user_id, **values, updated_at=utcnow())
    except SQLAlchemyError:
        await repo.session.rollback()
        logger.exception("Error updating cause %s for user %s", cause_id, user_id)
        raise

    revalidator.revalidate_path(cause_detail_path(cause_id))
    revalidator.revalidate_path(CAUSES_PATH)
    return CauseRead.model_validate(cause)


async def list_causes(
    repo: RepoHolder,
    filters: CauseFilterOptions | Mapping[str, Any] | None = None,
) -> list[CauseRead]:
    """Список кампаний, сначала новые. По умолчанию только одобренные."""
    options = _as_filters(filters)

    try:
        causes = await repo.cause.get_filtered(options, page_size=settings.default_page_size)
    except SQLAlchemyError:
        await repo.session.rollback()
        logger.exception("Error listing causes with %s", options)
        raise

    return [CauseRead.model_validate(cause) for cause in causes]


async def count_causes(
    repo: RepoHolder,
    filters: CauseFilterOptions | Mapping[str, Any] | None = None,
) -> int:
    options = _as_filters(filters)

    try:
        return await repo.cause.count_filtered(options)
    except SQLAlchemyError:
        await repo.session.rollback()
        logger.exception("Error counting causes with %s", options)
        raise


async def update_cause_status(
    repo: RepoHolder,
    revalidator: PathRevalidator,
    cause_id: str,
    status: CauseStatus | str,
    rejection_reason: str | None = None,
) -> CauseRead:
    """Одобряет или отклоняет кампанию (для модераторов).

    Права модератора проверяются до вызова, владелец здесь не сверяется.
    Причина отказа сохраняется только при отклонении, одобрение ее стирает.
    """
    status = CauseStatus(status)
    if status not in MODERATION_STATUSES:
        raise ValueError(f"Cause status can only be set to approved or rejected, got {status.value!r}")

    values: dict[str, Any] = {"status": status.value, "updated_at": utcnow()}
    if status is CauseStatus.REJECTED:
        if rejection_reason:
            values["rejection_reason"] = rejection_reason
    else:
        values["rejection_reason"] = None

    try:
        cause = await repo.cause.update_by_id(cause_id, **values)
    except SQLAlchemyError:
        await repo.session.rollback()
        logger.exception("Error updating status of cause %s", cause_id)
        raise

    revalidator.revalidate_path(ADMIN_CAUSES_PATH)
    return CauseRead.model_validate(cause)
