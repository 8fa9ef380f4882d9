from sqlalchemy import ColumnElement

from src.db.models import Cause, CauseStatus
from src.schemas import CauseFilterOptions

ALL_CATEGORIES = "all"


def effective_status(options: CauseFilterOptions) -> str | None:
    """Статус, по которому фильтруется выборка.

    Публичный список без явного статуса и без владельца показывает только
    одобренные кампании. Владелец без статуса видит все свои кампании.
    """
    if options.status:
        return options.status

    if options.user_id:
        return None

    return CauseStatus.APPROVED.value


def build_conditions(options: CauseFilterOptions) -> list[ColumnElement[bool]]:
    """Условия WHERE для списка и подсчета, без пагинации."""
    conditions = []

    if options.category and options.category != ALL_CATEGORIES:
        conditions.append(Cause.category == options.category)

    status = effective_status(options)
    if status:
        conditions.append(Cause.status == status)

    if options.user_id:
        conditions.append(Cause.user_id == options.user_id)

    return conditions
