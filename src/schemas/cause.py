import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

ANONYMOUS_NAME = "Anonymous"

# совпадает с Numeric(12, 2) колонки causes.goal
GOAL_MAX_DIGITS = 12
GOAL_DECIMAL_PLACES = 2


class CauseFormData(BaseModel):
    """Данные формы создания кампании. Лишние поля (включая status) отбрасываются."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    description: str
    category: str = Field(min_length=1)
    # "1500.50" и 1500.5 приводятся к числу
    goal: Decimal = Field(ge=0, max_digits=GOAL_MAX_DIGITS, decimal_places=GOAL_DECIMAL_PLACES)


class CauseUpdateData(BaseModel):
    """Частичное обновление кампании владельцем."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    category: str | None = Field(default=None, min_length=1)
    goal: Decimal | None = Field(default=None, ge=0, max_digits=GOAL_MAX_DIGITS, decimal_places=GOAL_DECIMAL_PLACES)


class CauseFilterOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str | None = None
    status: str | None = None
    user_id: str | None = None
    # 0 означает "без ограничения"
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)


class CauseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: str
    category: str
    goal: Decimal
    status: str
    rejection_reason: str | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class CauseOwner(BaseModel):
    name: str = ANONYMOUS_NAME
    email: str = ""


class CauseWithUser(CauseRead):
    user: CauseOwner
