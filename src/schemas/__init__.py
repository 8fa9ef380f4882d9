from .cause import (
    CauseFilterOptions,
    CauseFormData,
    CauseOwner,
    CauseRead,
    CauseUpdateData,
    CauseWithUser,
)

__all__ = [
    "CauseFilterOptions",
    "CauseFormData",
    "CauseOwner",
    "CauseRead",
    "CauseUpdateData",
    "CauseWithUser",
]
