from .base import Base
from .cause import Cause, CauseStatus
from .profile import Profile
from .user import User

__all__ = [
    "Base",
    "User",
    "Profile",
    "Cause",
    "CauseStatus",
]
