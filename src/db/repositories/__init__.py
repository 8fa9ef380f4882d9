from .base import BaseRepository
from .cause import CauseRepository
from .user import ProfileRepository, UserRepository

__all__ = [
    "BaseRepository",
    "CauseRepository",
    "UserRepository",
    "ProfileRepository",
]
