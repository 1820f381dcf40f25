from .base import Base, BaseModel, now_utc
from .user import User

__all__ = ["Base", "BaseModel", "now_utc", "User"]
