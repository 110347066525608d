import uuid
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class UserRole(str, Enum):
    admin = "admin"
    user = "user"


class User(SQLModel, table=True):
    """Application profile of an account held by the auth service; shares its id."""
    __tablename__ = "users"
    id: uuid.UUID = Field(primary_key=True)
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole = Field(default=UserRole.user)
