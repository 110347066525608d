import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from certifytrack.utils.utils import utc_now


class MentorBase(SQLModel):
    full_name: str
    email: str = Field(unique=True)
    domain: str
    specialization: Optional[str] = None
    experience_years: Optional[int] = None
    linkedin_url: Optional[str] = None
    profile_photo_url: Optional[str] = None
    bio: Optional[str] = None
    availability_status: Optional[str] = None
    verified: bool = False
    rating: float = 0
    review_count: int = 0


class Mentor(MentorBase, table=True):
    __tablename__ = "mentors"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    joined_on: datetime = Field(default_factory=utc_now)
    last_active: Optional[datetime] = None
    updated_at: datetime = Field(default_factory=utc_now)
