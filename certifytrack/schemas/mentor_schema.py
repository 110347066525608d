from typing import Optional

from pydantic import BaseModel


class MentorCreate(BaseModel):
    email: str


class MentorProfileUpdate(BaseModel):
    """Fields a mentor may fill in through their own form link."""
    full_name: Optional[str] = None
    domain: Optional[str] = None
    specialization: Optional[str] = None
    experience_years: Optional[int] = None
    linkedin_url: Optional[str] = None
    profile_photo_url: Optional[str] = None
    bio: Optional[str] = None
    availability_status: Optional[str] = None


class MentorUpdate(MentorProfileUpdate):
    verified: Optional[bool] = None


class MentorFormLink(BaseModel):
    email: str
    link: str
