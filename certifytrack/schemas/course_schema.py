import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel
from sqlmodel import SQLModel

from certifytrack.models import CourseBase


class CourseCreate(CourseBase):
    certificate_templates: Optional[List[uuid.UUID]] = None


class CourseUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    features: Optional[List[str]] = None
    mentors: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    duration_days: Optional[int] = None
    difficulty: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    is_published: Optional[bool] = None
    # None leaves the links alone, [] removes them all
    certificate_templates: Optional[List[uuid.UUID]] = None


class TemplateSummary(BaseModel):
    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True}


class CourseCertificateRead(BaseModel):
    certificate_id: uuid.UUID
    certificate_template: Optional[TemplateSummary] = None

    model_config = {"from_attributes": True}


class CourseRead(CourseBase):
    id: uuid.UUID
    slug: Optional[str] = None
    created_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime
    course_certificates: List[CourseCertificateRead] = []
