import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import field_validator
from sqlmodel import SQLModel, Field, JSON, Relationship

from certifytrack.utils.utils import utc_now

COURSE_LIST_FIELDS = ("features", "mentors", "tags")


class CourseBase(SQLModel):
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    features: List[str] = Field(default_factory=list, sa_type=JSON)
    mentors: List[str] = Field(default_factory=list, sa_type=JSON)
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    duration_days: Optional[int] = None
    difficulty: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    is_published: bool = False

    @field_validator(*COURSE_LIST_FIELDS, mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return value or []

    @field_validator("is_published", mode="before")
    @classmethod
    def none_as_unpublished(cls, value):
        return False if value is None else value


class Course(CourseBase, table=True):
    __tablename__ = "courses"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    slug: Optional[str] = None
    created_by: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    course_certificates: List["CourseCertificate"] = Relationship(
        back_populates="course", sa_relationship_kwargs={"passive_deletes": True}
    )
    course_tasks: List["CourseTask"] = Relationship(
        back_populates="course", sa_relationship_kwargs={"passive_deletes": True}
    )


class CourseCertificate(SQLModel, table=True):
    """Links a course to a certificate template it can issue."""
    __tablename__ = "course_certificates"
    course_id: uuid.UUID = Field(foreign_key="courses.id", primary_key=True)
    certificate_id: uuid.UUID = Field(foreign_key="certificate_templates.id", primary_key=True)

    course: Optional[Course] = Relationship(back_populates="course_certificates")
    certificate_template: Optional["CertificateTemplate"] = Relationship()
