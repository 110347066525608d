import uuid
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel
from sqlmodel import SQLModel

from certifytrack.models import (
    DifficultyLevel,
    InternshipBase,
    InternshipMode,
    InternshipStatus,
    PriceType,
    SubmissionStatus,
)


class CertificateSection(BaseModel):
    title: str = ""
    template: str = ""


class InternshipCertificateTemplate(BaseModel):
    completion: Optional[CertificateSection] = None
    internship: Optional[CertificateSection] = None


class InternshipCreate(InternshipBase):
    pass


class InternshipUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    long_description: Optional[str] = None
    duration_days: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price_type: Optional[PriceType] = None
    price_value: Optional[float] = None
    tags: Optional[List[str]] = None
    mentors: Optional[List[str]] = None
    features: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    location: Optional[str] = None
    mode: Optional[InternshipMode] = None
    application_link: Optional[str] = None
    max_applicants: Optional[int] = None
    status: Optional[InternshipStatus] = None
    organization_name: Optional[str] = None
    image_url: Optional[str] = None
    is_published: Optional[bool] = None
    certificate_template: Optional[InternshipCertificateTemplate] = None


class TasksByDifficulty(BaseModel):
    easy: int = 0
    medium: int = 0
    hard: int = 0


class InternshipStats(BaseModel):
    total_students: int = 0
    active_students: int = 0
    completed_students: int = 0
    total_tasks: int = 0
    total_submissions: int = 0
    pending_submissions: int = 0
    approved_submissions: int = 0
    rejected_submissions: int = 0
    mandatory_tasks: int = 0
    tasks_by_difficulty: TasksByDifficulty = TasksByDifficulty()


class SubmissionSummary(BaseModel):
    id: uuid.UUID
    status: SubmissionStatus
    submitted_at: datetime

    model_config = {"from_attributes": True}


class TaskSummary(BaseModel):
    id: uuid.UUID
    title: str
    assigned_day: int
    difficulty_level: DifficultyLevel
    is_mandatory: bool
    submissions: List[SubmissionSummary] = []

    model_config = {"from_attributes": True}


class InternshipRead(InternshipBase):
    id: uuid.UUID
    rating: float = 0
    review_count: int = 0
    slug: Optional[str] = None
    created_by: Optional[uuid.UUID] = None
    created_at: datetime
    updated_at: datetime


class InternshipDetail(InternshipRead):
    tasks: List[TaskSummary] = []
    stats: InternshipStats
