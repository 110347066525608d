import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from certifytrack.models import SubmissionStatus
from certifytrack.schemas.user_schema import UserSummary


class ReviewDecision(str, Enum):
    approved = "approved"
    rejected = "rejected"


class SubmissionStatusUpdate(BaseModel):
    status: ReviewDecision


class InternshipSummary(BaseModel):
    id: uuid.UUID
    title: str

    model_config = {"from_attributes": True}


class SubmissionTask(BaseModel):
    id: uuid.UUID
    title: str
    assigned_day: int
    internship_id: uuid.UUID
    internship: Optional[InternshipSummary] = None

    model_config = {"from_attributes": True}


class SubmissionListItem(BaseModel):
    id: uuid.UUID
    status: SubmissionStatus
    submitted_at: datetime
    reviewed_at: Optional[datetime] = None
    reviewer_id: Optional[uuid.UUID] = None
    user_id: Optional[uuid.UUID] = None
    task_id: uuid.UUID
    user: Optional[UserSummary] = None
    task: Optional[SubmissionTask] = None

    model_config = {"from_attributes": True}


class SubmissionDetail(SubmissionListItem):
    text_answer: Optional[str] = None
    code_snippet: Optional[str] = None
    external_links: List[str] = []
    file_url: Optional[str] = None
    image_urls: List[str] = []
    video_url: Optional[str] = None
