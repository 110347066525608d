import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from sqlmodel import SQLModel, Field, JSON, Relationship

from certifytrack.utils.utils import utc_now


class SubmissionStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Submission(SQLModel, table=True):
    __tablename__ = "submissions"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    task_id: uuid.UUID = Field(foreign_key="tasks.id")
    user_id: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    status: SubmissionStatus = Field(default=SubmissionStatus.pending)
    submitted_at: datetime = Field(default_factory=utc_now)
    reviewed_at: Optional[datetime] = None
    reviewer_id: Optional[uuid.UUID] = None
    text_answer: Optional[str] = None
    code_snippet: Optional[str] = None
    external_links: List[str] = Field(default_factory=list, sa_type=JSON)
    file_url: Optional[str] = None
    image_urls: List[str] = Field(default_factory=list, sa_type=JSON)
    video_url: Optional[str] = None

    task: Optional["Task"] = Relationship(back_populates="submissions")
    user: Optional["User"] = Relationship()
