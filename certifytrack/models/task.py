import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import ValidationInfo, field_validator
from sqlmodel import SQLModel, Field, JSON, Relationship

from certifytrack.utils.utils import utc_now

TASK_LIST_FIELDS = (
    "resource_links",
    "reference_links",
    "hints",
    "attachment_urls",
    "evaluation_criteria",
    "tags",
)


class DifficultyLevel(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


# applied when a client sends null for the field
TASK_DEFAULTS = {"difficulty_level": DifficultyLevel.medium, "is_mandatory": True}


class TaskContentBase(SQLModel):
    """Fields shared by internship tasks and course tasks."""
    title: str
    description: Optional[str] = None
    order_no: Optional[int] = None
    assigned_day: int
    resource_links: List[str] = Field(default_factory=list, sa_type=JSON)
    reference_links: List[str] = Field(default_factory=list, sa_type=JSON)
    hints: List[str] = Field(default_factory=list, sa_type=JSON)
    attachment_urls: List[str] = Field(default_factory=list, sa_type=JSON)
    expected_output: Optional[str] = None
    submission_format: Optional[str] = None
    evaluation_criteria: List[str] = Field(default_factory=list, sa_type=JSON)
    estimated_time_hrs: Optional[float] = None
    difficulty_level: DifficultyLevel = DifficultyLevel.medium
    video_tutorial_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    is_mandatory: bool = True

    @field_validator(*TASK_LIST_FIELDS, mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return value or []

    @field_validator(*TASK_DEFAULTS, mode="before")
    @classmethod
    def none_as_default(cls, value, info: ValidationInfo):
        return TASK_DEFAULTS[info.field_name] if value is None else value


class TaskBase(TaskContentBase):
    internship_id: uuid.UUID = Field(foreign_key="internships.id")


class Task(TaskBase, table=True):
    __tablename__ = "tasks"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    internship: Optional["Internship"] = Relationship(back_populates="tasks")
    submissions: List["Submission"] = Relationship(
        back_populates="task", sa_relationship_kwargs={"passive_deletes": True}
    )
