import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field, Relationship

from certifytrack.models.submission import SubmissionStatus
from certifytrack.models.task import TaskContentBase
from certifytrack.utils.utils import utc_now


class CourseTaskBase(TaskContentBase):
    course_id: uuid.UUID = Field(foreign_key="courses.id")


class CourseTask(CourseTaskBase, table=True):
    __tablename__ = "course_tasks"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    course: Optional["Course"] = Relationship(back_populates="course_tasks")


class CourseTaskSubmission(SQLModel, table=True):
    __tablename__ = "course_task_submissions"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    course_task_id: uuid.UUID = Field(foreign_key="course_tasks.id")
    user_id: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    status: SubmissionStatus = Field(default=SubmissionStatus.pending)
    submitted_at: datetime = Field(default_factory=utc_now)
