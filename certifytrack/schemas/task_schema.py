import uuid
from typing import List, Optional

from sqlmodel import SQLModel

from certifytrack.models import CourseTaskBase, DifficultyLevel, TaskBase


class TaskCreate(TaskBase):
    pass


class CourseTaskCreate(CourseTaskBase):
    pass


class TaskUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    order_no: Optional[int] = None
    assigned_day: Optional[int] = None
    resource_links: Optional[List[str]] = None
    reference_links: Optional[List[str]] = None
    hints: Optional[List[str]] = None
    attachment_urls: Optional[List[str]] = None
    expected_output: Optional[str] = None
    submission_format: Optional[str] = None
    evaluation_criteria: Optional[List[str]] = None
    estimated_time_hrs: Optional[float] = None
    difficulty_level: Optional[DifficultyLevel] = None
    video_tutorial_url: Optional[str] = None
    tags: Optional[List[str]] = None
    is_mandatory: Optional[bool] = None


class InternshipTaskUpdate(TaskUpdate):
    internship_id: Optional[uuid.UUID] = None


class CourseTaskUpdate(TaskUpdate):
    course_id: Optional[uuid.UUID] = None
