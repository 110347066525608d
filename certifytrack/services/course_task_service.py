import uuid
from typing import List, Optional

from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.errors import NotFoundError
from certifytrack.models import Course, CourseTask, TASK_LIST_FIELDS
from certifytrack.schemas.task_schema import CourseTaskCreate, CourseTaskUpdate
from certifytrack.utils.utils import normalize_list_fields, utc_now


def create_course_task(db: Session, data: CourseTaskCreate) -> CourseTask:
    task = CourseTask.model_validate(data)
    with store_errors(db, "creating course task"):
        db.add(task)
        db.commit()
        db.refresh(task)
    return task


def get_tasks_by_course(db: Session, course_id: uuid.UUID) -> List[CourseTask]:
    statement = (
        select(CourseTask)
        .where(CourseTask.course_id == course_id)
        .order_by(col(CourseTask.assigned_day).asc(), col(CourseTask.order_no).asc())
    )
    with store_errors(db, "fetching course tasks"):
        return db.exec(statement).all()


def update_course_task(db: Session, task_id: uuid.UUID, data: CourseTaskUpdate) -> Optional[CourseTask]:
    update_data = normalize_list_fields(data.model_dump(exclude_unset=True), TASK_LIST_FIELDS)
    update_data["updated_at"] = utc_now()
    with store_errors(db, "updating course task"):
        task = db.get(CourseTask, task_id)
        if not task:
            return None
        for key, value in update_data.items():
            setattr(task, key, value)
        db.add(task)
        db.commit()
        db.refresh(task)
    return task


def delete_course_task(db: Session, task_id: uuid.UUID) -> bool:
    with store_errors(db, "deleting course task"):
        task = db.get(CourseTask, task_id)
        if not task:
            return False
        db.delete(task)
        db.commit()
    return True


def get_course_duration(db: Session, course_id: uuid.UUID) -> Optional[int]:
    with store_errors(db, "fetching course duration"):
        course = db.get(Course, course_id)
    if not course:
        raise NotFoundError("Course", course_id)
    return course.duration_days
