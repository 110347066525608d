import uuid
from typing import List, Optional

from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.errors import NotFoundError
from certifytrack.models import Internship, Task, TASK_LIST_FIELDS
from certifytrack.schemas.task_schema import InternshipTaskUpdate, TaskCreate
from certifytrack.utils.utils import normalize_list_fields, utc_now


def create_task(db: Session, data: TaskCreate) -> Task:
    task = Task.model_validate(data)
    with store_errors(db, "creating task"):
        db.add(task)
        db.commit()
        db.refresh(task)
    return task


def get_task(db: Session, task_id: uuid.UUID) -> Optional[Task]:
    with store_errors(db, "fetching task"):
        return db.get(Task, task_id)


def get_tasks_by_internship(db: Session, internship_id: uuid.UUID) -> List[Task]:
    statement = (
        select(Task)
        .where(Task.internship_id == internship_id)
        .order_by(col(Task.assigned_day).asc(), col(Task.order_no).asc())
    )
    with store_errors(db, "fetching tasks"):
        return db.exec(statement).all()


def update_task(db: Session, task_id: uuid.UUID, data: InternshipTaskUpdate) -> Optional[Task]:
    update_data = normalize_list_fields(data.model_dump(exclude_unset=True), TASK_LIST_FIELDS)
    update_data["updated_at"] = utc_now()
    with store_errors(db, "updating task"):
        task = db.get(Task, task_id)
        if not task:
            return None
        for key, value in update_data.items():
            setattr(task, key, value)
        db.add(task)
        db.commit()
        db.refresh(task)
    return task


def delete_task(db: Session, task_id: uuid.UUID) -> bool:
    with store_errors(db, "deleting task"):
        task = db.get(Task, task_id)
        if not task:
            return False
        db.delete(task)
        db.commit()
    return True


def get_internship_duration(db: Session, internship_id: uuid.UUID) -> Optional[int]:
    """Day count used to bound ``assigned_day`` when planning tasks."""
    with store_errors(db, "fetching internship duration"):
        internship = db.get(Internship, internship_id)
    if not internship:
        raise NotFoundError("Internship", internship_id)
    return internship.duration_days
