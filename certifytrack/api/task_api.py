import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.models import CourseTask, Task
from certifytrack.schemas.task_schema import CourseTaskCreate, CourseTaskUpdate, InternshipTaskUpdate, TaskCreate
from certifytrack.services import course_task_service, task_service

router = APIRouter(prefix="/tasks", tags=["tasks"], dependencies=[Depends(require_admin)])
course_task_router = APIRouter(prefix="/course-tasks", tags=["course-tasks"], dependencies=[Depends(require_admin)])


@router.post("/", response_model=Task)
def create_task(data: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create_task(db, data)


@router.get("/by-internship/{internship_id}", response_model=List[Task])
def list_tasks_by_internship(internship_id: uuid.UUID, db: Session = Depends(get_db)):
    return task_service.get_tasks_by_internship(db, internship_id)


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: uuid.UUID, db: Session = Depends(get_db)):
    task = task_service.get_task(db, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.put("/{task_id}", response_model=Task)
def update_task(task_id: uuid.UUID, data: InternshipTaskUpdate, db: Session = Depends(get_db)):
    task = task_service.update_task(db, task_id, data)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found for update")
    return task


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: uuid.UUID, db: Session = Depends(get_db)):
    if not task_service.delete_task(db, task_id):
        raise HTTPException(status_code=404, detail="Task not found")


@course_task_router.post("/", response_model=CourseTask)
def create_course_task(data: CourseTaskCreate, db: Session = Depends(get_db)):
    return course_task_service.create_course_task(db, data)


@course_task_router.get("/by-course/{course_id}", response_model=List[CourseTask])
def list_tasks_by_course(course_id: uuid.UUID, db: Session = Depends(get_db)):
    return course_task_service.get_tasks_by_course(db, course_id)


@course_task_router.put("/{task_id}", response_model=CourseTask)
def update_course_task(task_id: uuid.UUID, data: CourseTaskUpdate, db: Session = Depends(get_db)):
    task = course_task_service.update_course_task(db, task_id, data)
    if not task:
        raise HTTPException(status_code=404, detail="Course task not found for update")
    return task


@course_task_router.delete("/{task_id}", status_code=204)
def delete_course_task(task_id: uuid.UUID, db: Session = Depends(get_db)):
    if not course_task_service.delete_course_task(db, task_id):
        raise HTTPException(status_code=404, detail="Course task not found")
