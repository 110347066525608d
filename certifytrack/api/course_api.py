import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.models import Course
from certifytrack.schemas.course_schema import CourseCreate, CourseRead, CourseUpdate
from certifytrack.schemas.user_schema import CurrentUser
from certifytrack.services import course_service, course_task_service

router = APIRouter(prefix="/courses", tags=["courses"], dependencies=[Depends(require_admin)])


@router.post("/", response_model=Course)
def create_course(data: CourseCreate, db: Session = Depends(get_db),
                  current_user: CurrentUser = Depends(require_admin)):
    return course_service.create_course(db, data, current_user.id)


@router.get("/", response_model=List[CourseRead])
def list_courses(db: Session = Depends(get_db)):
    return course_service.get_courses(db)


@router.get("/{course_id}", response_model=CourseRead)
def get_course(course_id: uuid.UUID, db: Session = Depends(get_db)):
    course = course_service.get_course_by_id(db, course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course


@router.get("/{course_id}/duration", response_model=Optional[int])
def get_course_duration(course_id: uuid.UUID, db: Session = Depends(get_db)):
    return course_task_service.get_course_duration(db, course_id)


@router.put("/{course_id}", response_model=Course)
def update_course(course_id: uuid.UUID, data: CourseUpdate, db: Session = Depends(get_db)):
    course = course_service.update_course(db, course_id, data)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found for update")
    return course


@router.delete("/{course_id}", status_code=204)
def delete_course(course_id: uuid.UUID, db: Session = Depends(get_db)):
    if not course_service.delete_course(db, course_id):
        raise HTTPException(status_code=404, detail="Course not found")
