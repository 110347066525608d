import logging
import uuid
from typing import Iterable, List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.errors import require_identity
from certifytrack.models import Course, CourseCertificate, COURSE_LIST_FIELDS
from certifytrack.schemas.course_schema import CourseCreate, CourseRead, CourseUpdate
from certifytrack.utils.utils import make_slug, normalize_list_fields, utc_now

logger = logging.getLogger(__name__)


def _with_certificates():
    return selectinload(Course.course_certificates).selectinload(CourseCertificate.certificate_template)


def _link_certificates(db: Session, course_id: uuid.UUID, certificate_ids: Iterable[uuid.UUID]):
    for certificate_id in certificate_ids:
        db.add(CourseCertificate(course_id=course_id, certificate_id=certificate_id))


def create_course(db: Session, data: CourseCreate, user_id: Optional[uuid.UUID]) -> Course:
    require_identity(user_id, "creating a course")
    course = Course.model_validate(
        data.model_dump(exclude={"certificate_templates"}),
        update={"slug": make_slug(data.title), "created_by": user_id},
    )
    with store_errors(db, "creating course"):
        db.add(course)
        _link_certificates(db, course.id, data.certificate_templates or [])
        db.commit()
        db.refresh(course)
    logger.info("Created course %s (%s)", course.id, course.slug)
    return course


def get_courses(db: Session) -> List[CourseRead]:
    statement = select(Course).options(_with_certificates()).order_by(col(Course.created_at).desc())
    with store_errors(db, "fetching courses"):
        courses = db.exec(statement).all()
        return [CourseRead.model_validate(course) for course in courses]


def get_course_by_id(db: Session, course_id: uuid.UUID) -> Optional[CourseRead]:
    statement = select(Course).options(_with_certificates()).where(Course.id == course_id)
    with store_errors(db, "fetching course"):
        course = db.exec(statement).first()
        return CourseRead.model_validate(course) if course else None


def update_course(db: Session, course_id: uuid.UUID, data: CourseUpdate) -> Optional[Course]:
    with store_errors(db, "updating course"):
        course = db.get(Course, course_id)
        if not course:
            return None
        update_data = data.model_dump(exclude_unset=True, exclude={"certificate_templates"})
        normalize_list_fields(update_data, COURSE_LIST_FIELDS)
        update_data["updated_at"] = utc_now()
        for key, value in update_data.items():
            setattr(course, key, value)
        db.add(course)

        if data.certificate_templates is not None:
            for link in course.course_certificates:
                db.delete(link)
            db.flush()
            _link_certificates(db, course.id, data.certificate_templates)

        db.commit()
        db.refresh(course)
    return course


def delete_course(db: Session, course_id: uuid.UUID) -> bool:
    with store_errors(db, "deleting course"):
        course = db.get(Course, course_id)
        if not course:
            return False
        db.delete(course)
        db.commit()
    logger.info("Deleted course %s", course_id)
    return True
