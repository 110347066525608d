import logging
from typing import Optional

from sqlmodel import Session, select, func

from certifytrack.configs.database import store_errors
from certifytrack.models import (
    Course,
    CourseTask,
    CourseTaskSubmission,
    Internship,
    IssuedCertificate,
    Submission,
    Task,
    User,
    UserRole,
)
from certifytrack.schemas.dashboard_schema import DashboardStats

logger = logging.getLogger(__name__)


def _count(db: Session, model, *where) -> Optional[int]:
    statement = select(func.count()).select_from(model)
    if where:
        statement = statement.where(*where)
    return db.exec(statement).one()


def combine_dashboard_counts(
        users: Optional[int],
        courses: Optional[int],
        internships: Optional[int],
        tasks: Optional[int],
        course_tasks: Optional[int],
        submissions: Optional[int],
        course_task_submissions: Optional[int],
        certificates: Optional[int],
) -> DashboardStats:
    """Fold the raw counts into dashboard totals; a count that came back empty is 0."""
    return DashboardStats(
        total_users=users or 0,
        total_courses=courses or 0,
        total_internships=internships or 0,
        total_tasks=(tasks or 0) + (course_tasks or 0),
        total_submissions=(submissions or 0) + (course_task_submissions or 0),
        total_certificates=certificates or 0,
    )


def get_dashboard_stats(db: Session) -> DashboardStats:
    # any failing count aborts the whole dashboard, there is no partial result
    with store_errors(db, "fetching dashboard stats"):
        return combine_dashboard_counts(
            users=_count(db, User, User.role == UserRole.user),
            courses=_count(db, Course),
            internships=_count(db, Internship),
            tasks=_count(db, Task),
            course_tasks=_count(db, CourseTask),
            submissions=_count(db, Submission),
            course_task_submissions=_count(db, CourseTaskSubmission),
            certificates=_count(db, IssuedCertificate),
        )
