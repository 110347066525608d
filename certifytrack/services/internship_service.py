import logging
import uuid
from collections import Counter
from typing import Iterable, List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.errors import require_identity
from certifytrack.models import (
    DifficultyLevel,
    Internship,
    INTERNSHIP_LIST_FIELDS,
    SubmissionStatus,
    Subscription,
    SubscriptionStatus,
    Task,
)
from certifytrack.schemas.internship_schema import (
    CertificateSection,
    InternshipCreate,
    InternshipDetail,
    InternshipStats,
    InternshipUpdate,
    TasksByDifficulty,
)
from certifytrack.utils.utils import make_slug, normalize_list_fields, utc_now

logger = logging.getLogger(__name__)


def _value(value):
    return getattr(value, "value", value)


def compute_internship_stats(tasks: Optional[Iterable], subscriptions: Optional[Iterable]) -> InternshipStats:
    """Summarise an internship from its fetched tasks (with nested submissions) and subscriptions.

    Missing collections at any level count as empty, so the result is always complete:
    no tasks and no subscriptions give all zeros.
    """
    tasks = list(tasks or [])
    subscriptions = list(subscriptions or [])

    students = Counter(_value(getattr(s, "status", None)) for s in subscriptions)
    difficulty = Counter(_value(getattr(t, "difficulty_level", None)) for t in tasks)
    submissions = [s for t in tasks for s in (getattr(t, "submissions", None) or [])]
    reviews = Counter(_value(getattr(s, "status", None)) for s in submissions)

    return InternshipStats(
        total_students=len(subscriptions),
        active_students=students[SubscriptionStatus.active.value],
        completed_students=students[SubscriptionStatus.completed.value],
        total_tasks=len(tasks),
        total_submissions=len(submissions),
        pending_submissions=reviews[SubmissionStatus.pending.value],
        approved_submissions=reviews[SubmissionStatus.approved.value],
        rejected_submissions=reviews[SubmissionStatus.rejected.value],
        mandatory_tasks=sum(1 for t in tasks if getattr(t, "is_mandatory", False)),
        tasks_by_difficulty=TasksByDifficulty(
            easy=difficulty[DifficultyLevel.easy.value],
            medium=difficulty[DifficultyLevel.medium.value],
            hard=difficulty[DifficultyLevel.hard.value],
        ),
    )


def create_internship(db: Session, data: InternshipCreate, user_id: Optional[uuid.UUID]) -> Internship:
    require_identity(user_id, "creating an internship")
    internship = Internship.model_validate(
        data.model_dump(),
        update={"slug": make_slug(data.title), "created_by": user_id},
    )
    with store_errors(db, "creating internship"):
        db.add(internship)
        db.commit()
        db.refresh(internship)
    logger.info("Created internship %s (%s)", internship.id, internship.slug)
    return internship


def get_internships(db: Session) -> List[Internship]:
    statement = select(Internship).order_by(col(Internship.created_at).desc())
    with store_errors(db, "fetching internships"):
        return db.exec(statement).all()


def get_internship_by_id(db: Session, internship_id: uuid.UUID) -> Optional[InternshipDetail]:
    statement = (
        select(Internship)
        .options(selectinload(Internship.tasks).selectinload(Task.submissions))
        .where(Internship.id == internship_id)
    )
    with store_errors(db, "fetching internship details"):
        internship = db.exec(statement).first()
        if not internship:
            return None
        subscriptions = db.exec(
            select(Subscription).where(Subscription.internship_id == internship_id)
        ).all()
        stats = compute_internship_stats(internship.tasks, subscriptions)
        return InternshipDetail.model_validate(internship, update={"stats": stats})


def update_internship(db: Session, internship_id: uuid.UUID, data: InternshipUpdate) -> Optional[Internship]:
    update_data = data.model_dump(exclude_unset=True, exclude={"certificate_template"})
    normalize_list_fields(update_data, INTERNSHIP_LIST_FIELDS)
    if data.title:
        update_data["slug"] = make_slug(data.title)
    if data.certificate_template:
        update_data["certificate_template"] = {
            "completion": (data.certificate_template.completion or CertificateSection()).model_dump(),
            "internship": (data.certificate_template.internship or CertificateSection()).model_dump(),
        }
    update_data["updated_at"] = utc_now()

    with store_errors(db, "updating internship"):
        internship = db.get(Internship, internship_id)
        if not internship:
            return None
        for key, value in update_data.items():
            setattr(internship, key, value)
        db.add(internship)
        db.commit()
        db.refresh(internship)
    return internship


def delete_internship(db: Session, internship_id: uuid.UUID) -> bool:
    with store_errors(db, "deleting internship"):
        internship = db.get(Internship, internship_id)
        if not internship:
            return False
        db.delete(internship)
        db.commit()
    logger.info("Deleted internship %s", internship_id)
    return True
