import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.errors import InvalidTransitionError, require_identity
from certifytrack.models import Submission, SubmissionStatus, Task
from certifytrack.schemas.submission_schema import (
    ReviewDecision,
    SubmissionDetail,
    SubmissionListItem,
)
from certifytrack.utils.utils import utc_now

logger = logging.getLogger(__name__)


def _with_user_and_task():
    return (
        selectinload(Submission.user),
        selectinload(Submission.task).selectinload(Task.internship),
    )


def get_all_submissions(db: Session) -> List[SubmissionListItem]:
    statement = (
        select(Submission)
        .options(*_with_user_and_task())
        .order_by(col(Submission.submitted_at).desc())
    )
    with store_errors(db, "fetching submissions"):
        submissions = db.exec(statement).all()
        return [SubmissionListItem.model_validate(s) for s in submissions]


def list_by_task(db: Session, task_id: uuid.UUID) -> List[SubmissionListItem]:
    statement = (
        select(Submission)
        .options(*_with_user_and_task())
        .where(Submission.task_id == task_id)
        .order_by(col(Submission.submitted_at).desc())
    )
    with store_errors(db, "fetching task submissions"):
        submissions = db.exec(statement).all()
        return [SubmissionListItem.model_validate(s) for s in submissions]


def get_submission_by_id(db: Session, submission_id: uuid.UUID) -> Optional[SubmissionDetail]:
    statement = select(Submission).options(*_with_user_and_task()).where(Submission.id == submission_id)
    with store_errors(db, "fetching submission details"):
        submission = db.exec(statement).first()
        return SubmissionDetail.model_validate(submission) if submission else None


def update_submission_status(
        db: Session,
        submission_id: uuid.UUID,
        status: ReviewDecision,
        reviewer_id: Optional[uuid.UUID],
) -> Optional[Submission]:
    """Approve or reject a pending submission, stamping the review time and reviewer.

    Only ``pending`` submissions can be reviewed; approved and rejected are terminal.
    """
    require_identity(reviewer_id, "reviewing a submission")
    target = SubmissionStatus(ReviewDecision(status).value)

    with store_errors(db, "updating submission status"):
        submission = db.get(Submission, submission_id)
        if not submission:
            return None
        current = SubmissionStatus(submission.status)
        if current != SubmissionStatus.pending:
            raise InvalidTransitionError(current.value, target.value)

        submission.status = target
        submission.reviewed_at = utc_now()
        submission.reviewer_id = reviewer_id
        db.add(submission)
        db.commit()
        db.refresh(submission)
    logger.info("Submission %s %s by %s", submission_id, target.value, reviewer_id)
    return submission
