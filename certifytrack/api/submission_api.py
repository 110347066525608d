import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.models import Submission
from certifytrack.schemas.submission_schema import SubmissionDetail, SubmissionListItem, SubmissionStatusUpdate
from certifytrack.schemas.user_schema import CurrentUser
from certifytrack.services import submission_service

router = APIRouter(prefix="/submissions", tags=["submissions"], dependencies=[Depends(require_admin)])


@router.get("/", response_model=List[SubmissionListItem])
def list_submissions(db: Session = Depends(get_db)):
    return submission_service.get_all_submissions(db)


@router.get("/by-task/{task_id}", response_model=List[SubmissionListItem])
def list_submissions_by_task(task_id: uuid.UUID, db: Session = Depends(get_db)):
    return submission_service.list_by_task(db, task_id)


@router.get("/{submission_id}", response_model=SubmissionDetail)
def get_submission(submission_id: uuid.UUID, db: Session = Depends(get_db)):
    submission = submission_service.get_submission_by_id(db, submission_id)
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission


@router.put("/{submission_id}/status", response_model=Submission)
def update_submission_status(submission_id: uuid.UUID, data: SubmissionStatusUpdate,
                             db: Session = Depends(get_db),
                             current_user: CurrentUser = Depends(require_admin)):
    submission = submission_service.update_submission_status(db, submission_id, data.status, current_user.id)
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission
