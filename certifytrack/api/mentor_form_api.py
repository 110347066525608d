from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.configs.database import get_db
from certifytrack.models import Mentor
from certifytrack.schemas.mentor_schema import MentorProfileUpdate
from certifytrack.services import mentor_service

# Opened by mentors from the link an admin sends them, so no bearer token is required.
router = APIRouter(prefix="/mentor/form", tags=["mentor-form"])


def get_form_email(encoded: str) -> str:
    try:
        return mentor_service.decode_mentor_form_email(encoded)
    except ValueError:
        raise HTTPException(status_code=404, detail="Mentor form link is invalid")


@router.get("/{encoded}", response_model=Mentor)
def get_mentor_form(email: str = Depends(get_form_email), db: Session = Depends(get_db)):
    mentor = mentor_service.get_mentor_by_email(db, email)
    if not mentor:
        raise HTTPException(status_code=404, detail="Mentor not found")
    return mentor


@router.put("/{encoded}", response_model=Mentor)
def submit_mentor_form(data: MentorProfileUpdate, email: str = Depends(get_form_email),
                       db: Session = Depends(get_db)):
    mentor = mentor_service.submit_mentor_form(db, email, data)
    if not mentor:
        raise HTTPException(status_code=404, detail="Mentor not found")
    return mentor
