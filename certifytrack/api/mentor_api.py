import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.models import Mentor
from certifytrack.schemas.mentor_schema import MentorCreate, MentorFormLink, MentorUpdate
from certifytrack.services import mentor_service

router = APIRouter(prefix="/mentors", tags=["mentors"], dependencies=[Depends(require_admin)])


@router.post("/", response_model=Mentor)
def create_mentor(data: MentorCreate, db: Session = Depends(get_db)):
    return mentor_service.create_mentor(db, data)


@router.get("/", response_model=List[Mentor])
def list_mentors(db: Session = Depends(get_db)):
    return mentor_service.get_mentors(db)


@router.get("/by-email/{email}", response_model=Mentor)
def get_mentor_by_email(email: str, db: Session = Depends(get_db)):
    mentor = mentor_service.get_mentor_by_email(db, email)
    if not mentor:
        raise HTTPException(status_code=404, detail="Mentor not found")
    return mentor


@router.get("/form-link/{email}", response_model=MentorFormLink)
def get_mentor_form_link(email: str):
    return MentorFormLink(email=email, link=mentor_service.generate_mentor_form_link(email))


@router.put("/{mentor_id}", response_model=Mentor)
def update_mentor(mentor_id: uuid.UUID, data: MentorUpdate, db: Session = Depends(get_db)):
    mentor = mentor_service.update_mentor(db, mentor_id, data)
    if not mentor:
        raise HTTPException(status_code=404, detail="Mentor not found for update")
    return mentor


@router.delete("/{mentor_id}", status_code=204)
def delete_mentor(mentor_id: uuid.UUID, db: Session = Depends(get_db)):
    if not mentor_service.delete_mentor(db, mentor_id):
        raise HTTPException(status_code=404, detail="Mentor not found")
