import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.models import Internship
from certifytrack.schemas.internship_schema import InternshipCreate, InternshipDetail, InternshipUpdate
from certifytrack.schemas.user_schema import CurrentUser
from certifytrack.services import internship_service, task_service

router = APIRouter(prefix="/internships", tags=["internships"], dependencies=[Depends(require_admin)])


@router.post("/", response_model=Internship)
def create_internship(data: InternshipCreate, db: Session = Depends(get_db),
                      current_user: CurrentUser = Depends(require_admin)):
    return internship_service.create_internship(db, data, current_user.id)


@router.get("/", response_model=List[Internship])
def list_internships(db: Session = Depends(get_db)):
    return internship_service.get_internships(db)


@router.get("/{internship_id}", response_model=InternshipDetail)
def get_internship(internship_id: uuid.UUID, db: Session = Depends(get_db)):
    internship = internship_service.get_internship_by_id(db, internship_id)
    if not internship:
        raise HTTPException(status_code=404, detail="Internship not found")
    return internship


@router.get("/{internship_id}/duration", response_model=Optional[int])
def get_internship_duration(internship_id: uuid.UUID, db: Session = Depends(get_db)):
    return task_service.get_internship_duration(db, internship_id)


@router.put("/{internship_id}", response_model=Internship)
def update_internship(internship_id: uuid.UUID, data: InternshipUpdate, db: Session = Depends(get_db)):
    internship = internship_service.update_internship(db, internship_id, data)
    if not internship:
        raise HTTPException(status_code=404, detail="Internship not found for update")
    return internship


@router.delete("/{internship_id}", status_code=204)
def delete_internship(internship_id: uuid.UUID, db: Session = Depends(get_db)):
    if not internship_service.delete_internship(db, internship_id):
        raise HTTPException(status_code=404, detail="Internship not found")
