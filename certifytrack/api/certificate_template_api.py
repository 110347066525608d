import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.models import CertificateTemplate
from certifytrack.schemas.certificate_template_schema import CertificateTemplateCreate, CertificateTemplateUpdate
from certifytrack.schemas.user_schema import CurrentUser
from certifytrack.services import certificate_template_service

router = APIRouter(prefix="/certificate-templates", tags=["certificate-templates"],
                   dependencies=[Depends(require_admin)])


@router.post("/", response_model=CertificateTemplate)
def create_certificate_template(data: CertificateTemplateCreate, db: Session = Depends(get_db),
                                current_user: CurrentUser = Depends(require_admin)):
    return certificate_template_service.create_certificate_template(db, data, current_user.id)


@router.get("/", response_model=List[CertificateTemplate])
def list_certificate_templates(db: Session = Depends(get_db)):
    return certificate_template_service.get_certificate_templates(db)


@router.get("/{template_id}", response_model=CertificateTemplate)
def get_certificate_template(template_id: uuid.UUID, db: Session = Depends(get_db)):
    template = certificate_template_service.get_certificate_template(db, template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Certificate template not found")
    return template


@router.put("/{template_id}", response_model=CertificateTemplate)
def update_certificate_template(template_id: uuid.UUID, data: CertificateTemplateUpdate,
                                db: Session = Depends(get_db)):
    template = certificate_template_service.update_certificate_template(db, template_id, data)
    if not template:
        raise HTTPException(status_code=404, detail="Certificate template not found for update")
    return template


@router.delete("/{template_id}", status_code=204)
def delete_certificate_template(template_id: uuid.UUID, db: Session = Depends(get_db)):
    if not certificate_template_service.delete_certificate_template(db, template_id):
        raise HTTPException(status_code=404, detail="Certificate template not found")
