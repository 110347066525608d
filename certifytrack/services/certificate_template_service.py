import uuid
from typing import List, Optional

from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.errors import require_identity
from certifytrack.models import CertificateTemplate
from certifytrack.schemas.certificate_template_schema import (
    CertificateTemplateCreate,
    CertificateTemplateUpdate,
)
from certifytrack.utils.utils import utc_now


def create_certificate_template(
        db: Session, data: CertificateTemplateCreate, user_id: Optional[uuid.UUID]
) -> CertificateTemplate:
    require_identity(user_id, "creating a certificate template")
    template = CertificateTemplate.model_validate(data, update={"created_by": user_id})
    with store_errors(db, "creating certificate template"):
        db.add(template)
        db.commit()
        db.refresh(template)
    return template


def get_certificate_templates(db: Session) -> List[CertificateTemplate]:
    statement = select(CertificateTemplate).order_by(col(CertificateTemplate.created_at).desc())
    with store_errors(db, "fetching certificate templates"):
        return db.exec(statement).all()


def get_certificate_template(db: Session, template_id: uuid.UUID) -> Optional[CertificateTemplate]:
    with store_errors(db, "fetching certificate template"):
        return db.get(CertificateTemplate, template_id)


def update_certificate_template(
        db: Session, template_id: uuid.UUID, data: CertificateTemplateUpdate
) -> Optional[CertificateTemplate]:
    update_data = data.model_dump(exclude_unset=True)
    update_data["updated_at"] = utc_now()
    with store_errors(db, "updating certificate template"):
        template = db.get(CertificateTemplate, template_id)
        if not template:
            return None
        for key, value in update_data.items():
            setattr(template, key, value)
        db.add(template)
        db.commit()
        db.refresh(template)
    return template


def delete_certificate_template(db: Session, template_id: uuid.UUID) -> bool:
    with store_errors(db, "deleting certificate template"):
        template = db.get(CertificateTemplate, template_id)
        if not template:
            return False
        db.delete(template)
        db.commit()
    return True
