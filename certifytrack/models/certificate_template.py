import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import SQLModel, Field, JSON

from certifytrack.utils.utils import utc_now


class CertificateTemplateBase(SQLModel):
    name: str
    preview_url: Optional[str] = None
    template_json: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    template_html: Optional[str] = None


class CertificateTemplate(CertificateTemplateBase, table=True):
    __tablename__ = "certificate_templates"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_by: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class IssuedCertificate(SQLModel, table=True):
    __tablename__ = "issued_certificates"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    certificate_id: Optional[uuid.UUID] = Field(default=None, foreign_key="certificate_templates.id")
    user_id: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    course_id: Optional[uuid.UUID] = Field(default=None, foreign_key="courses.id")
    internship_id: Optional[uuid.UUID] = Field(default=None, foreign_key="internships.id")
    certificate_url: Optional[str] = None
    issued_at: datetime = Field(default_factory=utc_now)
