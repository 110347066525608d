from typing import Any, Dict, Optional

from pydantic import BaseModel

from certifytrack.models import CertificateTemplateBase


class CertificateTemplateCreate(CertificateTemplateBase):
    pass


class CertificateTemplateUpdate(BaseModel):
    name: Optional[str] = None
    preview_url: Optional[str] = None
    template_json: Optional[Dict[str, Any]] = None
    template_html: Optional[str] = None
