import uuid
from typing import Optional

from pydantic import BaseModel

from certifytrack.models import UserRole


class CurrentUser(BaseModel):
    """Identity resolved from a verified access token plus the profile's role."""
    id: uuid.UUID
    email: Optional[str] = None
    role: Optional[UserRole] = None


class UserSummary(BaseModel):
    id: uuid.UUID
    full_name: Optional[str] = None

    model_config = {"from_attributes": True}
