import uuid
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationInfo, field_validator
from sqlmodel import SQLModel, Field, JSON, Relationship

from certifytrack.utils.utils import utc_now

INTERNSHIP_LIST_FIELDS = ("tags", "mentors", "features", "requirements", "benefits")


class InternshipMode(str, Enum):
    online = "online"
    offline = "offline"
    hybrid = "hybrid"


class InternshipStatus(str, Enum):
    upcoming = "upcoming"
    ongoing = "ongoing"
    completed = "completed"


class PriceType(str, Enum):
    free = "free"
    paid = "paid"


# applied when a client sends null for the field
INTERNSHIP_DEFAULTS = {
    "price_type": PriceType.free,
    "price_value": 0,
    "mode": InternshipMode.online,
    "status": InternshipStatus.upcoming,
    "is_published": False,
}


class InternshipBase(SQLModel):
    title: str
    description: Optional[str] = None
    long_description: Optional[str] = None
    duration_days: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price_type: PriceType = PriceType.free
    price_value: float = 0
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    mentors: List[str] = Field(default_factory=list, sa_type=JSON)
    features: List[str] = Field(default_factory=list, sa_type=JSON)
    requirements: List[str] = Field(default_factory=list, sa_type=JSON)
    benefits: List[str] = Field(default_factory=list, sa_type=JSON)
    location: Optional[str] = None
    mode: InternshipMode = InternshipMode.online
    application_link: Optional[str] = None
    max_applicants: Optional[int] = None
    status: InternshipStatus = InternshipStatus.upcoming
    organization_name: Optional[str] = None
    image_url: Optional[str] = None
    is_published: bool = False
    # {"completion": {"title", "template"}, "internship": {"title", "template"}}
    certificate_template: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSON)

    @field_validator(*INTERNSHIP_LIST_FIELDS, mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return value or []

    @field_validator(*INTERNSHIP_DEFAULTS, mode="before")
    @classmethod
    def none_as_default(cls, value, info: ValidationInfo):
        return INTERNSHIP_DEFAULTS[info.field_name] if value is None else value


class Internship(InternshipBase, table=True):
    __tablename__ = "internships"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    rating: float = 0
    review_count: int = 0
    slug: Optional[str] = None
    created_by: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    tasks: List["Task"] = Relationship(
        back_populates="internship", sa_relationship_kwargs={"passive_deletes": True}
    )
