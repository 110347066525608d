import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field

from certifytrack.utils.utils import utc_now


class SubscriptionStatus(str, Enum):
    active = "active"
    cancelled = "cancelled"
    completed = "completed"


class Subscription(SQLModel, table=True):
    """A student's enrolment in an internship."""
    __tablename__ = "internship_subscriptions"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    internship_id: uuid.UUID = Field(foreign_key="internships.id")
    user_id: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id")
    status: SubscriptionStatus = Field(default=SubscriptionStatus.active)
    subscribed_at: datetime = Field(default_factory=utc_now)
