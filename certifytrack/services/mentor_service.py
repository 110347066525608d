import base64
import logging
import uuid
from typing import List, Optional

from sqlmodel import Session, select, col

from certifytrack.configs.database import store_errors
from certifytrack.models import Mentor
from certifytrack.schemas.mentor_schema import MentorCreate, MentorProfileUpdate
from certifytrack.utils.utils import utc_now

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN = "Not Specified"
MENTOR_FORM_PATH = "/mentor/form"


def create_mentor(db: Session, data: MentorCreate) -> Mentor:
    """Invite a mentor by email; the rest of the profile is filled in through the mentor form."""
    mentor = Mentor(
        email=data.email,
        full_name=data.email.split("@")[0],
        domain=DEFAULT_DOMAIN,
    )
    with store_errors(db, "creating mentor"):
        db.add(mentor)
        db.commit()
        db.refresh(mentor)
    logger.info("Invited mentor %s", mentor.email)
    return mentor


def get_mentors(db: Session) -> List[Mentor]:
    statement = select(Mentor).order_by(col(Mentor.joined_on).desc())
    with store_errors(db, "fetching mentors"):
        return db.exec(statement).all()


def get_mentor_by_email(db: Session, email: str) -> Optional[Mentor]:
    statement = select(Mentor).where(Mentor.email == email)
    with store_errors(db, "fetching mentor"):
        return db.exec(statement).first()


def update_mentor(db: Session, mentor_id: uuid.UUID, data: MentorProfileUpdate, **stamps) -> Optional[Mentor]:
    update_data = data.model_dump(exclude_unset=True)
    update_data["updated_at"] = utc_now()
    update_data.update(stamps)
    with store_errors(db, "updating mentor"):
        mentor = db.get(Mentor, mentor_id)
        if not mentor:
            return None
        for key, value in update_data.items():
            setattr(mentor, key, value)
        db.add(mentor)
        db.commit()
        db.refresh(mentor)
    return mentor


def delete_mentor(db: Session, mentor_id: uuid.UUID) -> bool:
    with store_errors(db, "deleting mentor"):
        mentor = db.get(Mentor, mentor_id)
        if not mentor:
            return False
        db.delete(mentor)
        db.commit()
    return True


def generate_mentor_form_link(email: str) -> str:
    encoded = base64.b64encode(email.encode("utf-8")).decode("ascii")
    return f"{MENTOR_FORM_PATH}/{encoded}"


def decode_mentor_form_email(encoded: str) -> str:
    """Reverse `generate_mentor_form_link`. Raises ValueError when `encoded` is not a valid link token."""
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8")
    except ValueError as e:
        raise ValueError(f"Invalid mentor form token: {encoded!r}") from e


def submit_mentor_form(db: Session, email: str, data: MentorProfileUpdate) -> Optional[Mentor]:
    """Save a mentor's self-service profile and record when they were last active."""
    mentor = get_mentor_by_email(db, email)
    if not mentor:
        return None
    updated = update_mentor(db, mentor.id, data, last_active=utc_now())
    logger.info("Mentor %s updated their profile", email)
    return updated
