import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session

from .settings import settings

logger = logging.getLogger(__name__)

DATABASE_URL = f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASSWORD}@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"

engine = create_engine(DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)

def init_db():
    SQLModel.metadata.create_all(engine)

def get_db():
    with Session(engine) as session:
        yield session


@contextmanager
def store_errors(db: Session, action: str):
    """Log a failed store call, roll the session back and re-raise the error unchanged."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Error %s: %s", action, e)
        db.rollback()
        raise
