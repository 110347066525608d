import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from minio import S3Error
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.cors import CORSMiddleware

from certifytrack.api import (
    auth_api,
    certificate_template_api,
    course_api,
    dashboard_api,
    internship_api,
    mentor_api,
    mentor_form_api,
    submission_api,
    task_api,
    upload_api,
)
from certifytrack.configs import settings
from certifytrack.configs.database import init_db
from certifytrack.errors import InvalidTransitionError, NotAuthenticatedError, NotFoundError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield

app = FastAPI(title="CertifyTrack Admin", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotAuthenticatedError)
async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
    return JSONResponse(status_code=401, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidTransitionError)
async def invalid_transition_handler(request: Request, exc: InvalidTransitionError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    # already logged where it was raised
    return JSONResponse(status_code=500, content={"detail": "Data store request failed"})


@app.exception_handler(S3Error)
async def storage_error_handler(request: Request, exc: S3Error):
    return JSONResponse(status_code=502, content={"detail": "Object storage request failed"})


# Include routers
app.include_router(auth_api.router)
app.include_router(dashboard_api.router)
app.include_router(course_api.router)
app.include_router(internship_api.router)
app.include_router(task_api.router)
app.include_router(task_api.course_task_router)
app.include_router(mentor_api.router)
app.include_router(mentor_form_api.router)
app.include_router(certificate_template_api.router)
app.include_router(submission_api.router)
app.include_router(upload_api.router)


@app.get("/health")
def health():
    return {"status": "ok"}
