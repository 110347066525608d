from fastapi import APIRouter, Depends
from sqlmodel import Session

from certifytrack.auth.auth_handler import require_admin
from certifytrack.configs.database import get_db
from certifytrack.schemas.dashboard_schema import DashboardStats
from certifytrack.services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return dashboard_service.get_dashboard_stats(db)
