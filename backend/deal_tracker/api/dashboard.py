from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from deal_tracker.core.database import get_db
from deal_tracker.schemas.views import DashboardStatistics
from deal_tracker.services.overview import build_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStatistics)
def get_dashboard_statistics(db: Session = Depends(get_db)):
    """Счетчики для главной страницы: всего, активные, закрытые, созданные в этом месяце"""
    return build_dashboard(db)
