# backend/modules/dashboard/routers/stats_router.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from modules.dashboard.schemas.dashboard_schemas import DashboardStats
from modules.dashboard.services.stats_service import DashboardStatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    """Get summary statistics for the dashboard"""

    try:
        return DashboardStatsService(db).get_stats()

    except Exception as e:
        logger.error(f"Error fetching stats: {e}")
        raise HTTPException(status_code=500, detail="Error fetching stats")
