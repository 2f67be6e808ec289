# server/routes/home_routes.py
"""Dashboard"""
from fastapi import APIRouter, Depends

from core.logger import get_logger
from dependencies import get_statistics_service
from schemas.statistics import DashboardSummary
from services.statistics_service import StatisticsService
from utils.exceptions import StorageError
from views import dashboard_page
from .responses import page

logger = get_logger(__name__)

router = APIRouter(tags=["Dashboard"])


@router.get("/")
async def dashboard(statistics: StatisticsService = Depends(get_statistics_service)):
    """Totals and the most recently hired employees"""
    try:
        return page(dashboard_page(await statistics.dashboard()))
    except StorageError as e:
        logger.error(f"Error loading dashboard: {e}")
        return page(dashboard_page(
            DashboardSummary(),
            error="An error occurred while loading the dashboard. Please try again later."
        ), 500)
