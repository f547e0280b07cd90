# app/routers/admin_stats.py
from fastapi import APIRouter, Depends
from supabase import Client

from app.core.config import get_settings
from app.core.supabase_client import get_supabase
from app.repositories.stats_repo import StatsRepository
from app.schemas.stats import DashboardStats
from app.services.stats_service import StatsService

router = APIRouter(prefix="/admin/stats", tags=["Admin Stats"])

repo = StatsRepository()
service = StatsService(repo, timezone_name=get_settings().DASHBOARD_TIMEZONE)


@router.get(
    "",
    response_model=DashboardStats,
)
async def get_admin_dashboard_stats(
    client: Client = Depends(get_supabase),
):
    """
    Aggregated statistics for the admin dashboard.

    Always answers 200. Metrics whose query failed are null and listed
    in `failures`, with `is_partial` set.

    Never cached: the 7-day chart window starts from the request time.
    """
    return await service.get_dashboard_stats(client)
