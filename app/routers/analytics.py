# app/routers/analytics.py
from fastapi import APIRouter, Depends, Query
from supabase import Client

from app.core.query_cache import query_cache
from app.core.supabase_client import get_supabase
from app.repositories.analytics_repo import AnalyticsRepository
from app.schemas.analytics import (
    CategorySales,
    ConversionMetrics,
    RecentActivity,
    SalesByPeriodRow,
    SalesPeriod,
    TopSellingProduct,
)
from app.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])

repo = AnalyticsRepository()
service = AnalyticsService(repo, query_cache)


@router.get(
    "/sales-by-period",
    response_model=list[SalesByPeriodRow],
)
def get_sales_by_period(
    period: SalesPeriod = SalesPeriod.month,
    client: Client = Depends(get_supabase),
):
    """
    Sales grouped by the given period (week | month | year).
    """
    return service.sales_by_period(client, period)


@router.get(
    "/top-products",
    response_model=list[TopSellingProduct],
)
def get_top_selling_products(
    limit: int = Query(5, ge=1, le=100),
    client: Client = Depends(get_supabase),
):
    return service.top_selling_products(client, limit)


@router.get(
    "/sales-by-category",
    response_model=list[CategorySales],
)
def get_sales_by_category(client: Client = Depends(get_supabase)):
    return service.sales_by_category(client)


@router.get(
    "/conversion-metrics",
    response_model=ConversionMetrics,
)
def get_conversion_metrics(client: Client = Depends(get_supabase)):
    """
    Order/revenue totals, today's figures and open order counts.
    """
    return service.conversion_metrics(client)


@router.get(
    "/recent-activity",
    response_model=list[RecentActivity],
)
def get_recent_activity(
    limit: int = Query(10, ge=1, le=100),
    client: Client = Depends(get_supabase),
):
    """
    Latest orders and reviews, newest first.
    """
    return service.recent_activity(client, limit)
